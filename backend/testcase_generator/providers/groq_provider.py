from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from testcase_generator.core.config import Settings
from testcase_generator.core.logging_config import mask_secret
from testcase_generator.providers.base import (
    CompletionError,
    CompletionErrorKind,
    CompletionProvider,
    CompletionResult,
)
from testcase_generator.utils.prompt_builder import build_chat_payload

logger = logging.getLogger(__name__)


def extract_completion_text(data: Any) -> Optional[str]:
    """Return choices[0].message.content, or None if any level is missing."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first_choice = choices[0]
    if not isinstance(first_choice, dict):
        return None
    message = first_choice.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if content is None:
        return None
    return content if isinstance(content, str) else str(content)


class GroqProvider(CompletionProvider):
    """
    Completion client for the Groq OpenAI-compatible chat-completions API.

    One POST per call, no retries. Settings are injected; pass ``client``
    to reuse a connection pool or to stub the transport.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(float(settings.groq_timeout_seconds), connect=10.0),
        )
        self._log = log or logger

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def request_completion(self, prompt: str) -> CompletionResult:
        api_key = self._settings.groq_api_key
        api_url = self._settings.groq_api_url

        self._log.debug(
            "Groq config: url=%s key_prefix=%s", api_url, mask_secret(api_key)
        )

        if not self._settings.groq_api_key_configured:
            self._log.warning("Groq API key missing or placeholder; skipping request")
            return CompletionResult.failure(
                CompletionError(
                    kind=CompletionErrorKind.CONFIG,
                    message=f"ERROR: API key not configured properly. Current value: {api_key}",
                )
            )

        payload = build_chat_payload(prompt, model=self._settings.groq_model)
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._log.info(
            "Groq request: model=%s max_tokens=%s", payload.model, payload.max_tokens
        )

        try:
            response = await self._client.post(
                api_url,
                json=payload.model_dump(),
                headers=headers,
            )
            status_text = f"{response.status_code} {response.reason_phrase}".strip()
            if response.status_code == httpx.codes.OK:
                content = extract_completion_text(response.json())
                if content is not None:
                    return CompletionResult.success(content)
                self._log.warning("Groq response missing choices[0].message.content")
                return CompletionResult.failure(
                    CompletionError(
                        kind=CompletionErrorKind.SHAPE,
                        message=f"Failed to generate test cases. HTTP Status: {status_text}",
                        status_code=response.status_code,
                    )
                )

            self._log.warning("Groq request failed: status=%s", status_text)
            return CompletionResult.failure(
                CompletionError(
                    kind=CompletionErrorKind.HTTP,
                    message=f"Failed to generate test cases. HTTP Status: {status_text}",
                    status_code=response.status_code,
                )
            )
        except (httpx.HTTPError, ValueError) as exc:
            self._log.exception("Groq request raised %s", type(exc).__name__)
            return CompletionResult.failure(
                CompletionError(
                    kind=CompletionErrorKind.TRANSPORT,
                    message=self._transport_error_message(exc),
                )
            )

    def _transport_error_message(self, exc: Exception) -> str:
        return (
            f"Error occurred while generating test cases: {exc}"
            "\n\nDEBUG INFO:"
            f"\nAPI Key configured: {self._settings.groq_api_key_configured}"
            f"\nAPI Key starts with: {mask_secret(self._settings.groq_api_key)}"
            "\nNote: Please ensure your Groq API key is properly configured "
            "in the environment variables (TESTGEN_GROQ_API_KEY)."
        )
