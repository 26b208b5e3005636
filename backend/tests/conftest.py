import json
from typing import Callable, List

import httpx
import pytest

from testcase_generator.core.config import Settings
from testcase_generator.providers.groq_provider import GroqProvider

TEST_API_KEY = "gsk_test_0123456789abcdef"
TEST_API_URL = "https://llm.test/openai/v1/chat/completions"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


def completion_body(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        groq_api_key=TEST_API_KEY,
        groq_api_url=TEST_API_URL,
    )


@pytest.fixture
def make_provider(settings: Settings):
    """Build a GroqProvider whose HTTP traffic goes to a RecordingTransport."""

    def _make(handler: Handler, provider_settings: Settings | None = None):
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        provider = GroqProvider(provider_settings or settings, client=client)
        return provider, transport

    return _make
