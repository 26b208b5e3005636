from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CompletionErrorKind(str, Enum):
    CONFIG = "config"
    HTTP = "http"
    # 200 response whose body lacks choices[0].message.content
    SHAPE = "shape"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class CompletionError:
    kind: CompletionErrorKind
    message: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class CompletionResult:
    """Either the completion text or a structured error, never both."""

    text: Optional[str] = None
    error: Optional[CompletionError] = None

    @classmethod
    def success(cls, text: str) -> "CompletionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: CompletionError) -> "CompletionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_text(self) -> str:
        if self.error is not None:
            return self.error.message
        return self.text or ""


class CompletionProvider(ABC):
    """
    Interface for chat-completion backends used to generate test cases.

    Implementations own the HTTP call and response extraction; callers
    only see a CompletionResult.
    """

    @abstractmethod
    async def request_completion(self, prompt: str) -> CompletionResult:
        """
        Send the prompt to the LLM and return the outcome.

        Configuration, HTTP, response-shape and transport failures are
        returned as CompletionResult errors rather than raised.
        """
        ...

    async def complete(self, prompt: str) -> str:
        """Return the generated text, or a descriptive failure string."""
        result = await self.request_completion(prompt)
        return result.as_text()

    async def close(self) -> None:
        return None
