"""
Chat-completion provider layer.

All LLM-specific HTTP logic lives in provider implementations.
Business logic depends only on the CompletionProvider interface.
"""

from testcase_generator.providers.base import (
    CompletionError,
    CompletionErrorKind,
    CompletionProvider,
    CompletionResult,
)
from testcase_generator.providers.groq_provider import GroqProvider

__all__ = [
    "CompletionError",
    "CompletionErrorKind",
    "CompletionProvider",
    "CompletionResult",
    "GroqProvider",
]
