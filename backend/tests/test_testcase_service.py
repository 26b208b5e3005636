import asyncio

import httpx
import pytest

from testcase_generator.core.config import Settings
from testcase_generator.providers.base import (
    CompletionError,
    CompletionErrorKind,
    CompletionProvider,
    CompletionResult,
)
from testcase_generator.schemas.testcase import TestCaseRequest
from testcase_generator.services.testcase_service import (
    FAILURE_TEST_CASES,
    SUCCESS_MESSAGE,
    TestCaseService,
)

from tests.conftest import completion_body


class StaticProvider(CompletionProvider):
    def __init__(self, result: CompletionResult) -> None:
        self.result = result
        self.prompts = []

    async def request_completion(self, prompt: str) -> CompletionResult:
        self.prompts.append(prompt)
        return self.result


class ExplodingProvider(CompletionProvider):
    async def request_completion(self, prompt: str) -> CompletionResult:
        raise RuntimeError("socket closed")


def _generate(provider: CompletionProvider, prompt: str):
    service = TestCaseService(provider)
    return asyncio.run(service.generate(TestCaseRequest(prompt=prompt)))


def test_success_wraps_completion_text():
    provider = StaticProvider(CompletionResult.success("=== TEST CASE 1 ==="))

    response = _generate(provider, "Login fails")

    assert response.success is True
    assert response.message == SUCCESS_MESSAGE
    assert response.test_cases == "=== TEST CASE 1 ==="
    assert provider.prompts == ["Login fails"]


def test_empty_prompt_is_forwarded():
    provider = StaticProvider(CompletionResult.success("cases"))

    response = _generate(provider, "")

    assert response.success is True
    assert provider.prompts == [""]


@pytest.mark.parametrize(
    "error",
    [
        CompletionError(CompletionErrorKind.CONFIG, "ERROR: API key not configured properly. Current value: None"),
        CompletionError(CompletionErrorKind.HTTP, "Failed to generate test cases. HTTP Status: 502 Bad Gateway", 502),
        CompletionError(CompletionErrorKind.SHAPE, "Failed to generate test cases. HTTP Status: 200 OK", 200),
        CompletionError(CompletionErrorKind.TRANSPORT, "Error occurred while generating test cases: timed out"),
    ],
)
def test_provider_errors_become_failure_envelope(error):
    response = _generate(StaticProvider(CompletionResult.failure(error)), "req")

    assert response.success is False
    assert response.message == f"Error generating test cases: {error.message}"
    assert response.test_cases == FAILURE_TEST_CASES


def test_unexpected_exception_is_caught():
    response = _generate(ExplodingProvider(), "req")

    assert response.success is False
    assert response.message == "Error generating test cases: socket closed"
    assert response.test_cases == FAILURE_TEST_CASES


def test_connection_error_through_groq_provider(make_provider):
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider, _ = make_provider(_refuse)

    response = _generate(provider, "req")

    assert response.success is False
    assert "connection refused" in response.message
    assert response.test_cases == FAILURE_TEST_CASES


def test_unconfigured_key_makes_no_request(make_provider):
    def _unreachable(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    settings = Settings(_env_file=None, groq_api_key=None)
    provider, transport = make_provider(_unreachable, settings)

    response = _generate(provider, "req")

    assert response.success is False
    assert "not configured properly" in response.message
    assert transport.requests == []


def test_success_through_groq_provider(make_provider):
    provider, _ = make_provider(lambda r: httpx.Response(200, json=completion_body("X")))

    response = _generate(provider, "req")

    assert response.success is True
    assert response.test_cases == "X"
