from __future__ import annotations

import logging

from testcase_generator.providers.base import CompletionProvider
from testcase_generator.schemas.testcase import TestCaseRequest, TestCaseResponse


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Test cases generated successfully"
FAILURE_MESSAGE_PREFIX = "Error generating test cases: "
FAILURE_TEST_CASES = "Failed to generate test cases. Please try again."


def failure_response(cause: str) -> TestCaseResponse:
    return TestCaseResponse(
        success=False,
        message=f"{FAILURE_MESSAGE_PREFIX}{cause}",
        test_cases=FAILURE_TEST_CASES,
    )


class TestCaseService:
    """
    Turns a requirement prompt into a response envelope.

    Never raises: every provider failure, and any unexpected exception,
    becomes a ``success=False`` envelope.
    """

    def __init__(self, provider: CompletionProvider) -> None:
        self._provider = provider

    async def generate(self, request: TestCaseRequest) -> TestCaseResponse:
        try:
            result = await self._provider.request_completion(request.prompt)
        except Exception as exc:
            logger.exception("Unexpected failure while generating test cases")
            return failure_response(str(exc))

        if not result.ok:
            assert result.error is not None
            logger.info(
                "Generation failed: kind=%s status=%s",
                result.error.kind.value,
                result.error.status_code,
            )
            return failure_response(result.error.message)

        return TestCaseResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            test_cases=result.text or "",
        )
