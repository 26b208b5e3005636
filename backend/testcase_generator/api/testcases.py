from typing import AsyncIterator

from fastapi import APIRouter, Depends

from testcase_generator.core.config import Settings, get_settings
from testcase_generator.providers.base import CompletionProvider
from testcase_generator.providers.groq_provider import GroqProvider
from testcase_generator.schemas.testcase import TestCaseRequest, TestCaseResponse
from testcase_generator.services.testcase_service import TestCaseService


router = APIRouter()

GENERATE_PATH = "/generate-testcases"


async def get_completion_provider(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[CompletionProvider]:
    provider = GroqProvider(settings)
    try:
        yield provider
    finally:
        await provider.close()


def get_testcase_service(
    provider: CompletionProvider = Depends(get_completion_provider),
) -> TestCaseService:
    return TestCaseService(provider)


@router.post(
    GENERATE_PATH,
    response_model=TestCaseResponse,
    summary="Generate test cases from a requirement",
)
async def generate_test_cases(
    payload: TestCaseRequest,
    service: TestCaseService = Depends(get_testcase_service),
) -> TestCaseResponse:
    """
    Generate test cases for a natural-language requirement.

    Always answers HTTP 200; check ``success`` in the body.
    """
    return await service.generate(payload)
