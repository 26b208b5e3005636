from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()

HEALTH_MESSAGE = "Service is running!"


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Service health check",
    tags=["health"],
)
async def health_check() -> str:
    """
    Liveness probe. Performs no dependency checks.
    """
    return HEALTH_MESSAGE
