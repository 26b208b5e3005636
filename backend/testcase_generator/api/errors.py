"""
Exception handlers for the API.

Malformed bodies sent to the generation endpoint are answered in-band
(HTTP 200, ``success=False``) like every other generation failure. Other
routes keep FastAPI's default 422 response.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from testcase_generator.api.testcases import GENERATE_PATH
from testcase_generator.services.testcase_service import failure_response


logger = logging.getLogger(__name__)


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "request body could not be parsed"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    if not request.url.path.endswith(GENERATE_PATH):
        return await request_validation_exception_handler(request, exc)

    detail = _describe(exc)
    logger.info("Rejected generation request: %s", detail)
    envelope = failure_response(f"Invalid request: {detail}")
    return JSONResponse(status_code=200, content=envelope.model_dump(by_alias=True))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
