"""
Single entrypoint for the AI Testcase Generator service.

Run from backend directory: uvicorn testcase_generator.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from testcase_generator.api import register_routes
from testcase_generator.api.errors import register_exception_handlers
from testcase_generator.core.config import get_settings
from testcase_generator.core.logging_config import configure_logging


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.
    """
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title="AI Testcase Generator",
        description=(
            "Internal backend service that turns natural-language requirements "
            "into test cases using the Groq chat-completions API."
        ),
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "testcase_generator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
    )
