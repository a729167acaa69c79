"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog.config import Settings
from blog.interface.api.routes import admin, comments, health
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed input with 400 and the first problem as the message."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", ())),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logfire.warn("Request validation failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": errors[0]["message"] if errors else "Validation failed",
            "errors": errors,
        },
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production ``scripts/start_app.py`` does it.

    Args:
        container: DI container to use (tests pass one with mocked
            persistence); the production container is built otherwise
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog Comments API",
        description="Threaded comments and moderation for the blog",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,  # Session cookie
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    app_instance.add_exception_handler(RequestValidationError, validation_error_handler)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)

    return app_instance


# App instance for uvicorn; Logfire must be configured before import
app = create_app()
