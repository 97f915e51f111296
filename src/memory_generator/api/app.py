"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from memory_generator.api.ar_sessions import router as ar_sessions_router
from memory_generator.api.generation import router as generation_router
from memory_generator.api.loved_ones import router as loved_ones_router
from memory_generator.app_logging import configure_logging
from memory_generator.config import parse_cors_origins
from memory_generator.containers import AppContainer
from memory_generator.errors import MemoryGeneratorError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.ar_session_service.initialize()
        except MemoryGeneratorError:
            logger.exception("Failed to initialize AR session storage")
        if not settings.openai_api_key:
            logger.warning(
                "OPENAI_API_KEY is not set; image generation requests will fail"
            )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Memory Generator API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MemoryGeneratorError)
    async def handle_app_error(
        request: Request, exc: MemoryGeneratorError
    ) -> JSONResponse:
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"error": _describe_validation_error(exc)}
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Server error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500, content={"error": f"Internal server error: {exc}"}
        )

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok", "message": "Memory Generator API is running"}

    app.include_router(loved_ones_router)
    app.include_router(generation_router)
    app.include_router(ar_sessions_router)

    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.uploads_url_prefix,
        StaticFiles(directory=settings.uploads_dir),
        name="uploads",
    )
    if settings.public_dir.is_dir():
        app.mount(
            "/", StaticFiles(directory=settings.public_dir, html=True), name="public"
        )

    return app


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Return a short message for the first request validation error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    if location:
        return f"Invalid request: {location}: {message}"
    return f"Invalid request: {message}"
