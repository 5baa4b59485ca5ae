import logging
import logging.config
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from playforge.config import Settings
from playforge.routers.generate import router as generate_router
from playforge.routers.pages import router as pages_router
from playforge.routers.save import router as save_router
from playforge.services.model_client import ModelClient

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )


def create_app(
    settings: Optional[Settings] = None, model_client: Optional[ModelClient] = None
) -> FastAPI:
    """Build the application.

    Without explicit arguments the settings are read from the environment,
    so a missing ``OPENAI_API_KEY`` stops start-up with ``ConfigError``.
    """
    if settings is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
    if model_client is None:
        model_client = ModelClient.from_settings(settings)

    app = FastAPI(
        title="Playforge – Prompt-to-Game Studio",
        description="Turns a prompt (and optional image) into a self-contained HTML game and serves it back.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.model_client = model_client

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(generate_router)
    app.include_router(save_router)
    app.include_router(pages_router)

    @app.get("/", summary="Health check")
    async def root() -> dict:
        return {"message": "Hello from Playforge"}

    logger.info(
        "Application created (model %s, content dir %s)", model_client.model, settings.content_dir
    )
    return app


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.warning("Invalid request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred."})


def _validation_message(exc: RequestValidationError) -> str:
    """Turn the first validation error into a one-line message naming the field."""
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
    if error.get("type") == "missing":
        return f"`{field}` must be provided"
    if error.get("type") == "string_type":
        return f"`{field}` must be a string"
    if error.get("type") == "string_too_short":
        return f"`{field}` must be a non-empty string"
    return f"`{field}` is invalid: {error.get('msg', 'invalid value')}"


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        create_app(),
        host=os.getenv("PLAYFORGE_HOST", "127.0.0.1"),
        port=int(os.getenv("PLAYFORGE_PORT", "8000")),
    )


if __name__ == "__main__":
    run()
