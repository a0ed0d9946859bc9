"""
FastAPI application entry point for the recommendation proxy.

create_app() builds the app from explicitly injected settings and text
generator; the module-level `app` is built from the environment for uvicorn.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recommendation_proxy import __version__
from recommendation_proxy.config import Settings
from recommendation_proxy.cors import OriginGate, OriginGateMiddleware
from recommendation_proxy.errors import RecommendationError
from recommendation_proxy.routes.diagnostics import router as diagnostics_router
from recommendation_proxy.routes.frontend import mount_frontend
from recommendation_proxy.routes.health import router as health_router
from recommendation_proxy.routes.recommendations import router as recommendations_router
from recommendation_proxy.schemas.recommendations import ErrorResponse
from recommendation_proxy.services.gemini_service import GeminiTextGenerator, TextGenerator
from recommendation_proxy.utils.logging import LOG_FORMAT

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    """Install the console handler and apply the configured LOG_LEVEL to the root logger."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, log_level.upper(), logging.INFO))


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body"


def create_app(
    settings: Optional[Settings] = None,
    text_generator: Optional[TextGenerator] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings; read from the environment if omitted
        text_generator: Provider client; a GeminiTextGenerator built from
            settings.provider if omitted

    Returns:
        Configured FastAPI app
    """
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings.log_level)
    if text_generator is None:
        text_generator = GeminiTextGenerator(settings.provider)

    app = FastAPI(
        title="Recommendation Proxy API",
        description="Relays prompts from the frontend to Google Gemini",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.text_generator = text_generator

    @app.exception_handler(RecommendationError)
    async def recommendation_exception_handler(request: Request, exc: RecommendationError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject malformed bodies with the same error shape as provider failures."""
        details = _describe_validation_errors(exc)
        logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
        body = ErrorResponse(
            error=settings.messages.invalid_prompt,
            details=details,
            status=status.HTTP_400_BAD_REQUEST,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True, exclude_none=True),
        )

    logger.info(f"Allowed CORS origins: {list(settings.allowed_origins)}")
    gate = OriginGate(settings.allowed_origins, hosting_domain=settings.hosting_domain)
    app.add_middleware(
        OriginGateMiddleware,
        gate=gate,
        rejection_message=settings.messages.cors_blocked,
    )

    app.include_router(recommendations_router)
    app.include_router(health_router)
    if settings.enable_diagnostics:
        app.include_router(diagnostics_router)

    # Catch-all frontend route goes last
    if settings.is_production():
        mount_frontend(app, settings.static_dir)

    logger.info("FastAPI app initialized successfully")
    return app


app = create_app()
