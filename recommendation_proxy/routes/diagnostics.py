"""
Diagnostics routes for checking connectivity during development.

Endpoints:
- GET /test: JSON liveness check reachable from a browser
- POST /api/simple-test: raw prompt round trip to Gemini, without the
  localized error classification of /api/get-recommendation

Registered only when ENABLE_DIAGNOSTICS is on (default outside production).
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from recommendation_proxy.config import Settings
from recommendation_proxy.dependencies import get_settings, get_text_generator
from recommendation_proxy.errors import error_details, provider_status
from recommendation_proxy.schemas.health import StatusResponse
from recommendation_proxy.schemas.recommendations import (
    ErrorResponse,
    PromptRequest,
    SimpleTestResponse,
)
from recommendation_proxy.services.gemini_service import TextGenerator
from recommendation_proxy.utils.logging import preview

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagnostics"])


@router.get("/test", response_model=StatusResponse)
async def test_endpoint() -> StatusResponse:
    return StatusResponse()


@router.post(
    "/api/simple-test",
    response_model=SimpleTestResponse,
    responses={500: {"model": ErrorResponse}},
)
async def simple_test_endpoint(
    request: PromptRequest,
    generator: TextGenerator = Depends(get_text_generator),
    settings: Settings = Depends(get_settings),
):
    """Send the prompt to Gemini and report the raw outcome."""
    logger.info(f"Diagnostics prompt: '{preview(request.prompt)}'")
    try:
        text = await generator.generate_text(request.prompt)
    except Exception as e:
        logger.error(f"Error calling Gemini API: {e}", exc_info=True)
        body = ErrorResponse(
            error=settings.messages.diagnostics_failure,
            details=error_details(e),
            status=provider_status(e),
        )
        return JSONResponse(status_code=500, content=body.model_dump(by_alias=True, exclude_none=True))

    return SimpleTestResponse(success=True, text=text)
