"""
FastAPI routes for the recommendation proxy endpoint.

Endpoints:
- POST /api/get-recommendation: forward a prompt to Gemini and relay the text
"""

import logging

from fastapi import APIRouter, Depends

from recommendation_proxy.config import Settings
from recommendation_proxy.dependencies import get_settings, get_text_generator
from recommendation_proxy.schemas.recommendations import (
    ErrorResponse,
    PromptRequest,
    RecommendationResponse,
)
from recommendation_proxy.services.gemini_service import TextGenerator
from recommendation_proxy.services.recommendation_service import generate_recommendation

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["recommendations"]
)


@router.post(
    "/get-recommendation",
    response_model=RecommendationResponse,
    status_code=200,
    summary="Generate a recommendation from a prompt",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or blank prompt"},
        500: {"model": ErrorResponse, "description": "Provider call failed"},
    },
    description="""
    Forwards the prompt to Google Gemini and returns the generated text.

    **Failure classification (HTTP 500):**
    - API key not configured: configuration message, `missingKey: true`
    - Provider quota exhausted: retry-later message
    - Anything else: generic failure message

    `details` and `status` always carry the raw provider error.
    """
)
async def get_recommendation_endpoint(
    request: PromptRequest,
    generator: TextGenerator = Depends(get_text_generator),
    settings: Settings = Depends(get_settings),
) -> RecommendationResponse:
    """
    Recommendation endpoint.

    - Parse/Validate: PromptRequest (blank prompts never reach Gemini)
    - Call LLM: one call through the service layer
    - Errors: RecommendationError, rendered by the app exception handler
    """
    return await generate_recommendation(generator, request.prompt, settings)
