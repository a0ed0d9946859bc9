"""
Recommendation Service - single Gemini call per request.

Flow:
1. Log a preview of the prompt
2. Ask the TextGenerator for text (one call, no retries, no caching)
3. Return RecommendationResponse, or raise RecommendationError with the
   failure classified as missing key, quota exhaustion or generic
"""

import logging

from recommendation_proxy.config import Settings
from recommendation_proxy.errors import FailureKind, RecommendationError
from recommendation_proxy.schemas.recommendations import RecommendationResponse
from recommendation_proxy.services.gemini_service import TextGenerator
from recommendation_proxy.utils.logging import preview

logger = logging.getLogger(__name__)


async def generate_recommendation(
    generator: TextGenerator,
    prompt: str,
    settings: Settings,
) -> RecommendationResponse:
    """
    Generate a recommendation for a prompt.

    Args:
        generator: Provider client (Gemini in production, a fake in tests)
        prompt: User prompt, forwarded unchanged
        settings: Application settings (API key presence and messages)

    Returns:
        RecommendationResponse with the generated text

    Raises:
        RecommendationError: Any failure of the provider call
    """
    logger.info(f"Received prompt: '{preview(prompt)}'")

    try:
        text = await generator.generate_text(prompt)
    except Exception as e:
        error = RecommendationError.from_exception(
            e,
            messages=settings.messages,
            api_key_configured=settings.provider.has_api_key,
        )
        logger.error(
            f"Gemini call failed ({error.kind.value}, status={error.status}): {error.details}",
            exc_info=True,
        )
        if error.kind is FailureKind.MISSING_KEY:
            logger.error("API KEY IS MISSING - This is causing the error")
        raise error from e

    logger.info(f"Response text received ({len(text)} chars)")
    return RecommendationResponse(recommendation=text)
