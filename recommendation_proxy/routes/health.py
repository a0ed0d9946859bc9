"""
Health check route.

PUBLIC endpoint used for uptime probing. It has no dependencies, so it keeps
answering even when Gemini is unreachable or the API key is missing.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> PlainTextResponse:
    """Return a fixed plaintext status."""
    return PlainTextResponse("Server is running", status_code=200)
