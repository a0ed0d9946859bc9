"""
Service layer for the recommendation proxy.

Services sit between the routes (HTTP layer) and the Gemini client:
- gemini_service wraps the google-genai SDK behind the TextGenerator protocol
- recommendation_service runs one provider call and classifies failures
"""

from .gemini_service import GeminiTextGenerator, TextGenerator
from .recommendation_service import generate_recommendation

__all__ = [
    "GeminiTextGenerator",
    "TextGenerator",
    "generate_recommendation",
]
