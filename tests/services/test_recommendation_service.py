"""
Tests for the recommendation service.

The service is exercised with fake generators; classification details are
covered in tests/test_errors.py.
"""

import pytest

from recommendation_proxy.errors import FailureKind, MissingApiKeyError, RecommendationError
from recommendation_proxy.messages import VIETNAMESE
from recommendation_proxy.schemas.recommendations import RecommendationResponse
from recommendation_proxy.services.recommendation_service import generate_recommendation


class TestGenerateRecommendation:

    @pytest.mark.asyncio
    async def test_success(self, settings, fake_generator):
        result = await generate_recommendation(fake_generator, "Tell me a joke", settings)

        assert result == RecommendationResponse(recommendation="Fake recommendation")
        assert fake_generator.calls == ["Tell me a joke"]

    @pytest.mark.asyncio
    async def test_missing_key(self, settings_without_key, generator_factory):
        generator = generator_factory(error=MissingApiKeyError())

        with pytest.raises(RecommendationError) as exc_info:
            await generate_recommendation(generator, "Tell me a joke", settings_without_key)

        error = exc_info.value
        assert error.kind is FailureKind.MISSING_KEY
        assert error.missing_key is True
        assert error.message == VIETNAMESE.missing_api_key
        assert isinstance(error.__cause__, MissingApiKeyError)

    @pytest.mark.asyncio
    async def test_quota(self, settings, generator_factory, provider_failure):
        generator = generator_factory(error=provider_failure("You exceeded your current quota", code=429))

        with pytest.raises(RecommendationError) as exc_info:
            await generate_recommendation(generator, "hi", settings)

        assert exc_info.value.kind is FailureKind.QUOTA_EXCEEDED
        assert exc_info.value.status == 429
        assert exc_info.value.details == "You exceeded your current quota"

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, settings, generator_factory, caplog):
        generator = generator_factory(error=RuntimeError("socket closed"))

        with pytest.raises(RecommendationError):
            await generate_recommendation(generator, "hi", settings)

        assert "Gemini call failed (generic" in caplog.text
        assert "socket closed" in caplog.text

    @pytest.mark.asyncio
    async def test_long_prompt_logged_truncated(self, settings, fake_generator, caplog):
        prompt = "x" * 500

        with caplog.at_level("INFO", logger="recommendation_proxy.services.recommendation_service"):
            await generate_recommendation(fake_generator, prompt, settings)

        assert prompt not in caplog.text
        assert "x" * 50 + "..." in caplog.text
        assert fake_generator.calls == [prompt]
