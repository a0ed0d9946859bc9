"""
Tests for failure classification and error rendering.
"""

import pytest

from recommendation_proxy.errors import (
    EmptyResponseError,
    FailureKind,
    MissingApiKeyError,
    RecommendationError,
    classify_failure,
    error_details,
    provider_status,
)
from recommendation_proxy.messages import VIETNAMESE


class StatusError(Exception):
    def __init__(self, message, code=None, status=None):
        super().__init__(message)
        self.code = code
        self.status = status


class TestClassifyFailure:

    def test_missing_key_takes_priority(self):
        error = StatusError("You exceeded your current quota", code=429)
        assert classify_failure(error, api_key_configured=False) is FailureKind.MISSING_KEY

    @pytest.mark.parametrize("message", [
        "You exceeded your current quota",
        "429 RESOURCE_EXHAUSTED. Quota exceeded for metric",
        "QUOTA",
    ])
    def test_quota_detected(self, message):
        assert classify_failure(Exception(message), api_key_configured=True) is FailureKind.QUOTA_EXCEEDED

    @pytest.mark.parametrize("error", [
        Exception("500 INTERNAL. An internal error has occurred."),
        EmptyResponseError("gemini-2.5-flash"),
        TypeError("'NoneType' object is not subscriptable"),
    ])
    def test_everything_else_is_generic(self, error):
        assert classify_failure(error, api_key_configured=True) is FailureKind.GENERIC


class TestProviderStatus:

    def test_numeric_code(self):
        assert provider_status(StatusError("x", code=429, status="RESOURCE_EXHAUSTED")) == 429

    def test_status_name_when_no_code(self):
        assert provider_status(StatusError("x", status="UNAVAILABLE")) == "UNAVAILABLE"

    def test_unknown(self):
        assert provider_status(ValueError("x")) == "unknown"

    def test_bool_attributes_ignored(self):
        assert provider_status(StatusError("x", code=True)) == "unknown"


class TestRecommendationError:

    def test_details_fall_back_to_type_name(self):
        assert error_details(RuntimeError()) == "RuntimeError"

    def test_from_missing_key_exception(self):
        error = RecommendationError.from_exception(
            MissingApiKeyError(), messages=VIETNAMESE, api_key_configured=False
        )

        assert error.status_code == 500
        assert error.to_content() == {
            "error": VIETNAMESE.missing_api_key,
            "details": MissingApiKeyError().message,
            "status": "unknown",
            "missingKey": True,
        }

    def test_generic_keeps_raw_details(self):
        error = RecommendationError.from_exception(
            StatusError("503 UNAVAILABLE", code=503),
            messages=VIETNAMESE,
            api_key_configured=True,
        )

        assert error.kind is FailureKind.GENERIC
        assert error.to_content()["details"] == "503 UNAVAILABLE"
        assert error.to_content()["missingKey"] is False

    def test_missing_key_flag_omitted_when_unset(self):
        error = RecommendationError(message="m", details="d")
        assert "missingKey" not in error.to_content()
