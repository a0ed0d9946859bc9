"""
Custom exceptions and failure classification for the recommendation proxy.

Classification is best-effort: quota errors are recognised by a substring of
the raw provider message. Whatever the classification, the raw message and
the provider status are always forwarded so nothing diagnostic is lost.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from recommendation_proxy.messages import Messages

QUOTA_MARKER = "quota"
UNKNOWN_STATUS = "unknown"


class ProxyError(Exception):
    """Base exception for recommendation proxy errors."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MissingApiKeyError(ProxyError):
    """Raised when a provider call is attempted without an API key."""

    def __init__(self):
        super().__init__(
            "GEMINI_API_KEY is not configured. "
            "Set it in the environment to enable Gemini calls."
        )


class EmptyResponseError(ProxyError):
    """Raised when the provider answers without any text."""

    def __init__(self, model_name: str):
        super().__init__(f"Empty text in response from model '{model_name}'")


class FailureKind(str, Enum):
    MISSING_KEY = "missing_key"
    QUOTA_EXCEEDED = "quota_exceeded"
    GENERIC = "generic"


def error_details(exc: BaseException) -> str:
    """Raw message of an exception, falling back to its type name."""
    return str(exc) or type(exc).__name__


def provider_status(exc: BaseException) -> Union[int, str]:
    """
    Status reported by the provider for a failed call.

    google-genai APIError exposes the HTTP code as `code` and the canonical
    status name (e.g. RESOURCE_EXHAUSTED) as `status`.
    """
    for attr in ("code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, (int, str)) and not isinstance(value, bool) and value != "":
            return value
    return UNKNOWN_STATUS


def classify_failure(exc: BaseException, api_key_configured: bool) -> FailureKind:
    """Sort a failed provider call into one of the three failure kinds."""
    if not api_key_configured:
        return FailureKind.MISSING_KEY
    if QUOTA_MARKER in error_details(exc).lower():
        return FailureKind.QUOTA_EXCEEDED
    return FailureKind.GENERIC


class RecommendationError(ProxyError):
    """Raised when a recommendation cannot be produced; rendered as HTTP 500."""

    def __init__(
        self,
        message: str,
        details: str,
        status: Union[int, str] = UNKNOWN_STATUS,
        missing_key: Optional[bool] = None,
        kind: FailureKind = FailureKind.GENERIC,
    ):
        super().__init__(message=message, status_code=500)
        self.details = details
        self.status = status
        self.missing_key = missing_key
        self.kind = kind

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        messages: Messages,
        api_key_configured: bool,
    ) -> "RecommendationError":
        """Build the user-facing error for a failed provider call."""
        kind = classify_failure(exc, api_key_configured)
        user_message = {
            FailureKind.MISSING_KEY: messages.missing_api_key,
            FailureKind.QUOTA_EXCEEDED: messages.quota_exceeded,
            FailureKind.GENERIC: messages.generic_failure,
        }[kind]
        return cls(
            message=user_message,
            details=error_details(exc),
            status=provider_status(exc),
            missing_key=not api_key_configured,
            kind=kind,
        )

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {
            "error": self.message,
            "details": self.details,
            "status": self.status,
        }
        if self.missing_key is not None:
            content["missingKey"] = self.missing_key
        return content
