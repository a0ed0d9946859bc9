"""
User-facing message bundles.

The frontend shows these strings verbatim, so each deployment picks one
locale through APP_LOCALE. Raw provider errors are never translated; they
travel separately in the `details` field.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Messages:
    """Localized strings returned in ErrorResponse.error."""

    generic_failure: str
    missing_api_key: str
    quota_exceeded: str
    invalid_prompt: str
    cors_blocked: str = "Not allowed by CORS"
    diagnostics_failure: str = "API Error"


VIETNAMESE = Messages(
    generic_failure="Lỗi khi tạo đề xuất từ AI.",
    missing_api_key=(
        "Chưa cấu hình API key cho Google Gemini AI. "
        "Vui lòng liên hệ quản trị viên."
    ),
    quota_exceeded=(
        "Đã vượt quá giới hạn quota của Google AI API. "
        "Vui lòng thử lại sau."
    ),
    invalid_prompt="Yêu cầu phải có trường prompt hợp lệ.",
)

ENGLISH = Messages(
    generic_failure="Failed to generate a recommendation from the AI.",
    missing_api_key=(
        "The Google Gemini API key is not configured. "
        "Please contact the administrator."
    ),
    quota_exceeded=(
        "The Google AI API quota has been exceeded. "
        "Please try again later."
    ),
    invalid_prompt="The request must include a non-empty prompt.",
)

MESSAGES_BY_LOCALE: Dict[str, Messages] = {
    "vi": VIETNAMESE,
    "en": ENGLISH,
}

DEFAULT_LOCALE = "vi"


def get_messages(locale: str) -> Messages:
    """
    Resolve a message bundle from a locale string.

    Accepts full locale tags ("en-US" -> English). Unknown locales fall back
    to the default Vietnamese bundle.
    """
    lang_code = locale.split("-")[0].lower() if locale else DEFAULT_LOCALE
    return MESSAGES_BY_LOCALE.get(lang_code, MESSAGES_BY_LOCALE[DEFAULT_LOCALE])
