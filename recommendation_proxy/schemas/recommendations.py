"""
Pydantic schemas for the recommendation endpoint.

These models define the request/response contract between the frontend and
POST /api/get-recommendation.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PromptRequest(BaseModel):
    """
    Request body carrying the user's prompt.

    The prompt is forwarded to Gemini as-is; only emptiness is rejected.
    """

    prompt: str = Field(
        ...,
        description="User-supplied text passed to the generative-language provider",
        min_length=1,
        examples=["Tell me a joke"],
    )

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value


class RecommendationResponse(BaseModel):
    """Successful response: the provider's generated text."""

    recommendation: str = Field(
        ...,
        description="Text generated by the provider for the prompt",
    )


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    `error` is localized for end users; `details` and `status` carry the raw
    provider diagnostics.
    """

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., description="User-facing, localized error message")
    details: str = Field(..., description="Raw error message")
    status: Union[int, str] = Field(
        "unknown",
        description="Provider-supplied status, or 'unknown'",
    )
    missing_key: Optional[bool] = Field(
        None,
        alias="missingKey",
        description="True when the server has no GEMINI_API_KEY configured",
    )


class SimpleTestResponse(BaseModel):
    """Response of the diagnostics prompt endpoint."""

    success: bool = True
    text: str
