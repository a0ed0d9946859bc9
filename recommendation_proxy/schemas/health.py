"""
Health and diagnostics endpoint schemas.
"""

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """
    Response model for GET /test.

    Used by the frontend team to check that the API is reachable from a
    browser.
    """

    status: str = Field(
        default="Server is running!",
        examples=["Server is running!"],
    )
