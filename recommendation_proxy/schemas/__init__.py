"""
Pydantic schemas for API request and response validation.

Field names on the wire follow the frontend's camelCase contract where it
differs from Python naming (see ErrorResponse.missing_key).
"""
