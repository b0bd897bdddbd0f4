"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Short, client-safe error message")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")


def error_response(message: str) -> dict:
    """Create a standardized error response"""
    return ErrorResponse(message=message).model_dump()
