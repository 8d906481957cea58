"""
Shared response schemas - errors, confirmations, health
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(description="Human-readable error message")

    model_config = ConfigDict(json_schema_extra={"example": {"error": "Invalid note ID."}})


class MessageResponse(BaseModel):
    """Plain confirmation text."""

    response: str = Field(description="Confirmation message")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Time of the check")
    version: str = Field(description="Application version")
    checks: Dict[str, Dict[str, Any]] = Field(default_factory=dict, description="Component checks")
