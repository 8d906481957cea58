"""
Authentication schemas.

Request fields are optional at the schema level: a missing or empty
username/password is reported by the auth service, so both cases share one
error message.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Username/password pair used by both register and login."""

    username: Optional[str] = Field(default=None, description="Username")
    password: Optional[str] = Field(default=None, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "pw123",
            }
        }
    )


class TokenResponse(BaseModel):
    """Bearer token returned after register or login."""

    response: str = Field(description="Human-readable result")
    token: str = Field(description="JWT access token")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "response": "User logged in successfully.",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        }
    )
