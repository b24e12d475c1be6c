"""
Domain models for OAuth token persistence.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StoredOAuthToken(BaseModel):
    """The single credential record kept between requests."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    refresh_token: Optional[str] = None
    expiry: Optional[datetime] = Field(
        None, description="Access token expiry reported by the token endpoint."
    )
    scope: Optional[str] = None
    token_type: Optional[str] = None


__all__ = ["StoredOAuthToken"]
