"""
Error response models.

Standardized error responses for the portal.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Standard error response format (mirrors SanctuaryError.to_dict)."""

    error: str
    message: Optional[str] = None
    details: dict[str, Any] = Field(default_factory=dict)
