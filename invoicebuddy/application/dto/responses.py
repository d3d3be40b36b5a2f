"""Response DTOs for API endpoints.

Records and reports are returned as their entity models; this module
holds the envelopes that are not entities.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes."""

    success: bool = True


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    data_dir: str | None = None
    collections: dict[str, int] | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error: human-readable description
    - error_code: machine-readable code (e.g. CUSTOMER_NOT_FOUND)
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error: str = Field(..., description="Human-readable error description")
    error_code: str = Field(..., description="Machine-readable error code")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
