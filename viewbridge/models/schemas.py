"""
Pydantic Models and Schemas
===========================

Request/response envelopes exchanged with the host process, plus the
HTTP adapter's error and health models.
"""

from typing import Optional, List, Dict, Any, Literal
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Envelope Models
class RenderRequest(BaseModel):
    """Request envelope: a component name and its property payload."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., min_length=1, description="Registered component name")
    props: Dict[str, Any] = Field(
        default_factory=dict, description="Opaque property payload passed to the component"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank component names."""
        if not v.strip():
            raise ValueError("Component name cannot be blank")
        return v

    @field_validator("props", mode="before")
    @classmethod
    def default_props(cls, v: Any) -> Any:
        """Treat an explicit null payload as no properties."""
        return {} if v is None else v


class RenderResponse(BaseModel):
    """Response envelope carrying the rendered markup."""

    html: str = Field(..., description="Rendered markup")

    # Not part of the wire envelope
    elapsed: float = Field(0.0, exclude=True, description="Pipeline time in seconds")


# HTTP Adapter Models
class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Error timestamp"
    )
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class ComponentListResponse(BaseModel):
    """Declared component names."""

    components: List[str] = Field(default_factory=list, description="Component names")
    loaded: List[str] = Field(default_factory=list, description="Components loaded so far")


class HealthStatus(BaseModel):
    """Health check status."""

    status: Literal["healthy", "unhealthy"] = Field(..., description="Overall status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Check timestamp"
    )
    version: str = Field(..., description="Application version")
    components: int = Field(0, ge=0, description="Number of declared components")
