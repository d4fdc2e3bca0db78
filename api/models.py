"""Pydantic models for API request/response validation."""

from pydantic import BaseModel, Field


class BreachCheckRequest(BaseModel):
    """Request model for breach check."""
    password: str = Field(..., min_length=1, description="Password to check")


class BreachCheckResponse(BaseModel):
    """Response model for breach check.

    Deliberately carries no hash: the digest never leaves the server.
    """
    is_breached: bool
    frequency: int = Field(..., ge=0, description="Times seen in breaches (0 if not breached)")
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    upstream: str
