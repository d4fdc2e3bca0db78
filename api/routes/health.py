"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from api.dependencies import get_pwned_client
from api.models import HealthResponse
from pwned import PwnedClient, __version__


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Pwned Password Checker API"}


@router.get("/health", response_model=HealthResponse)
async def health_check(client: PwnedClient = Depends(get_pwned_client)):
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        version=__version__,
        upstream=client.base_url,
    )
