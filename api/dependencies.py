"""FastAPI dependencies shared by the route modules.

Provides the rate limiter and the breach lookup client. Tests replace
the client through app.dependency_overrides.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from pwned import PwnedClient, get_default_client


# Rate limiter configuration
# Uses client IP for rate limit tracking
limiter = Limiter(key_func=get_remote_address, default_limits=["100/minute"])


def get_pwned_client() -> PwnedClient:
    """Dependency providing the shared breach lookup client."""
    return get_default_client()
