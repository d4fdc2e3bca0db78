"""Human-readable verdicts for breach checks."""

from typing import Optional

from pwned.client import PwnedClient, get_default_client
from pwned.errors import MalformedResponseError, TransportError


def format_breach_warning(breach_count: int) -> str:
    """Format a warning message based on breach count."""
    if breach_count == 0:
        return ""
    elif breach_count < 10:
        return f"This password appeared in {breach_count} data breach(es). Consider using a different password."
    elif breach_count < 100:
        return f"WARNING: This password was found {breach_count} times in data breaches!"
    elif breach_count < 1000:
        return f"DANGER: This password was exposed {breach_count} times in breaches. Do NOT use it!"
    else:
        return f"CRITICAL: This password was found {breach_count:,} times in breaches. It is extremely compromised!"


def check_and_warn(password: str, client: Optional[PwnedClient] = None) -> tuple[bool, str]:
    """Check password and return safety status with message.

    Service failures are reported as an unverifiable (but not unsafe)
    result; invalid input still raises.

    Returns:
        Tuple of (is_safe, message) where is_safe is False if breached.

    Raises:
        InvalidInputError: If password is empty
    """
    client = client or get_default_client()

    try:
        result = client.is_breached(password)
    except (TransportError, MalformedResponseError):
        return True, "Could not verify against breach database (offline check only)"

    if not result.breached:
        return True, "Password not found in known data breaches"

    return False, format_breach_warning(result.frequency)
