"""Password tools endpoints.

Public breach check endpoint. The password is hashed server-side and only
the hash prefix is sent upstream; neither the password nor its digest is
returned or logged.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import get_pwned_client, limiter
from api.models import BreachCheckRequest, BreachCheckResponse
from pwned import (
    HashingError,
    InvalidInputError,
    MalformedResponseError,
    PwnedClient,
    TransportError,
    format_breach_warning,
)
from pwned.config import BREACH_CHECK_RATE_LIMIT


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Password Tools"])


@router.post("/breach-check", response_model=BreachCheckResponse)
@limiter.limit(BREACH_CHECK_RATE_LIMIT)
def check_breach(
    request: Request,
    body: BreachCheckRequest,
    client: PwnedClient = Depends(get_pwned_client),
):
    """Check if password appears in known data breaches."""
    try:
        result = client.is_breached(body.password)
    except (InvalidInputError, HashingError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except TransportError as e:
        logger.warning("Breach service unavailable (status=%s)", e.status)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Breach database is unavailable. Try again later.",
        )
    except MalformedResponseError as e:
        logger.error("Breach service returned a malformed response: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Breach database returned an unexpected response.",
        )

    if result.breached:
        message = format_breach_warning(result.frequency)
    else:
        message = "Password not found in known data breaches"

    return BreachCheckResponse(
        is_breached=result.breached,
        frequency=result.frequency,
        message=message,
    )
