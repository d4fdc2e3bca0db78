"""Exception taxonomy for breach lookups.

Messages never include the password or its full digest.
"""

from typing import Optional


class PwnedError(Exception):
    """Base exception for breach lookup errors."""
    pass


class InvalidInputError(PwnedError):
    """Password or prefix supplied by the caller is empty or malformed."""
    pass


class HashingError(PwnedError):
    """Digest computation failed."""
    pass


class InsufficientDigestLengthError(PwnedError):
    """Digest is shorter than the prefix that must be cut from it."""
    pass


class TransportError(PwnedError):
    """The breach service could not be reached or answered with an error status.

    Callers may retry with backoff.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class MalformedResponseError(PwnedError):
    """Response body violates the SUFFIX:COUNT line format."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number
