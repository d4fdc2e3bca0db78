"""SHA-1 digest computation for the k-Anonymity range protocol.

SHA-1 is dictated by the breach service's index, not chosen for strength.
"""

import hashlib

from pwned.config import PREFIX_LENGTH
from pwned.errors import HashingError, InsufficientDigestLengthError, InvalidInputError


def compute_digest(password: str) -> str:
    """Compute the uppercase hex SHA-1 digest of a password.

    Args:
        password: The password to hash (must be a non-empty string)

    Returns:
        40-character uppercase hexadecimal digest

    Raises:
        InvalidInputError: If password is empty or not a string
        HashingError: If the password cannot be encoded or hashed
    """
    if not isinstance(password, str) or not password:
        raise InvalidInputError("No password provided")

    try:
        data = password.encode("utf-8")
        return hashlib.sha1(data).hexdigest().upper()
    except (UnicodeEncodeError, ValueError) as e:
        # Don't chain the encode error: its repr embeds the password
        raise HashingError(f"Could not hash password: {type(e).__name__}") from None


def split_digest(digest: str, prefix_length: int = PREFIX_LENGTH) -> tuple[str, str]:
    """Split a digest into the public prefix and the private suffix.

    Raises:
        InsufficientDigestLengthError: If digest is shorter than prefix_length
    """
    if len(digest) < prefix_length:
        raise InsufficientDigestLengthError(
            "Hash has insufficient length to perform check"
        )
    return digest[:prefix_length], digest[prefix_length:]
