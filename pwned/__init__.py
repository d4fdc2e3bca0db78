"""Pwned Password checker package.

Checks passwords against the Pwned Passwords breach corpus using the
k-Anonymity range API:
- config: Centralized configuration constants
- errors: Exception taxonomy
- digest: SHA-1 digest computation
- models: Range records and lookup results
- client: Range queries and breach matching
- report: Human-readable verdicts
- logging_config: Logging setup with digest redaction
"""

# Configuration constants
from pwned.config import (
    __version__,
    API_BASE_URL,
    REQUEST_TIMEOUT,
    USER_AGENT,
    ADD_PADDING,
    PREFIX_LENGTH,
    DIGEST_LENGTH,
)

# Errors
from pwned.errors import (
    PwnedError,
    InvalidInputError,
    HashingError,
    InsufficientDigestLengthError,
    TransportError,
    MalformedResponseError,
)

# Digest
from pwned.digest import compute_digest, split_digest

# Models
from pwned.models import SuffixRecord, LookupResult

# Client
from pwned.client import (
    PwnedClient,
    get_default_client,
    parse_range_line,
    search_prefix,
    is_breached,
)

# Reporting
from pwned.report import format_breach_warning, check_and_warn

# Logging
from pwned.logging_config import configure_logging, DigestRedactionFilter

__all__ = [
    # Config
    "__version__",
    "API_BASE_URL",
    "REQUEST_TIMEOUT",
    "USER_AGENT",
    "ADD_PADDING",
    "PREFIX_LENGTH",
    "DIGEST_LENGTH",
    # Errors
    "PwnedError",
    "InvalidInputError",
    "HashingError",
    "InsufficientDigestLengthError",
    "TransportError",
    "MalformedResponseError",
    # Digest
    "compute_digest",
    "split_digest",
    # Models
    "SuffixRecord",
    "LookupResult",
    # Client
    "PwnedClient",
    "get_default_client",
    "parse_range_line",
    "search_prefix",
    "is_breached",
    # Reporting
    "format_breach_warning",
    "check_and_warn",
    # Logging
    "configure_logging",
    "DigestRedactionFilter",
]
