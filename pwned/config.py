"""Centralized configuration constants.

Defaults for the breach lookup client and its wrappers.
Deployment-specific settings can be overridden via environment variables;
the client itself receives them as constructor arguments.
"""

import os

__version__ = "1.0.0"

# Pwned Passwords range API
API_BASE_URL = os.environ.get("PWNED_API_BASE_URL", "https://api.pwnedpasswords.com").rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("PWNED_REQUEST_TIMEOUT", "5"))  # seconds
USER_AGENT = os.environ.get("PWNED_USER_AGENT", f"pwned-check/{__version__}")

# Padding makes every response roughly the same size so an observer
# cannot infer the prefix from the response length
ADD_PADDING = os.environ.get("PWNED_ADD_PADDING", "true").lower() == "true"

# k-Anonymity parameters - fixed by the service's indexing scheme
PREFIX_LENGTH = 5
DIGEST_LENGTH = 40  # SHA-1, hex encoded

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("LOG_FILE", None)
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 5))

# HTTP wrapper
BREACH_CHECK_RATE_LIMIT = os.environ.get("BREACH_CHECK_RATE_LIMIT", "30/minute")

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production: the API receives plaintext passwords
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"
