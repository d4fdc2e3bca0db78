"""Breach check CLI flow.

Prompts for a password without echo and reports whether it appears in
known data breaches. Uses k-Anonymity: the password is never sent.
"""

import getpass
import logging
import sys
from typing import Optional

from pwned import (
    InvalidInputError,
    MalformedResponseError,
    PwnedClient,
    TransportError,
    configure_logging,
    format_breach_warning,
    get_default_client,
)


logger = logging.getLogger(__name__)

# Exit codes
EXIT_SAFE = 0
EXIT_BREACHED = 1
EXIT_UNVERIFIED = 2


def breach_check_flow(client: Optional[PwnedClient] = None) -> int:
    """Prompt for a password, check it and print the verdict.

    Returns:
        EXIT_SAFE, EXIT_BREACHED, or EXIT_UNVERIFIED
    """
    client = client or get_default_client()

    print("=== Password Breach Checker ===")
    print("Check if your password has been exposed in data breaches.")
    print("(Uses HaveIBeenPwned API with k-Anonymity - your password is never sent)\n")

    pwd = getpass.getpass("Enter password to check: ")

    try:
        result = client.is_breached(pwd)
    except InvalidInputError:
        print("No password entered.")
        return EXIT_UNVERIFIED
    except (TransportError, MalformedResponseError) as e:
        logger.warning("Breach check failed: %s", e)
        print("\nResult: Could not verify against breach database.")
        return EXIT_UNVERIFIED

    if result.breached:
        print(f"\nResult: {format_breach_warning(result.frequency)}")
        print("Status: COMPROMISED - Choose a different password!")
        return EXIT_BREACHED

    print("\nResult: Password not found in known data breaches")
    print("Status: SAFE")
    return EXIT_SAFE


def main() -> None:
    """Console script entry point."""
    configure_logging()
    try:
        code = breach_check_flow()
    except KeyboardInterrupt:
        print()
        code = EXIT_UNVERIFIED
    sys.exit(code)


if __name__ == "__main__":
    main()
