"""CLI package for the Pwned Password checker.

Provides the interactive breach check flow.
"""

from cli.checker import breach_check_flow, main

__all__ = [
    "breach_check_flow",
    "main",
]
