"""REST API wrapper for the Pwned Password checker."""
