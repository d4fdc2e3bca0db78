"""Tests for logging setup and digest redaction."""

import logging

from pwned import DigestRedactionFilter

from conftest import PASSWORD_SHA1


def _record(msg, *args):
    return logging.LogRecord("pwned.test", logging.INFO, __file__, 1, msg, args, None)


class TestDigestRedactionFilter:

    def test_redacts_digest_in_args(self):
        """Digests passed as arguments are masked."""
        record = _record("checked %s", PASSWORD_SHA1)
        assert DigestRedactionFilter().filter(record) is True
        assert record.getMessage() == "checked [REDACTED]"

    def test_redacts_lowercase_digest(self):
        record = _record(f"hash={PASSWORD_SHA1.lower()}")
        DigestRedactionFilter().filter(record)
        assert PASSWORD_SHA1.lower() not in record.getMessage()

    def test_leaves_prefix_alone(self):
        """Short hex runs such as the prefix pass through."""
        record = _record("prefix %s", "5BAA6")
        DigestRedactionFilter().filter(record)
        assert record.getMessage() == "prefix 5BAA6"
