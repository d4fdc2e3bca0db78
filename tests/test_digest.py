"""Tests for SHA-1 digest computation."""

import hashlib

import pytest

from pwned import (
    HashingError,
    InsufficientDigestLengthError,
    InvalidInputError,
    compute_digest,
    split_digest,
)

from conftest import PASSWORD, PASSWORD_PREFIX, PASSWORD_SHA1, PASSWORD_SUFFIX


class TestComputeDigest:
    """Test password digest computation."""

    def test_known_hash(self):
        """SHA-1 of "password" is 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8."""
        assert compute_digest(PASSWORD) == PASSWORD_SHA1

    def test_digest_format(self):
        """Digest should be 40 uppercase hex characters."""
        digest = compute_digest("correct horse battery staple")
        assert len(digest) == 40
        assert digest == digest.upper()
        int(digest, 16)

    def test_digest_consistency(self):
        """Same password should produce same digest."""
        assert compute_digest("mypassword") == compute_digest("mypassword")

    def test_digest_uniqueness(self):
        """Different passwords should produce different digests."""
        assert compute_digest("password1") != compute_digest("password2")

    def test_unicode_password(self):
        """Non-ASCII passwords are hashed as UTF-8."""
        expected = hashlib.sha1("пароль".encode("utf-8")).hexdigest().upper()
        assert compute_digest("пароль") == expected

    def test_empty_password(self):
        """Empty password is rejected before hashing."""
        with pytest.raises(InvalidInputError):
            compute_digest("")

    def test_non_string_password(self):
        """Non-string input is rejected."""
        with pytest.raises(InvalidInputError):
            compute_digest(None)

    def test_unencodable_password(self):
        """Lone surrogates cannot be UTF-8 encoded."""
        with pytest.raises(HashingError) as exc_info:
            compute_digest("secret\ud800")
        assert "secret" not in str(exc_info.value)


class TestSplitDigest:
    """Test prefix/suffix split."""

    def test_default_split(self):
        """Digest splits into a 5-char prefix and 35-char suffix."""
        prefix, suffix = split_digest(PASSWORD_SHA1)
        assert prefix == PASSWORD_PREFIX
        assert suffix == PASSWORD_SUFFIX

    def test_custom_prefix_length(self):
        """Prefix length is configurable."""
        prefix, suffix = split_digest(PASSWORD_SHA1, 6)
        assert prefix == "5BAA61"
        assert prefix + suffix == PASSWORD_SHA1

    def test_insufficient_length(self):
        """Digest shorter than the prefix is rejected."""
        with pytest.raises(InsufficientDigestLengthError):
            split_digest("ABC", 5)
