"""Tests for range records and lookup results."""

import pytest
from pydantic import ValidationError

from pwned import LookupResult, SuffixRecord

from conftest import PASSWORD_PREFIX, PASSWORD_SHA1, PASSWORD_SUFFIX


class TestSuffixRecord:

    def test_full_hash(self):
        """Prefix plus suffix rebuilds the digest in uppercase."""
        record = SuffixRecord(suffix=PASSWORD_SUFFIX.lower(), frequency=1)
        assert record.full_hash(PASSWORD_PREFIX.lower()) == PASSWORD_SHA1

    def test_negative_frequency(self):
        with pytest.raises(ValidationError):
            SuffixRecord(suffix=PASSWORD_SUFFIX, frequency=-1)

    def test_frozen(self):
        record = SuffixRecord(suffix=PASSWORD_SUFFIX, frequency=1)
        with pytest.raises(ValidationError):
            record.frequency = 2


class TestLookupResult:

    def test_not_breached_requires_zero_frequency(self):
        """Frequency is only meaningful for breached results."""
        with pytest.raises(ValidationError):
            LookupResult(breached=False, frequency=3, sha1_hash=PASSWORD_SHA1)

    def test_hash_is_canonical_uppercase(self):
        result = LookupResult(breached=False, sha1_hash=PASSWORD_SHA1.lower())
        assert result.sha1_hash == PASSWORD_SHA1
        assert result.frequency == 0

    def test_repr_hides_digest(self):
        """Logging a result must not leak the digest."""
        result = LookupResult(breached=True, frequency=3, sha1_hash=PASSWORD_SHA1)
        assert PASSWORD_SHA1 not in repr(result)
        assert PASSWORD_SHA1 not in str(result)
