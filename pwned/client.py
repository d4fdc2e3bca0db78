"""Breach detection using the Pwned Passwords range API.

Uses the k-Anonymity model to check passwords without exposing them.
Only the first 5 characters of the SHA-1 hash are sent to the API; the
returned suffixes are matched against the full hash locally.
"""

import http.client
import logging
import string
import urllib.error
import urllib.request
from contextlib import closing
from threading import Lock
from typing import Callable, Iterator, Optional

from pwned.config import (
    ADD_PADDING,
    API_BASE_URL,
    PREFIX_LENGTH,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from pwned.digest import compute_digest, split_digest
from pwned.errors import InvalidInputError, MalformedResponseError, TransportError
from pwned.models import LookupResult, SuffixRecord


logger = logging.getLogger(__name__)

HEX_DIGITS = set(string.hexdigits)

# Module-level state
_default_client: Optional["PwnedClient"] = None
_default_client_lock = Lock()


def parse_range_line(raw: bytes, line_number: int) -> Optional[SuffixRecord]:
    """Parse one line of a range response.

    Args:
        raw: Line as read from the response, terminator included
        line_number: 1-based position of the line, for error reporting

    Returns:
        The parsed record, or None for a blank line

    Raises:
        MalformedResponseError: If the line is not SUFFIX:COUNT
    """
    try:
        line = raw.decode("utf-8").strip()
    except UnicodeDecodeError:
        raise MalformedResponseError("Response is not valid UTF-8", line_number) from None

    if not line:
        return None

    fields = line.split(":")
    if len(fields) != 2:
        raise MalformedResponseError("Expected SUFFIX:COUNT", line_number)

    suffix, count = fields[0].strip(), fields[1].strip()
    if not suffix:
        raise MalformedResponseError("Empty hash suffix", line_number)
    if not (count.isascii() and count.isdigit()):
        raise MalformedResponseError("Frequency is not an unsigned integer", line_number)

    return SuffixRecord(suffix=suffix, frequency=int(count))


class PwnedClient:
    """Client for the k-Anonymity range API.

    Holds only immutable configuration, so one instance can serve
    concurrent checks. Every call opens its own connection and closes it
    on every exit path.

    Args:
        base_url: Service root, without the /range path
        prefix_length: Number of hash characters sent to the service
        timeout: Socket timeout in seconds, or None to block indefinitely
        user_agent: User-Agent header (the service rejects requests without one)
        add_padding: Ask the service to pad responses with zero-count records
        urlopen: Transport callable with the signature of urllib.request.urlopen
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        prefix_length: int = PREFIX_LENGTH,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        user_agent: str = USER_AGENT,
        add_padding: bool = ADD_PADDING,
        urlopen: Callable = urllib.request.urlopen,
    ):
        if prefix_length < 1:
            raise ValueError("prefix_length must be at least 1")
        self._base_url = base_url.rstrip("/")
        self._prefix_length = prefix_length
        self._timeout = timeout
        self._user_agent = user_agent
        self._add_padding = add_padding
        self._urlopen = urlopen

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def prefix_length(self) -> int:
        return self._prefix_length

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def _validate_prefix(self, prefix: str) -> str:
        if (
            not isinstance(prefix, str)
            or len(prefix) != self._prefix_length
            or not set(prefix) <= HEX_DIGITS
        ):
            raise InvalidInputError(
                f"Prefix must be exactly {self._prefix_length} hexadecimal characters"
            )
        return prefix.upper()

    def _build_request(self, prefix: str) -> urllib.request.Request:
        headers = {"User-Agent": self._user_agent}
        if self._add_padding:
            headers["Add-Padding"] = "true"
        return urllib.request.Request(f"{self._base_url}/range/{prefix}", headers=headers)

    def _open(self, request: urllib.request.Request):
        try:
            return self._urlopen(request, timeout=self._timeout)
        except urllib.error.HTTPError as e:
            e.close()
            raise TransportError(f"Breach service returned HTTP {e.code}", status=e.code) from e
        except urllib.error.URLError as e:
            raise TransportError(f"Could not reach breach service: {e.reason}") from e
        except (OSError, http.client.HTTPException) as e:
            raise TransportError(f"Could not reach breach service: {type(e).__name__}") from e

    def iter_prefix(self, prefix: str) -> Iterator[SuffixRecord]:
        """Stream the records the service knows for a hash prefix.

        The prefix is validated immediately; the connection is opened on
        the first iteration and closed when the iterator is exhausted,
        fails, or is closed early.

        Raises:
            InvalidInputError: If prefix is not prefix_length hex characters
            TransportError: On connection failure or an error status
            MalformedResponseError: On the first line that does not parse
        """
        prefix = self._validate_prefix(prefix)
        return self._read_records(self._build_request(prefix))

    def _read_records(self, request: urllib.request.Request) -> Iterator[SuffixRecord]:
        response = self._open(request)
        with response:
            logger.debug(
                "Range query answered with status %s (prefix length %d)",
                response.status, self._prefix_length,
            )
            line_number = 0
            while True:
                try:
                    raw = response.readline()
                except (OSError, http.client.HTTPException) as e:
                    raise TransportError(
                        f"Connection to breach service failed after {line_number} lines"
                    ) from e
                if not raw:
                    break
                line_number += 1
                record = parse_range_line(raw, line_number)
                if record is not None:
                    yield record
            logger.debug("Range response complete: %d lines", line_number)

    def search_prefix(self, prefix: str) -> list[SuffixRecord]:
        """Fetch every record for a hash prefix, in the order received.

        Either the whole response parses or the first error is raised;
        no partial list is returned.
        """
        return list(self.iter_prefix(prefix))

    def is_breached(self, password: str) -> LookupResult:
        """Check if a password appears in the breach corpus.

        The password is hashed locally and only the hash prefix is sent.
        The password is never stored, logged or sent to the service.

        Records are matched as they stream in. A matching record is
        conclusive evidence of a breach, so it is returned even if the rest
        of the response would have failed. An error raised before any match
        leaves the status undetermined and propagates.

        Args:
            password: The password to check

        Returns:
            LookupResult with the breach flag and frequency

        Raises:
            InvalidInputError: If password is empty
            HashingError: If the password cannot be hashed
            InsufficientDigestLengthError: If the digest is shorter than the prefix
            TransportError: If the service fails before a match is seen
            MalformedResponseError: If the body is malformed before a match is seen
        """
        digest = compute_digest(password)
        prefix, _ = split_digest(digest, self._prefix_length)

        with closing(self.iter_prefix(prefix)) as records:
            for record in records:
                if record.full_hash(prefix) == digest:
                    logger.debug("Range query matched")
                    return LookupResult(
                        breached=True, frequency=record.frequency, sha1_hash=digest
                    )

        logger.debug("Range query found no match")
        return LookupResult(breached=False, frequency=0, sha1_hash=digest)


def get_default_client() -> PwnedClient:
    """Get the shared client built from configuration defaults."""
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = PwnedClient()
        return _default_client


def search_prefix(prefix: str) -> list[SuffixRecord]:
    """Fetch every record for a hash prefix using the default client."""
    return get_default_client().search_prefix(prefix)


def is_breached(password: str) -> LookupResult:
    """Check a password using the default client."""
    return get_default_client().is_breached(password)
