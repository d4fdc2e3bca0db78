"""Shared fixtures: an in-memory stand-in for urllib.request.urlopen."""

import io

import pytest

from pwned import PwnedClient


PASSWORD = "password"
PASSWORD_SHA1 = "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


class FakeResponse(io.BytesIO):
    """HTTP response body served from memory."""

    def __init__(self, body: bytes, status: int = 200):
        super().__init__(body)
        self.status = status


class DroppedResponse(FakeResponse):
    """Response whose connection resets once the body is used up."""

    def readline(self, *args):
        line = super().readline(*args)
        if not line:
            raise ConnectionResetError("connection reset by peer")
        return line


class FakeOpener:
    """Records requests and returns a canned response or raises a canned error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.timeouts = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_client():
    """Build a client wired to a FakeOpener.

    Returns a factory taking the response body (str) or an error to raise.
    The opener is reachable as client.opener for assertions.
    """
    def factory(body="", error=None, dropped=False, **kwargs):
        response_cls = DroppedResponse if dropped else FakeResponse
        response = response_cls(body.encode("utf-8"))
        opener = FakeOpener(response=response, error=error)
        kwargs.setdefault("base_url", "https://pwned.example.test")
        client = PwnedClient(urlopen=opener, **kwargs)
        client.opener = opener
        return client
    return factory
