"""
Exception classes for the aWattar client.

Every failure of a price query surfaces as a subclass of ``AwattarError`` so
callers can handle all of them in one place, or catch the specific subclasses
for finer control.

Typical usage:
    >>> from awattar_api import AwattarZone, TransportError, UnsupportedResponse, query
    >>> try:
    ...     prices = await query(AwattarZone.GERMANY)
    ... except TransportError:
    ...     print("API not reachable")
    ... except UnsupportedResponse as exc:
    ...     print(f"Cannot interpret response: {exc.detail}")
"""
from typing import Optional


class AwattarError(Exception):
    """Base exception for all errors raised by this package."""
    pass


class TransportError(AwattarError):
    """The HTTP round trip to the aWattar API failed.

    Covers DNS, connection and TLS failures, unreadable bodies and non-2xx
    status codes. The underlying ``httpx`` exception, if any, is available as
    ``cause`` and is also chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code


class ResponseParseError(TransportError):
    """The response body was not JSON or did not match the expected schema."""
    pass


class UnsupportedResponse(AwattarError):
    """The response was well formed but holds a value this client cannot interpret.

    Raised for a ``unit`` other than ``Eur/MWh`` and for timestamps that do not
    describe a valid slot.
    """

    def __init__(self, detail: str):
        super().__init__(f"API responded with an unsupported response: {detail}")
        self.detail = detail
