"""
aWattar API client for Python

Overview
--------
Client library for the aWattar day-ahead electricity market price API. It
fetches hourly prices for Austria or Germany and exposes them as an ordered
``PriceCollection`` of ``PriceSlot`` values with integer prices in
euro-cents per MWh.

Exports
-------
- ``query`` / ``query_for_date``: one-shot async queries
- ``AwattarClient``: configurable client with blocking and async methods
- ``AwattarZone``: supported market zones
- Models: ``PriceSlot``, ``PriceCollection``
- Exception hierarchy rooted at ``AwattarError``
"""
from .client import (
    AwattarClient,
    query,
    query_for_date,
    query_prices,
    query_prices_now,
)
from .models import PriceSlot, PriceCollection
from .zones import AwattarZone
from .exceptions import (
    AwattarError,
    TransportError,
    ResponseParseError,
    UnsupportedResponse,
)

from ._version import __version__

# Public API surface intended for ``from awattar_api import *`` consumers.
__all__ = [
    "AwattarClient",
    "query",
    "query_for_date",
    "query_prices",
    "query_prices_now",
    "PriceSlot",
    "PriceCollection",
    "AwattarZone",
    "AwattarError",
    "TransportError",
    "ResponseParseError",
    "UnsupportedResponse",
]
