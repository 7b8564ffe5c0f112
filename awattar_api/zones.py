"""
Market zones served by the aWattar API.

Each zone maps to a fixed API endpoint and the local timezone of its market.
While both current zones share the same UTC offset, they are kept separate so
a future zone with a different timezone needs no special casing.
"""
from enum import Enum
from zoneinfo import ZoneInfo


class AwattarZone(Enum):
    """Zone for aWattar prices, valued by its country code."""

    AUSTRIA = "at"
    GERMANY = "de"

    @property
    def api_endpoint(self) -> str:
        """Market data endpoint of this zone."""
        return _API_ENDPOINTS[self]

    @property
    def timezone_name(self) -> str:
        """IANA identifier of the zone's local timezone."""
        return _TIMEZONES[self]

    @property
    def timezone(self) -> ZoneInfo:
        """Local timezone of the zone, used to compute calendar-day boundaries."""
        return ZoneInfo(_TIMEZONES[self])


_API_ENDPOINTS = {
    AwattarZone.AUSTRIA: "https://api.awattar.at/v1/marketdata",
    AwattarZone.GERMANY: "https://api.awattar.de/v1/marketdata",
}

_TIMEZONES = {
    AwattarZone.AUSTRIA: "Europe/Vienna",
    AwattarZone.GERMANY: "Europe/Berlin",
}
