"""
aWattar API client

Overview
--------
This module implements price queries against the aWattar market data API:
- ``AwattarClient`` with blocking and async methods and its own configuration
- ``query`` / ``query_for_date``: one-shot async helpers built on the client
- ``query_prices`` / ``query_prices_now``: deprecated list-returning helpers

Design Notes
------------
- Network: Uses httpx for HTTP. Each query is exactly one GET request; there
  is no retry and no timeout unless the caller configures one.
- Batches are all-or-nothing: one unreadable item fails the whole query.
- Logging: request parameters and slot counts are logged at DEBUG on the
  ``awattar_api.client`` logger. Nothing is logged instead of being raised.
"""
import logging
import warnings
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional, Tuple, Union

import httpx
import pandas as pd
from pydantic import ValidationError

from ._version import __version__
from .exceptions import ResponseParseError, TransportError
from .models import AwattarResponse, PriceCollection, PriceSlot, to_millis
from .zones import AwattarZone

logger = logging.getLogger(__name__)

TimeoutTypes = Union[None, float, httpx.Timeout]


def _build_params(start: Optional[datetime], end: Optional[datetime]) -> Dict[str, str]:
    """Query parameters for the optional ``start``/``end`` bounds in epoch milliseconds."""
    params = {}
    if start is not None:
        params["start"] = str(to_millis(start))
    if end is not None:
        params["end"] = str(to_millis(end))
    return params


def day_bounds(zone: AwattarZone, day: date) -> Tuple[datetime, datetime]:
    """Local midnight of ``day`` and of the following day in the zone's timezone.

    The span is 23, 24 or 25 hours long depending on daylight saving changes.
    """
    tz = zone.timezone
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


def _handle_response(zone: AwattarZone, response: httpx.Response) -> PriceCollection:
    """Turn an API response into a collection or raise the matching error."""
    if not response.is_success:
        logger.debug("aWattar %s answered with status %s", zone.name, response.status_code)
        raise TransportError(
            f"API error ({response.status_code}): {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        payload = AwattarResponse.model_validate_json(response.content)
    except ValidationError as exc:
        logger.debug("Could not parse aWattar %s response: %s", zone.name, exc)
        raise ResponseParseError(f"Invalid response body: {exc}", cause=exc) from exc

    slots = [PriceSlot.from_item(item) for item in payload.data]
    logger.debug("Received %d price slots for %s", len(slots), zone.name)

    return PriceCollection(slots, zone)


class AwattarClient:
    """
    aWattar API Client

    Example:
        >>> from awattar_api import AwattarClient, AwattarZone
        >>> with AwattarClient() as client:
        ...     prices = client.get_prices_for_date(AwattarZone.AUSTRIA, date.today())
        >>> print(prices.min_price())
    """

    def __init__(
        self,
        timeout: TimeoutTypes = None,
        headers: Optional[Dict[str, str]] = None,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds or as ``httpx.Timeout``. ``None``
                disables timeouts.
            headers: Extra headers merged over the defaults
            http_client: Pre-configured blocking client to use instead of an
                own one. It is not closed by this client.
            async_http_client: Pre-configured async client, same rules
        """
        self.timeout = timeout
        self.extra_headers = dict(headers or {})

        self._client = http_client
        self._async_client = async_http_client
        self._owns_client = http_client is None
        self._owns_async_client = async_http_client is None

    def _get_headers(self) -> Dict[str, str]:
        """Build default request headers."""
        headers = {
            "User-Agent": f"awattar-api-python/{__version__}",
            "Accept": "application/json",
        }
        headers.update(self.extra_headers)
        return headers

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, headers=self._get_headers())
        return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._get_headers(),
            )
        return self._async_client

    # Prices API

    def get_prices(
        self,
        zone: AwattarZone,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> PriceCollection:
        """Get price slots for a zone.

        Args:
            zone: Market zone to query
            start: Inclusive start (naive values are taken as UTC)
            end: Exclusive end (naive values are taken as UTC)

        Without ``start`` and ``end`` the API returns prices from now up to
        24 hours ahead. With ``start`` only, it returns 24 hours from ``start``.

        Returns:
            PriceCollection tagged with ``zone``
        """
        params = _build_params(start, end)
        logger.debug("GET %s params=%s", zone.api_endpoint, params)

        try:
            response = self._get_client().get(
                zone.api_endpoint, params=params, headers=self._get_headers()
            )
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", zone.api_endpoint, exc)
            raise TransportError(f"HTTP request error: {exc}", cause=exc) from exc

        return _handle_response(zone, response)

    def get_prices_for_date(self, zone: AwattarZone, day: date) -> PriceCollection:
        """Get all price slots of one local calendar day in the zone."""
        start, end = day_bounds(zone, day)
        return self.get_prices(zone, start, end)

    def get_prices_dataframe(
        self,
        zone: AwattarZone,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> pd.DataFrame:
        """Get price slots as a pandas DataFrame indexed by slot start."""
        return self.get_prices(zone, start, end).to_dataframe()

    async def get_prices_async(
        self,
        zone: AwattarZone,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> PriceCollection:
        """Async version of get_prices."""
        params = _build_params(start, end)
        logger.debug("GET %s params=%s", zone.api_endpoint, params)

        try:
            response = await self._get_async_client().get(
                zone.api_endpoint, params=params, headers=self._get_headers()
            )
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", zone.api_endpoint, exc)
            raise TransportError(f"HTTP request error: {exc}", cause=exc) from exc

        return _handle_response(zone, response)

    async def get_prices_for_date_async(self, zone: AwattarZone, day: date) -> PriceCollection:
        """Async version of get_prices_for_date."""
        start, end = day_bounds(zone, day)
        return await self.get_prices_async(zone, start, end)

    # Context manager support

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def close(self):
        """Close the blocking HTTP client if this instance created it.

        Safe to call multiple times. Use ``aclose`` to also release the async client.
        """
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    async def aclose(self):
        """Close every HTTP client this instance created."""
        self.close()
        if self._async_client is not None and self._owns_async_client:
            await self._async_client.aclose()
            self._async_client = None


async def query(
    zone: AwattarZone,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    *,
    client: Optional[AwattarClient] = None,
) -> PriceCollection:
    """Query prices in ``zone`` between the optional ``start`` and ``end``.

    A temporary ``AwattarClient`` is used unless ``client`` is given.

    Raises:
        TransportError: the request failed or returned a non-2xx status
        ResponseParseError: the body did not match the expected JSON shape
        UnsupportedResponse: an item could not be interpreted
    """
    if client is not None:
        return await client.get_prices_async(zone, start, end)

    async with AwattarClient() as own_client:
        return await own_client.get_prices_async(zone, start, end)


async def query_for_date(
    zone: AwattarZone,
    day: date,
    *,
    client: Optional[AwattarClient] = None,
) -> PriceCollection:
    """Query the prices of one calendar day, local to ``zone``.

    Always covers 00:00 to 00:00 of the next day in the zone's timezone, so a
    result holds 24 hourly slots, or 23/25 on daylight saving changes.
    """
    start, end = day_bounds(zone, day)
    return await query(zone, start, end, client=client)


async def query_prices(
    zone: AwattarZone,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> List[PriceSlot]:
    """Query prices as a plain list of slots.

    Deprecated since 0.2.0, use ``query`` instead.
    """
    warnings.warn(
        "query_prices() is deprecated, use query() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return list(await query(zone, start, end))


async def query_prices_now(zone: AwattarZone) -> List[PriceSlot]:
    """Shortcut for ``query_prices(zone)``: prices from now up to 24 hours ahead.

    Deprecated since 0.2.0, use ``query`` instead.
    """
    warnings.warn(
        "query_prices_now() is deprecated, use query() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return list(await query(zone))
