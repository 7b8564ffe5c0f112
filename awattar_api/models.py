"""
Data models for the aWattar client.

``AwattarDataItem`` and ``AwattarResponse`` mirror the JSON returned by the
market data endpoint and exist only while a response is parsed. ``PriceSlot``
and ``PriceCollection`` are the types handed to callers.

Prices are carried as integers in euro-cents per MWh so that comparisons and
aggregates never pick up floating-point error.
"""
import math
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, Iterator, List, Optional, Tuple

import pandas as pd
from pydantic import AwareDatetime, BaseModel, ConfigDict, model_validator

from .exceptions import UnsupportedResponse
from .zones import AwattarZone

SUPPORTED_UNIT = "Eur/MWh"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class AwattarDataItem(BaseModel):
    """Single price item as delivered by the API."""
    model_config = ConfigDict(strict=True)

    start_timestamp: int
    end_timestamp: int
    marketprice: float
    unit: str


class AwattarResponse(BaseModel):
    """Top-level JSON object of a market data response."""
    model_config = ConfigDict(strict=True)

    data: List[AwattarDataItem]


def _truncating_div(numerator: int, denominator: int) -> int:
    # Python's // floors; prices need truncation toward zero.
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _from_millis(value: int) -> datetime:
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except OverflowError as exc:
        raise UnsupportedResponse(f"Timestamp {value} is out of range") from exc


def to_millis(instant: datetime) -> int:
    """Milliseconds since the Unix epoch; naive datetimes are taken as UTC."""
    return (as_utc(instant) - _EPOCH) // timedelta(milliseconds=1)


def as_utc(instant: datetime) -> datetime:
    """Return ``instant`` as an aware UTC datetime, treating naive values as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


class PriceSlot(BaseModel):
    """One market interval with a single price.

    Attributes
    ----------
    start: Inclusive start of the slot (aware, UTC).
    end: Exclusive end of the slot (aware, UTC).
    price: Price in euro-cents per MWh. Negative prices do occur.
    """
    model_config = ConfigDict(frozen=True)

    start: AwareDatetime
    end: AwareDatetime
    price: int

    @model_validator(mode="after")
    def _check_interval(self) -> "PriceSlot":
        if self.end <= self.start:
            raise ValueError("slot end must be after slot start")
        return self

    @classmethod
    def from_item(cls, item: AwattarDataItem) -> "PriceSlot":
        """Convert a raw API item into a slot.

        The price is ``marketprice * 100`` truncated toward zero. The decimal
        value written on the wire is used rather than its binary float
        expansion, so ``42.09`` becomes ``4209`` and not ``4208``. Fractions of
        a cent are dropped.

        Raises:
            UnsupportedResponse: unit is not ``Eur/MWh``, the price is not a
                finite number, or the timestamps do not form a valid slot.
        """
        if item.unit != SUPPORTED_UNIT:
            raise UnsupportedResponse(f"Unsupported unit {item.unit}")
        if not math.isfinite(item.marketprice):
            raise UnsupportedResponse(f"Unsupported market price {item.marketprice}")

        price = int(Decimal(repr(item.marketprice)) * 100)
        start = _from_millis(item.start_timestamp)
        end = _from_millis(item.end_timestamp)
        if end <= start:
            raise UnsupportedResponse(
                f"Slot end {item.end_timestamp} is not after start {item.start_timestamp}"
            )

        return cls(start=start, end=end, price=price)

    def price_per_kwh(self) -> int:
        """Price in euro-cents per kWh, truncated toward zero."""
        return _truncating_div(self.price, 1000)

    def contains(self, instant: datetime) -> bool:
        """True if ``instant`` lies within ``[start, end)``."""
        instant = as_utc(instant)
        return self.start <= instant < self.end


class PriceCollection:
    """Price slots of one zone, in the order the API returned them.

    Example:
        >>> prices = await query_for_date(AwattarZone.GERMANY, date.today())
        >>> cheapest = prices.min_price()
        >>> print(cheapest.start, cheapest.price_per_kwh())
    """

    def __init__(self, slots: Iterable[PriceSlot], zone: AwattarZone):
        self._slots: Tuple[PriceSlot, ...] = tuple(slots)
        self._zone = zone

    @classmethod
    def from_slots(cls, slots: Iterable[PriceSlot], zone: AwattarZone) -> "PriceCollection":
        return cls(slots, zone)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(zone={self._zone.name}, slots={len(self._slots)})"

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[PriceSlot]:
        return iter(self._slots)

    @property
    def zone(self) -> AwattarZone:
        return self._zone

    def is_empty(self) -> bool:
        return not self._slots

    def slots(self) -> Tuple[PriceSlot, ...]:
        return self._slots

    def slot_containing(self, instant: datetime) -> Optional[PriceSlot]:
        """Slot whose ``[start, end)`` interval contains ``instant``, if any."""
        instant = as_utc(instant)
        for slot in self._slots:
            if slot.start <= instant < slot.end:
                return slot
        return None

    def min_price(self) -> Optional[PriceSlot]:
        """Cheapest slot; the first one wins on ties."""
        return min(self._slots, key=lambda slot: slot.price, default=None)

    def max_price(self) -> Optional[PriceSlot]:
        """Most expensive slot; the first one wins on ties."""
        return max(self._slots, key=lambda slot: slot.price, default=None)

    def average_price(self) -> Optional[int]:
        """Mean price in euro-cents per MWh, truncated toward zero."""
        if not self._slots:
            return None
        return _truncating_div(sum(slot.price for slot in self._slots), len(self._slots))

    def to_dataframe(self) -> pd.DataFrame:
        """Slots as a pandas DataFrame indexed by slot start.

        Columns are ``end``, ``price`` (euro-cents/MWh) and ``price_per_kwh``
        (euro-cents/kWh).
        """
        columns = ["end", "price", "price_per_kwh"]
        if not self._slots:
            return pd.DataFrame(
                columns=columns,
                index=pd.DatetimeIndex([], tz="UTC", name="start"),
            )

        data = [
            {
                "start": slot.start,
                "end": slot.end,
                "price": slot.price,
                "price_per_kwh": slot.price_per_kwh(),
            }
            for slot in self._slots
        ]

        df = pd.DataFrame(data)
        df["start"] = pd.to_datetime(df["start"], utc=True)
        df["end"] = pd.to_datetime(df["end"], utc=True)
        df.set_index("start", inplace=True)

        return df[columns]
