from datetime import datetime, timedelta, timezone

import pandas as pd
import pytest

from awattar_api import AwattarZone, PriceCollection, PriceSlot

BASE = datetime(2022, 8, 1, tzinfo=timezone.utc)


def _collection(prices, zone=AwattarZone.GERMANY) -> PriceCollection:
    slots = [
        PriceSlot(start=BASE + timedelta(hours=i), end=BASE + timedelta(hours=i + 1), price=price)
        for i, price in enumerate(prices)
    ]
    return PriceCollection.from_slots(slots, zone)


def test_size_accessors():
    prices = _collection([100, 200, 300])
    assert len(prices) == 3
    assert not prices.is_empty()

    empty = _collection([])
    assert len(empty) == 0
    assert empty.is_empty()


def test_slots_keep_api_order_and_are_restartable():
    prices = _collection([300, 100, 200])

    assert [slot.price for slot in prices.slots()] == [300, 100, 200]
    assert [slot.price for slot in prices] == [300, 100, 200]
    assert [slot.price for slot in prices] == [300, 100, 200]
    assert len(prices) == 3


def test_zone_is_tagged():
    assert _collection([1], AwattarZone.AUSTRIA).zone is AwattarZone.AUSTRIA


def test_min_max_on_empty_collection():
    empty = _collection([])
    assert empty.min_price() is None
    assert empty.max_price() is None
    assert empty.average_price() is None


def test_min_max_price():
    prices = _collection([5000, -1200, 8000, 300])

    cheapest = prices.min_price()
    priciest = prices.max_price()

    assert cheapest.price == -1200
    assert priciest.price == 8000
    assert all(cheapest.price <= slot.price <= priciest.price for slot in prices)


def test_min_max_ties_pick_first_occurrence():
    prices = _collection([10, 5, 20, 5, 20])

    assert prices.min_price() is prices.slots()[1]
    assert prices.max_price() is prices.slots()[2]


def test_average_price_truncates_toward_zero():
    assert _collection([100, 101]).average_price() == 100
    assert _collection([-100, -101]).average_price() == -100


def test_slot_containing():
    prices = _collection([10, 20, 30])

    assert prices.slot_containing(BASE).price == 10
    assert prices.slot_containing(BASE + timedelta(minutes=59)).price == 10
    assert prices.slot_containing(BASE + timedelta(hours=1)).price == 20
    assert prices.slot_containing(BASE + timedelta(hours=2, minutes=30)).price == 30


def test_slot_containing_outside_range():
    prices = _collection([10, 20, 30])

    assert prices.slot_containing(BASE - timedelta(microseconds=1)) is None
    assert prices.slot_containing(BASE + timedelta(hours=3)) is None
    assert _collection([]).slot_containing(BASE) is None


def test_slot_containing_accepts_other_timezones():
    prices = _collection([10, 20, 30])
    vienna = AwattarZone.AUSTRIA.timezone

    # 2022-08-01 03:30 in Vienna (CEST) is 01:30 UTC
    assert prices.slot_containing(datetime(2022, 8, 1, 3, 30, tzinfo=vienna)).price == 20


def test_to_dataframe():
    df = _collection([42090, -999]).to_dataframe()

    assert list(df.columns) == ["end", "price", "price_per_kwh"]
    assert len(df) == 2
    assert df.index[0] == pd.Timestamp(BASE)
    assert df["price"].tolist() == [42090, -999]
    assert df["price_per_kwh"].tolist() == [42, 0]


def test_to_dataframe_empty():
    df = _collection([]).to_dataframe()

    assert df.empty
    assert list(df.columns) == ["end", "price", "price_per_kwh"]
    assert isinstance(df.index, pd.DatetimeIndex)
    assert str(df.index.tz) == "UTC"
    assert df.index.name == "start"
    # same shape as a non-empty frame, so timezone conversion works
    assert df.tz_convert("Europe/Berlin").empty


def test_repr_names_zone():
    assert "GERMANY" in repr(_collection([1, 2]))


@pytest.mark.parametrize("prices", [[1], [3, 1, 2]])
def test_collection_does_not_resort(prices):
    assert [slot.price for slot in _collection(prices)] == prices
