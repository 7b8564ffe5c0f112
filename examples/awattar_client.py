#!/usr/bin/env python3
"""
Print today's day-ahead prices for Germany.

Prerequisites:
- Install: `pip install awattar-api` (or run from repo root)
"""
import asyncio
from datetime import date

from awattar_api import AwattarZone, query_for_date


def _eur_per_kwh(price: int) -> float:
    # euro-cents/MWh -> EUR/kWh
    return price / 100_000


async def main():
    prices = await query_for_date(AwattarZone.GERMANY, date.today())

    print(f"Prices for {date.today()} ({len(prices)} slots):")
    for slot in prices:
        print(f"{slot.start} - {slot.end}: {_eur_per_kwh(slot.price):.5f} €/kWh")

    cheapest = prices.min_price()
    priciest = prices.max_price()
    if cheapest and priciest:
        print(f"\nCheapest: {cheapest.start} at {_eur_per_kwh(cheapest.price):.5f} €/kWh")
        print(f"Most expensive: {priciest.start} at {_eur_per_kwh(priciest.price):.5f} €/kWh")
        print(f"Average: {_eur_per_kwh(prices.average_price()):.5f} €/kWh")


if __name__ == "__main__":
    asyncio.run(main())
