#!/usr/bin/env python3
"""
Example: query both zones concurrently with a caller-side timeout.

The client itself never times out or retries; callers compose that around
the awaited query, here with ``asyncio.wait_for``.
"""
import asyncio
import logging
from datetime import date, timedelta

from awattar_api import AwattarClient, AwattarError, AwattarZone


async def main():
    logging.basicConfig(level=logging.DEBUG)
    tomorrow = date.today() + timedelta(days=1)

    async with AwattarClient() as client:
        try:
            results = await asyncio.wait_for(
                asyncio.gather(
                    *(client.get_prices_for_date_async(zone, tomorrow) for zone in AwattarZone)
                ),
                timeout=10,
            )
        except asyncio.TimeoutError:
            print("aWattar did not answer within 10 seconds")
            return
        except AwattarError as e:
            print(f"Query failed: {e}")
            return

    for prices in results:
        if prices.is_empty():
            print(f"{prices.zone.name}: no prices published for {tomorrow} yet")
            continue

        print(f"\n{prices.zone.name} ({prices.zone.timezone_name}), {tomorrow}")
        print(prices.to_dataframe().tz_convert(prices.zone.timezone_name))


if __name__ == "__main__":
    asyncio.run(main())
