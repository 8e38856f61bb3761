import time
from typing import List

from loguru import logger

from street_resolver.clients import StreetStoreClient
from street_resolver.models import StreetRecord


async def fetch_streets_for_zip(restaurant_id: str, zip_code: str) -> List[StreetRecord]:
    """
    Fetch the known streets for one restaurant and ZIP code from the street store.

    Args:
        restaurant_id (str): Restaurant whose delivery streets are requested.
        zip_code (str): ZIP code partition.

    Returns:
        List[StreetRecord]: Stored streets. Empty when the ZIP was never seeded.

    Raises:
        StreetStoreError: When the store cannot be reached. Failures are not
                          retried here; the resolution service reports them.
    """
    store_client = StreetStoreClient()

    start = time.perf_counter()
    logger.debug(f"▶️ Fetching streets for restaurant={restaurant_id} zip={zip_code}")
    items = await store_client.get_streets(restaurant_id, zip_code)

    streets = []
    for item in items:
        if not isinstance(item, dict) or not item.get("streetName"):
            logger.debug(f"Skipping malformed street item: {item!r}")
            continue
        streets.append(StreetRecord.from_item(item))

    duration = time.perf_counter() - start
    logger.debug(f"🏁 Fetched {len(streets)} streets for {restaurant_id}#{zip_code} in {duration:.2f}s")
    return streets
