import os
import asyncio
import csv
import json
import sys
from typing import List

import pandas as pd
from loguru import logger

from street_resolver.cache import CandidateCache
from street_resolver.clients import StreetStoreClient
from street_resolver.config import BATCH_SIZE, INPUT_CSV, LOG_LEVEL, OUTPUT_CSV
from street_resolver.models import LookupRequest
from street_resolver.resolution_service import ResolutionService, search_term_for


def load_lookups_from_csv(file_path: str, nrows: int = None) -> List[LookupRequest]:
    """Load lookup requests from CSV and convert to LookupRequest objects."""
    df = pd.read_csv(file_path, nrows=nrows, dtype=str)
    records = []
    for _, row in df.iterrows():
        # Helper to safely extract values from pandas Series, converting NaN to None
        def safe_get(col):
            if col not in row.index:
                return None
            val = row[col]
            if pd.isna(val) or not str(val).strip():
                return None
            return str(val).strip()

        attempt = 1
        if safe_get("attempt"):
            try:
                attempt = int(float(safe_get("attempt")))
            except (ValueError, TypeError):
                attempt = 1

        records.append(
            LookupRequest(
                restaurant_id=safe_get("restaurantId"),
                zip_code=safe_get("zipCode"),
                street_number=safe_get("streetNumber"),
                street_name=safe_get("streetName"),
                spelled_street_name=safe_get("spelledStreetName"),
                attempt_number=attempt,
            )
        )
    return records


def batch_iter(records: List[LookupRequest], batch_size: int):
    """
    Yield index and LookupRequest slices of size `batch_size` for batched processing.
    """
    n = len(records)
    for i in range(0, n, batch_size):
        yield i, records[i:i+batch_size]


async def main():
    """
    Resolve a CSV of address lookups against the street store.

    - Loads input CSV and resolves requests in batches.
    - Requests within a batch run concurrently and share one street cache.
    - Writes one result row per request to the output CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    all_lookups = load_lookups_from_csv(INPUT_CSV)
    service = ResolutionService(cache=CandidateCache())

    # Initialize output file
    output_path = OUTPUT_CSV
    if os.path.exists(output_path):
        os.remove(output_path)
    with open(output_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["restaurantId", "zipCode", "searchTerm", "result", "payload"])

    try:
        for start_idx, batch in batch_iter(all_lookups, BATCH_SIZE):
            logger.info(f"Processing rows {start_idx}..{start_idx + len(batch) - 1}")

            outcomes = await asyncio.gather(*[service.resolve(request) for request in batch])

            with open(output_path, "a", newline="") as f:
                writer = csv.writer(f)
                for request, outcome in zip(batch, outcomes):
                    writer.writerow([
                        request.restaurant_id,
                        request.zip_code,
                        search_term_for(request),
                        outcome.result,
                        json.dumps(outcome.to_payload()),
                    ])
    finally:
        # Cleanup: close the store session to prevent unclosed connector warnings
        await StreetStoreClient().close()


if __name__ == "__main__":
    asyncio.run(main())
