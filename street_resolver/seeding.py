"""
Offline preparation of street records for the street store.

Reads street names from CSV, precomputes core names and phonetic codes with
the same encoder the live lookup uses, and writes store-ready rows.

Usage:
    python -m street_resolver.seeding streets.csv records.csv [restaurant_id]

CSV format (no header), one street per line:
    restaurantId,zipCode,streetName
    zipCode,streetName              (needs the restaurant_id argument)
"""
import re
import sys
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

import pandas as pd
from loguru import logger

from street_resolver.config import LOG_LEVEL
from street_resolver.metaphone import encode
from street_resolver.models import StreetRecord
from street_resolver.normalizer import core_name

_SORT_KEY_STRIP_RE = re.compile(r"[^a-z0-9-]")

StreetRow = Tuple[str, str, str]  # (restaurant_id, zip_code, street_name)


def partition_key(restaurant_id: str, zip_code: str) -> str:
    return f"RESTAURANT#{restaurant_id}#ZIP#{zip_code}"


def street_sort_key(street_name: str) -> str:
    """Slug used in the sort key: "Grouse Lane" -> "grouse-lane"."""
    slug = "-".join(street_name.lower().split())
    return _SORT_KEY_STRIP_RE.sub("", slug)


def build_street_record(
    restaurant_id: str,
    zip_code: str,
    street_name: str,
    created_at: Optional[str] = None,
) -> StreetRecord:
    """Build a store record with its core name and precomputed phonetic codes."""
    core = core_name(street_name)
    primary, alternate = encode(core)
    return StreetRecord(
        restaurant_id=restaurant_id,
        zip_code=zip_code,
        street_name=street_name,
        phonetic_primary=primary,
        phonetic_alternate=alternate,
        core_name=core,
        created_at=created_at or datetime.now(timezone.utc).isoformat(),
    )


def load_street_rows(file_path: str, default_restaurant_id: Optional[str] = None) -> List[StreetRow]:
    """Load (restaurant_id, zip_code, street_name) rows from a headerless CSV."""
    df = pd.read_csv(
        file_path,
        header=None,
        names=["c0", "c1", "c2"],
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        skipinitialspace=True,
        on_bad_lines="warn",
    ).fillna("")
    rows = []
    for _, row in df.iterrows():
        values = [str(row[c]).strip() for c in ("c0", "c1", "c2")]
        if values[2]:
            restaurant_id, zip_code, street_name = values
        elif values[1]:
            if not default_restaurant_id:
                logger.warning(f"Skipping line {','.join(values[:2])!r}: old format requires a restaurant id")
                continue
            restaurant_id = default_restaurant_id
            zip_code, street_name = values[0], values[1]
        else:
            logger.warning(f"Skipping invalid line: {values[0]!r}")
            continue

        if not restaurant_id or not zip_code or not street_name:
            continue
        rows.append((restaurant_id, zip_code, street_name))
    return rows


def build_records(rows: Iterable[StreetRow]) -> List[StreetRecord]:
    """Build one record per row, sharing a single creation timestamp."""
    created_at = datetime.now(timezone.utc).isoformat()
    return [
        build_street_record(restaurant_id, zip_code, street_name, created_at)
        for restaurant_id, zip_code, street_name in rows
    ]


def records_to_frame(records: List[StreetRecord]) -> pd.DataFrame:
    """Store items with their partition (PK) and sort (SK) keys."""
    items = []
    for record in records:
        item = {
            "PK": partition_key(record.restaurant_id, record.zip_code),
            "SK": f"STREET#{street_sort_key(record.street_name)}",
        }
        item.update(record.to_item())
        items.append(item)
    columns = ["PK", "SK", "restaurantId", "zipCode", "streetName",
               "metaphonePrimary", "metaphoneAlt", "core", "createdAt"]
    return pd.DataFrame(items, columns=columns)


def write_records(records: List[StreetRecord], file_path: str) -> None:
    records_to_frame(records).to_csv(file_path, index=False)


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    if len(sys.argv) not in (3, 4):
        print(__doc__, file=sys.stderr)
        sys.exit(1)

    input_path, output_path = sys.argv[1], sys.argv[2]
    default_restaurant_id = sys.argv[3] if len(sys.argv) == 4 else None

    rows = load_street_rows(input_path, default_restaurant_id)
    records = build_records(rows)
    write_records(records, output_path)

    partitions = {(r.restaurant_id, r.zip_code) for r in records}
    logger.info(f"Wrote {len(records)} streets in {len(partitions)} restaurant/ZIP partitions to {output_path}")


if __name__ == "__main__":
    main()
