"""Shared test fixtures: small street lists for one restaurant and ZIP."""
from typing import List
from unittest.mock import AsyncMock

import pytest

from street_resolver.cache import CandidateCache
from street_resolver.models import StreetRecord
from street_resolver.resolution_service import ResolutionService
from street_resolver.seeding import build_street_record

RESTAURANT_ID = "rest-001"
ZIP_CODE = "60008"


def make_streets(*names: str, seeded: bool = True) -> List[StreetRecord]:
    """Street records as the seeding tool writes them, or bare names when seeded=False."""
    if seeded:
        return [build_street_record(RESTAURANT_ID, ZIP_CODE, name) for name in names]
    return [StreetRecord(restaurant_id=RESTAURANT_ID, zip_code=ZIP_CODE, street_name=name) for name in names]


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> CandidateCache:
    return CandidateCache(ttl_seconds=600, clock=clock)


@pytest.fixture()
def fetch_streets() -> AsyncMock:
    """External street fetch; tests set return_value / side_effect."""
    return AsyncMock(return_value=make_streets("Grouse Lane"))


@pytest.fixture()
def service(fetch_streets: AsyncMock, cache: CandidateCache) -> ResolutionService:
    return ResolutionService(fetch_streets=fetch_streets, cache=cache)
