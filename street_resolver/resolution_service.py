# street_resolver/resolution_service.py

from typing import Awaitable, Callable, List, Optional

from loguru import logger

from street_resolver.cache import CandidateCache
from street_resolver.exceptions import InvalidLookupRequest
from street_resolver.matchers.ranker import classify, rank_candidates
from street_resolver.models import Error, LookupRequest, Outcome, StreetRecord
from street_resolver.spelling import decode
from street_resolver.street_fetcher import fetch_streets_for_zip

FetchStreets = Callable[[str, str], Awaitable[List[StreetRecord]]]

UPSTREAM_ERROR_MESSAGE = "We couldn't look up that address right now. Please try again."


def search_term_for(request: LookupRequest) -> Optional[str]:
    """
    Pick the text to match: the decoded spelling when the caller spelled the
    street, otherwise the street name as heard.

    A spelled field that does not decode ("Grouse" rather than "G R O U S E")
    is used as a plain street name instead of failing the lookup.
    """
    if request.spelled_street_name:
        spelled = str(request.spelled_street_name)
        letters = decode(spelled)
        logger.debug(f"Parsed spelled name: '{spelled}' → '{letters or '(empty)'}'")
        if letters:
            return letters
        logger.debug("Spelled name did not decode; using it as a street name")
        return spelled
    return str(request.street_name) if request.street_name is not None else None


def _validate(request: LookupRequest) -> str:
    if not str(request.restaurant_id or "").strip():
        raise InvalidLookupRequest("restaurantId")
    if not str(request.zip_code or "").strip():
        raise InvalidLookupRequest("zipCode", "ZIP code is required")
    search_term = search_term_for(request)
    if not str(search_term or "").strip():
        raise InvalidLookupRequest("streetName", "Street name is required")
    return search_term


class ResolutionService:
    """
    Resolve a caller's spoken street against the streets known for a
    restaurant and ZIP code.

    The street source and the cache are injected so the engine can run
    against the HTTP store, a fixture list, or anything else with the same
    call signature.
    """

    def __init__(
        self,
        fetch_streets: FetchStreets = fetch_streets_for_zip,
        cache: Optional[CandidateCache] = None,
    ):
        self._fetch_streets = fetch_streets
        self._cache = cache if cache is not None else CandidateCache()

    @property
    def cache(self) -> CandidateCache:
        return self._cache

    async def get_streets(self, restaurant_id: str, zip_code: str) -> List[StreetRecord]:
        """Cached street list for the partition, fetching it on a miss."""
        cached = self._cache.get(restaurant_id, zip_code)
        if cached is not None:
            return cached
        streets = await self._fetch_streets(restaurant_id, zip_code)
        self._cache.put(restaurant_id, zip_code, streets)
        return streets

    async def resolve(self, request: LookupRequest) -> Outcome:
        """
        Run one lookup through validation, candidate fetch, ranking and
        classification.

        Args:
            request (LookupRequest): Lookup as received from the adapter.

        Returns:
            Outcome: Always a structured outcome. Missing fields and store
                     failures come back as Error rather than raising.
        """
        try:
            search_term = _validate(request)
        except InvalidLookupRequest as e:
            logger.warning(f"Rejected lookup: {e}")
            return Error(message=str(e))

        restaurant_id = str(request.restaurant_id).strip()
        zip_code = str(request.zip_code).strip()

        try:
            streets = await self.get_streets(restaurant_id, zip_code)
        except Exception:
            logger.exception(f"Street fetch failed for {restaurant_id}#{zip_code}")
            return Error(message=UPSTREAM_ERROR_MESSAGE)

        if not streets:
            logger.warning(f"No streets found for restaurant={restaurant_id} zip={zip_code}")

        ranked = rank_candidates(search_term, streets)
        outcome = classify(
            search_term=search_term,
            restaurant_id=restaurant_id,
            zip_code=zip_code,
            streets=streets,
            ranked=ranked,
            street_number=request.street_number,
            attempt_number=request.attempt_number,
        )
        logger.info(
            f"Lookup '{search_term}' in {zip_code} (attempt {request.attempt_number}) → {outcome.result}"
        )
        return outcome
