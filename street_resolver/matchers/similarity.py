import math
from typing import Optional, Tuple

from rapidfuzz.distance import Levenshtein

from street_resolver.metaphone import encode
from street_resolver.normalizer import core_name

PRIMARY_MATCH_POINTS = 50
CROSS_MATCH_POINTS = 40
ALTERNATE_MATCH_POINTS = 30
EDIT_DISTANCE_POINTS = 40
EXACT_MATCH_BONUS = 10


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def phonetic_points(heard_codes: Tuple[str, str], candidate_codes: Tuple[str, str]) -> int:
    """Points for the single best phonetic tier the two code pairs share."""
    heard_primary, heard_alt = heard_codes
    cand_primary, cand_alt = candidate_codes
    if heard_primary == cand_primary:
        return PRIMARY_MATCH_POINTS
    if heard_primary == cand_alt or heard_alt == cand_primary:
        return CROSS_MATCH_POINTS
    if heard_alt == cand_alt:
        return ALTERNATE_MATCH_POINTS
    return 0


def edit_distance_points(heard_core: str, candidate_core: str) -> int:
    """Normalised Levenshtein similarity scaled to EDIT_DISTANCE_POINTS."""
    a = heard_core.lower()
    b = candidate_core.lower()
    distance = Levenshtein.distance(a, b)
    similarity = 1 - distance / max(len(a), len(b))
    return _round_half_up(similarity * EDIT_DISTANCE_POINTS)


def score_match(
    heard: str,
    candidate_street_name: str,
    precomputed_codes: Optional[Tuple[Optional[str], Optional[str]]] = None,
) -> int:
    """
    Score how well a stored street matches what the caller said.

    Args:
        heard (str): Street name as heard from the caller.
        candidate_street_name (str): Stored display name of the candidate street.
        precomputed_codes (Optional[Tuple[str, str]]): (primary, alternate) codes
            stored with the candidate. Missing codes are recomputed.

    Returns:
        int: 0 when either side has no usable core name, otherwise the sum of
             the phonetic tier (0/30/40/50), the edit-distance term (0-40) and
             the exact-match bonus (10). Identical names score 100.
    """
    heard_core = core_name(heard)
    candidate_core = core_name(candidate_street_name)
    if not heard_core or not candidate_core:
        return 0

    heard_codes = encode(heard_core)
    stored_primary, stored_alt = precomputed_codes or (None, None)
    if stored_primary and stored_alt:
        candidate_codes = (stored_primary, stored_alt)
    else:
        fresh_primary, fresh_alt = encode(candidate_core)
        candidate_codes = (stored_primary or fresh_primary, stored_alt or fresh_alt)

    score = phonetic_points(heard_codes, candidate_codes)
    score += edit_distance_points(heard_core, candidate_core)

    if heard_core.lower() == candidate_core.lower():
        score += EXACT_MATCH_BONUS

    return score
