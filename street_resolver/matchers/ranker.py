from typing import List, Optional

from loguru import logger

from street_resolver.config import HIGH_CONFIDENCE_SCORE, MAX_CANDIDATES, MIN_MATCH_SCORE
from street_resolver.matchers.similarity import score_match
from street_resolver.models import (
    Ambiguous,
    Found,
    NotFound,
    Outcome,
    RankedMatches,
    ScoredCandidate,
    StreetRecord,
    SuggestAction,
    TooManyMatches,
    ZipNotCovered,
)
from street_resolver.normalizer import dominant_suffix, expand_for_speech


def filter_by_suffix(heard: str, streets: List[StreetRecord]) -> List[StreetRecord]:
    """
    Keep only streets whose suffix matches the one the caller said.

    "Grouse Lane" should not tie with "Grouse Court". When the caller gave no
    suffix, or nothing shares it, the full list is returned.
    """
    heard_suffix = dominant_suffix(heard)
    if not heard_suffix:
        return streets
    same_suffix = [s for s in streets if dominant_suffix(s.street_name) == heard_suffix]
    return same_suffix or streets


def rank_candidates(
    heard: str,
    streets: List[StreetRecord],
    limit: int = MAX_CANDIDATES,
    min_score: int = MIN_MATCH_SCORE,
) -> RankedMatches:
    """
    Score every candidate street and keep the best few.

    Args:
        heard (str): Street name as heard from the caller.
        streets (List[StreetRecord]): All known streets for the restaurant and ZIP.
        limit (int): Maximum number of matches to return.
        min_score (int): Candidates scoring at or below this are discarded.

    Returns:
        RankedMatches: Up to `limit` matches, best first, and the number of
                       candidates that cleared `min_score` before truncation.
    """
    if not streets:
        return RankedMatches()

    pool = filter_by_suffix(heard, streets)
    scored = [
        ScoredCandidate(
            street=s,
            score=score_match(heard, s.street_name, (s.phonetic_primary, s.phonetic_alternate)),
        )
        for s in pool
    ]
    relevant = [c for c in scored if c.score > min_score]
    relevant.sort(key=lambda c: c.score, reverse=True)

    logger.debug(
        f"Ranked '{heard}' against {len(pool)}/{len(streets)} streets: "
        + ", ".join(f"{c.street.street_name}={c.score}" for c in relevant[:limit])
    )
    return RankedMatches(matches=relevant[:limit], total=len(relevant))


def _join_with_or(options: List[str]) -> str:
    """"A" / "A or B" / "A, B or C"."""
    if len(options) == 1:
        return options[0]
    return f"{', '.join(options[:-1])} or {options[-1]}"


def classify(
    search_term: str,
    restaurant_id: str,
    zip_code: str,
    streets: List[StreetRecord],
    ranked: RankedMatches,
    street_number: Optional[str] = None,
    attempt_number: int = 1,
    high_confidence: int = HIGH_CONFIDENCE_SCORE,
    max_candidates: int = MAX_CANDIDATES,
) -> Outcome:
    """Turn ranked matches into the outcome the voice assistant acts on."""
    if not streets:
        return ZipNotCovered(
            restaurant_id=restaurant_id,
            zip_code=zip_code,
            message=(
                f"We don't have delivery coverage data for ZIP code {zip_code}. "
                "Please verify the ZIP code."
            ),
        )

    if ranked.total == 0:
        if attempt_number == 1:
            return NotFound(
                suggest_action=SuggestAction.REQUEST_SPELLING,
                prompt=(
                    f'I couldn\'t find "{search_term}" in ZIP code {zip_code}. '
                    "Could you spell just the street name for me?"
                ),
            )
        return NotFound(
            suggest_action=SuggestAction.HUMAN_HANDOFF,
            prompt=(
                "I'm having trouble finding that address. Let me have someone call you "
                "right back to confirm. What's the best number to reach you?"
            ),
        )

    best = ranked.matches[0]
    if ranked.total == 1 and best.score >= high_confidence:
        display_name = expand_for_speech(best.street.street_name)
        formatted_address = f"{street_number} {display_name}" if street_number else display_name
        return Found(
            street_name=display_name,
            formatted_address=formatted_address,
            zip_code=zip_code,
            confirm_prompt=f"I have {formatted_address} in ZIP code {zip_code}. Is that correct?",
        )

    if ranked.total <= max_candidates:
        options = [expand_for_speech(m.street.street_name) for m in ranked.matches]
        return Ambiguous(
            candidates=options,
            scores=[{"street": name, "score": m.score} for name, m in zip(options, ranked.matches)],
            clarify_prompt=f'I heard something like "{search_term}". Did you mean {_join_with_or(options)}?',
        )

    return TooManyMatches(
        prompt=(
            "There are several streets that sound similar in that ZIP code. "
            "Could you spell just the street name for me?"
        ),
    )
