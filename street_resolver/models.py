"""
Typed data models for the street resolution engine.
All data structures used throughout the codebase should be defined here.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


class SuggestAction:
    """Next step the voice assistant should take after a non-match."""
    REQUEST_SPELLING = "request_spelling"
    HUMAN_HANDOFF = "human_handoff"
    VERIFY_ZIP = "verify_zip"


@dataclass
class StreetRecord:
    """One known street for one restaurant in one ZIP code."""
    restaurant_id: str
    zip_code: str
    street_name: str  # Display form, e.g. "Grouse LN"
    phonetic_primary: Optional[str] = None
    phonetic_alternate: Optional[str] = None
    core_name: Optional[str] = None  # Suffix/directional-stripped, e.g. "GROUSE"
    created_at: Optional[str] = None  # ISO-8601

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "StreetRecord":
        """Build a record from a street store item."""
        return cls(
            restaurant_id=str(item.get("restaurantId") or ""),
            zip_code=str(item.get("zipCode") or ""),
            street_name=str(item.get("streetName") or ""),
            phonetic_primary=item.get("metaphonePrimary") or None,
            phonetic_alternate=item.get("metaphoneAlt") or None,
            core_name=item.get("core") or None,
            created_at=item.get("createdAt"),
        )

    def to_item(self) -> Dict[str, Any]:
        """Convert to the street store item shape."""
        return {
            "restaurantId": self.restaurant_id,
            "zipCode": self.zip_code,
            "streetName": self.street_name,
            "metaphonePrimary": self.phonetic_primary or "",
            "metaphoneAlt": self.phonetic_alternate or "",
            "core": self.core_name or "",
            "createdAt": self.created_at,
        }


@dataclass
class LookupRequest:
    """One caller address lookup, as handed over by the tool-call adapter."""
    restaurant_id: Optional[str]
    zip_code: Optional[str]
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    spelled_street_name: Optional[str] = None
    attempt_number: int = 1


@dataclass
class ScoredCandidate:
    """A stored street plus its score against what the caller said."""
    street: StreetRecord
    score: int


@dataclass
class RankedMatches:
    """Top candidates plus how many cleared the relevance threshold overall."""
    matches: List[ScoredCandidate] = field(default_factory=list)
    total: int = 0


@dataclass
class CacheEntry:
    streets: List[StreetRecord]
    timestamp: float


# ── Outcomes ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Found:
    street_name: str
    formatted_address: str
    zip_code: str
    confirm_prompt: str
    result: str = "found"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "confidence": "high",
            "streetName": self.street_name,
            "formattedAddress": self.formatted_address,
            "zipCode": self.zip_code,
            "confirmPrompt": self.confirm_prompt,
        }


@dataclass(frozen=True)
class Ambiguous:
    candidates: List[str]
    scores: List[Dict[str, Any]]  # [{"street": str, "score": int}]
    clarify_prompt: str
    result: str = "ambiguous"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "candidates": list(self.candidates),
            "scores": [dict(s) for s in self.scores],
            "clarifyPrompt": self.clarify_prompt,
        }


@dataclass(frozen=True)
class NotFound:
    suggest_action: str
    prompt: str
    result: str = "not_found"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "suggestAction": self.suggest_action,
            "prompt": self.prompt,
        }


@dataclass(frozen=True)
class ZipNotCovered:
    restaurant_id: str
    zip_code: str
    message: str
    suggest_action: str = SuggestAction.VERIFY_ZIP
    result: str = "zip_not_covered"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "restaurantId": self.restaurant_id,
            "zipCode": self.zip_code,
            "message": self.message,
            "suggestAction": self.suggest_action,
        }


@dataclass(frozen=True)
class TooManyMatches:
    prompt: str
    suggest_action: str = SuggestAction.REQUEST_SPELLING
    result: str = "too_many_matches"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "suggestAction": self.suggest_action,
            "prompt": self.prompt,
        }


@dataclass(frozen=True)
class Error:
    message: str
    result: str = "error"

    def to_payload(self) -> Dict[str, Any]:
        return {"result": self.result, "message": self.message}


Outcome = Union[Found, Ambiguous, NotFound, ZipNotCovered, TooManyMatches, Error]
