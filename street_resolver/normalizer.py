"""Street name normalisation: casing, punctuation and suffix/directional forms."""
import re
from typing import Optional

STREET_SUFFIXES = {
    "STREET": "ST", "ST": "ST",
    "ROAD": "RD", "RD": "RD",
    "AVENUE": "AVE", "AVE": "AVE", "AV": "AVE",
    "DRIVE": "DR", "DR": "DR",
    "LANE": "LN", "LN": "LN",
    "COURT": "CT", "CT": "CT",
    "CIRCLE": "CIR", "CIR": "CIR",
    "BOULEVARD": "BLVD", "BLVD": "BLVD",
    "PLACE": "PL", "PL": "PL",
    "TERRACE": "TER", "TER": "TER",
    "WAY": "WAY",
    "TRAIL": "TRL", "TRL": "TRL",
    "PARKWAY": "PKWY", "PKWY": "PKWY",
    "HIGHWAY": "HWY", "HWY": "HWY",
}

DIRECTIONALS = {
    "NORTH": "N", "N": "N",
    "SOUTH": "S", "S": "S",
    "EAST": "E", "E": "E",
    "WEST": "W", "W": "W",
    "NORTHEAST": "NE", "NE": "NE",
    "NORTHWEST": "NW", "NW": "NW",
    "SOUTHEAST": "SE", "SE": "SE",
    "SOUTHWEST": "SW", "SW": "SW",
}

# Canonical suffix -> word the voice assistant should say
SUFFIX_DISPLAY = {
    "ST": "Street",
    "RD": "Road",
    "AVE": "Avenue",
    "DR": "Drive",
    "LN": "Lane",
    "CT": "Court",
    "CIR": "Circle",
    "BLVD": "Boulevard",
    "PL": "Place",
    "TER": "Terrace",
    "WAY": "Way",
    "TRL": "Trail",
    "PKWY": "Parkway",
    "HWY": "Highway",
}

_EDGE_PUNCTUATION_RE = re.compile(r"^[^A-Z0-9]+|[^A-Z0-9]+$")
_NUMBER_RE = re.compile(r"^[0-9]+$")


def normalize(text: Optional[str]) -> str:
    """
    Canonicalise a street name, e.g. "North Grouse Lane," -> "N GROUSE LN".

    Tokens that are neither a known suffix nor a directional pass through
    unchanged.
    """
    if not text:
        return ""
    result = []
    for raw_word in text.upper().split():
        # Transcripts carry artifacts like "Lane," or "Rd."
        word = _EDGE_PUNCTUATION_RE.sub("", raw_word)
        if not word:
            continue
        result.append(STREET_SUFFIXES.get(word) or DIRECTIONALS.get(word) or word)
    return " ".join(result)


def core_name(text: Optional[str]) -> str:
    """Drop suffixes, directionals and house numbers: "North Grouse Lane 2" -> "GROUSE"."""
    return " ".join(
        w for w in normalize(text).split()
        if w not in STREET_SUFFIXES and w not in DIRECTIONALS and not _NUMBER_RE.match(w)
    )


def dominant_suffix(text: Optional[str]) -> Optional[str]:
    """Return the canonical suffix of the last word, or None."""
    words = normalize(text).split()
    if not words:
        return None
    return STREET_SUFFIXES.get(words[-1])


def expand_for_speech(street: Optional[str]) -> str:
    """Spell out a trailing abbreviated suffix: "Grouse LN" -> "Grouse Lane"."""
    if not street:
        return ""
    parts = str(street).split()
    if not parts:
        return ""
    expanded = SUFFIX_DISPLAY.get(parts[-1].upper())
    if expanded:
        parts[-1] = expanded
    return " ".join(parts)
