"""Decode street names that a caller spelled out letter by letter."""
import re
from typing import Optional

# NATO alphabet plus the older radio alphabets callers still use
PHONETIC_ALPHABET = {
    "ALPHA": "A", "ABLE": "A",
    "BRAVO": "B", "BAKER": "B", "BOY": "B",
    "CHARLIE": "C", "CHARLES": "C",
    "DELTA": "D", "DOG": "D", "DAVID": "D",
    "ECHO": "E", "EASY": "E", "EDWARD": "E",
    "FOXTROT": "F", "FOX": "F", "FRANK": "F",
    "GOLF": "G", "GEORGE": "G",
    "HOTEL": "H", "HENRY": "H", "HOW": "H",
    "INDIA": "I", "IDA": "I", "ITEM": "I",
    "JULIET": "J", "JOHN": "J", "JIG": "J",
    "KILO": "K", "KING": "K",
    "LIMA": "L", "LOVE": "L", "LINCOLN": "L",
    "MIKE": "M", "MARY": "M",
    "NOVEMBER": "N", "NANCY": "N", "NAN": "N",
    "OSCAR": "O", "OBOE": "O", "OCEAN": "O",
    "PAPA": "P", "PETER": "P",
    "QUEBEC": "Q", "QUEEN": "Q",
    "ROMEO": "R", "ROGER": "R", "ROBERT": "R",
    "SIERRA": "S", "SUGAR": "S", "SAM": "S",
    "TANGO": "T", "TOM": "T", "THOMAS": "T",
    "UNIFORM": "U", "UNCLE": "U",
    "VICTOR": "V", "VERY": "V",
    "WHISKEY": "W", "WILLIAM": "W",
    "XRAY": "X",
    "YANKEE": "Y", "YELLOW": "Y", "YOUNG": "Y",
    "ZULU": "Z", "ZEBRA": "Z",
}

# "G AS IN GEORGE": the example word only illustrates the letter before it
_LETTER_AS_IN_RE = re.compile(r"\b([A-Z])\s+AS\s+IN\s+[A-Z]+(?:-[A-Z]+)?")
_AS_IN_RE = re.compile(r"\bAS\s+IN\b")
_SEPARATORS_RE = re.compile(r"[,.-]")
_LETTER_RE = re.compile(r"^[A-Z]$")


def decode(text: Optional[str]) -> str:
    """
    Turn "G as in George, O, L, F", "G O L F" or "Golf Oscar Lima Foxtrot"
    into "GOLF".

    Words that are neither a single letter nor in the phonetic alphabet are
    skipped, so a plain word like "Grouse" decodes to "". Callers treat an
    empty result as "use the raw text as the street name".
    """
    if not text:
        return ""

    normalized = _LETTER_AS_IN_RE.sub(r"\1", text.upper())
    normalized = _AS_IN_RE.sub(" ", normalized)
    normalized = _SEPARATORS_RE.sub(" ", normalized)

    letters = []
    for word in normalized.split():
        if _LETTER_RE.match(word):
            letters.append(word)
        elif word in PHONETIC_ALPHABET:
            letters.append(PHONETIC_ALPHABET[word])
    return "".join(letters)
