"""
Double Metaphone style phonetic encoder for street names.

Maps a word to a (primary, alternate) pair of codes of at most four
characters each, so that "Golf" and "Gulf" both encode to "KLF". The same
encoder produces the codes precomputed by the seeding tool and the codes
computed for a caller's utterance at lookup time, so the branch table below
is a storage contract: changing it invalidates every seeded street.
"""
import re
from typing import List, Tuple

CODE_LENGTH = 4

_VOWELS = frozenset("AEIOU")
_NON_ALPHA_RE = re.compile(r"[^A-Z]")

# Two leading spaces and five trailing spaces keep every lookahead in range
_LEFT_PAD = 2
_RIGHT_PAD = 5

# Letters that always map to one code; a doubled letter is consumed as one
_SIMPLE_CODES = {
    "J": "J",
    "K": "K",
    "L": "L",
    "M": "M",
    "N": "N",
    "Q": "K",
    "R": "R",
    "V": "F",
    "Z": "S",
}


def _is_vowel(char: str) -> bool:
    return char in _VOWELS


def _string_at(text: str, start: int, length: int, options: List[str]) -> bool:
    if start < 0 or start >= len(text):
        return False
    return text[start:start + length] in options


def encode(word: str) -> Tuple[str, str]:
    """
    Return the (primary, alternate) phonetic codes for *word*.

    Non-letters are ignored; input with no letters yields ("", "").
    """
    if not word or not isinstance(word, str):
        return "", ""

    letters = _NON_ALPHA_RE.sub("", word.upper())
    if not letters:
        return "", ""

    length = len(letters)
    text = " " * _LEFT_PAD + letters + " " * _RIGHT_PAD
    first = _LEFT_PAD
    end = length + _LEFT_PAD
    current = first
    primary = ""
    alternate = ""

    # Silent first letter
    if _string_at(text, current, 2, ["GN", "KN", "PN", "WR", "PS"]):
        current += 1

    if text[current] == "X":
        primary += "S"
        alternate += "S"
        current += 1

    while len(primary) < CODE_LENGTH or len(alternate) < CODE_LENGTH:
        if current >= end:
            break

        char = text[current]
        nxt = text[current + 1]

        if char in "AEIOUY":
            if current == first:
                primary += "A"
                alternate += "A"
            current += 1

        elif char == "B":
            primary += "P"
            alternate += "P"
            current += 2 if nxt == "B" else 1

        elif char == "C":
            if _string_at(text, current, 2, ["CH"]):
                primary += "X"
                alternate += "X"
                current += 2
            elif _string_at(text, current, 2, ["CI", "CE", "CY"]):
                primary += "S"
                alternate += "S"
                current += 2
            elif _string_at(text, current, 2, ["CK", "CQ"]):
                primary += "K"
                alternate += "K"
                current += 2
            else:
                primary += "K"
                alternate += "K"
                current += 1

        elif char == "D":
            if _string_at(text, current, 2, ["DG"]):
                if _string_at(text, current + 2, 1, ["I", "E", "Y"]):
                    primary += "J"
                    alternate += "J"
                    current += 3
                else:
                    primary += "TK"
                    alternate += "TK"
                    current += 2
            else:
                primary += "T"
                alternate += "T"
                current += 2 if _string_at(text, current, 2, ["DT", "DD"]) else 1

        elif char == "F":
            primary += "F"
            alternate += "F"
            current += 2 if nxt == "F" else 1

        elif char == "G":
            if nxt == "H":
                # GH only sounds as K at the start of a word
                if current == first:
                    primary += "K"
                    alternate += "K"
                current += 2
            elif nxt == "N":
                primary += "KN"
                alternate += "N"
                current += 2
            elif _string_at(text, current + 1, 1, ["I", "E", "Y"]):
                primary += "J"
                alternate += "K"
                current += 2
            else:
                primary += "K"
                alternate += "K"
                current += 2 if nxt == "G" else 1

        elif char == "H":
            if (current == first or _is_vowel(text[current - 1])) and _is_vowel(nxt):
                primary += "H"
                alternate += "H"
                current += 2
            else:
                current += 1

        elif char == "P":
            if nxt == "H":
                primary += "F"
                alternate += "F"
                current += 2
            else:
                primary += "P"
                alternate += "P"
                current += 2 if _string_at(text, current, 2, ["PP", "PB"]) else 1

        elif char == "S":
            if _string_at(text, current, 2, ["SH"]):
                primary += "X"
                alternate += "X"
                current += 2
            elif _string_at(text, current, 3, ["SIO", "SIA"]):
                primary += "X"
                alternate += "S"
                current += 3
            else:
                primary += "S"
                alternate += "S"
                current += 2 if nxt == "S" else 1

        elif char == "T":
            if _string_at(text, current, 4, ["TION"]):
                primary += "XN"
                alternate += "XN"
                current += 4
            elif _string_at(text, current, 2, ["TH"]):
                # "0" stands for the theta sound
                primary += "0"
                alternate += "T"
                current += 2
            else:
                primary += "T"
                alternate += "T"
                current += 2 if _string_at(text, current, 2, ["TT", "TD"]) else 1

        elif char == "W":
            if nxt == "R":
                primary += "R"
                alternate += "R"
                current += 2
            elif current == first and _is_vowel(nxt):
                primary += "A"
                alternate += "F"
                current += 1
            elif _is_vowel(nxt):
                primary += "A"
                alternate += "A"
                current += 1
            else:
                current += 1

        elif char == "X":
            primary += "KS"
            alternate += "KS"
            current += 2 if nxt == "X" else 1

        elif char in _SIMPLE_CODES:
            code = _SIMPLE_CODES[char]
            primary += code
            alternate += code
            current += 2 if nxt == char else 1

        else:
            current += 1

    return primary[:CODE_LENGTH], alternate[:CODE_LENGTH]

