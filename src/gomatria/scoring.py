"""Scoring of text under a cipher.

score(text, cipher) folds the text according to the cipher's case policy
and sums a value for every character: the cipher's own value when the
character is mapped, the face value for an unmapped ASCII digit, and zero
for anything else. It never raises and has no side effects.
"""

from typing import Dict, Iterable, List, Tuple

from .models import Cipher

_DIGITS: Dict[str, int] = {str(d): d for d in range(10)}


def fold(text: str, cipher: Cipher) -> str:
    """Return ``text`` as it is scored and stored under ``cipher``."""
    if cipher.case_sensitive:
        return text
    return text.upper()


def score(text: str, cipher: Cipher) -> int:
    total = 0
    letters = cipher.letters
    for ch in fold(text, cipher):
        value = letters.get(ch)
        if value is None:
            # digit fallback; explicit entries above take precedence
            value = _DIGITS.get(ch, 0)
        total += value
    return total


def letter_table(cipher: Cipher) -> List[Tuple[str, int]]:
    """(character, value) pairs of a cipher sorted by character."""
    return sorted(cipher.letters.items())


def unique_in_order(values: Iterable[int]) -> List[int]:
    seen = set()
    out: List[int] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out
