"""
Candidate filtering given game feedback.

Given:
  - a candidate list of dictionary entries `(word, mask)`
  - a guess and the pattern it received (or a whole history of them)

Return:
  - the entries that are still consistent with the feedback.

This is the step that turns feedback into a shrinking candidate set. Order
is preserved, and each candidate is checked against its own cached mask.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .codec import Pattern, Word
from .masks import Entry
from .scoring import pattern_consistent

# History is a sequence of (guess, pattern) tuples seen so far.
History = Iterable[Tuple[Word, Pattern]]


def filter_consistent(candidates: Iterable[Entry], guess: Word, pattern: Pattern) -> List[Entry]:
    """
    Keep only the entries that could have produced `pattern` for `guess`.

    Returns a new list; the input is left untouched.
    """
    return [(w, m) for w, m in candidates if pattern_consistent(guess, pattern, w, m)]


def filter_history(candidates: Iterable[Entry], history: History) -> List[Entry]:
    """Apply every (guess, pattern) in `history`, in order."""
    out = list(candidates)
    for guess, pattern in history:
        out = filter_consistent(out, guess, pattern)
    return out
