"""
Letter masks: per-word letter histograms.

A mask is computed once per dictionary word and stored next to it as an
entry `(word, mask)`. Masks are tuples, so the cached copy can't be
changed by the scans that consume letter budget.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .codec import ALPHABET_SIZE, Word

LetterMask = Tuple[int, ...]
Entry = Tuple[Word, LetterMask]


def compute_mask(word: Word) -> LetterMask:
    counts = [0] * ALPHABET_SIZE
    for letter in word:
        counts[letter] += 1
    return tuple(counts)


def with_masks(words: Iterable[Word]) -> List[Entry]:
    """Pair every word with its mask (done once, at load time)."""
    return [(w, compute_mask(w)) for w in words]
