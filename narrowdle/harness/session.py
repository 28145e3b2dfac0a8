"""
One interactive game: the current guess plus the shrinking candidate set.

The session never reads or prints anything itself; the CLI (or the
simulation harness) feeds it the observed pattern and asks for the next
guess, so it can be driven by a human or by a hidden answer alike.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from narrowdle.engine.codec import NUM_LETTERS, Pattern, Tile, Word, word_to_text
from narrowdle.engine.constraints import filter_consistent
from narrowdle.engine.errors import PreconditionViolation
from narrowdle.engine.masks import Entry
from narrowdle.search import best_guess

log = logging.getLogger(__name__)

DEFAULT_STARTER = "lares"

SOLVED = (Tile.CORRECT,) * NUM_LETTERS


class Session:
    def __init__(self, dictionary: Sequence[Entry], *, starter: Optional[Word] = None,
                 workers: Optional[int] = None):
        """
        Args:
          dictionary : every legal guess, paired with its mask
          starter    : first guess; computed from the full dictionary if None
          workers    : process count for the best-guess search
        """
        self.dictionary: List[Entry] = list(dictionary)
        self.candidates: List[Entry] = list(self.dictionary)
        self.history: List[Tuple[Word, Pattern]] = []
        self.workers = workers
        if starter is None:
            starter = best_guess(self.dictionary, self.candidates, workers=workers)
        self.guess: Word = starter

    @property
    def solved(self) -> bool:
        return len(self.candidates) == 1

    @property
    def answer(self) -> Optional[Word]:
        return self.candidates[0][0] if self.solved else None

    def observe(self, pattern: Pattern) -> Tuple[int, int]:
        """
        Record the feedback for the current guess and pick the next one.

        Returns (candidates before, candidates after). Raises
        PreconditionViolation if no dictionary word fits the feedback; the
        session is left as it was, so the caller can ask again.
        """
        before = len(self.candidates)
        narrowed = filter_consistent(self.candidates, self.guess, pattern)
        after = len(narrowed)
        log.debug("%s: %d -> %d candidates", word_to_text(self.guess), before, after)

        if after == 0:
            raise PreconditionViolation("no dictionary word is consistent with the feedback")

        self.candidates = narrowed
        self.history.append((self.guess, pattern))
        if self.solved:
            self.guess = self.candidates[0][0]
        elif pattern != SOLVED:
            self.guess = best_guess(self.dictionary, self.candidates, workers=self.workers)
        return before, after
