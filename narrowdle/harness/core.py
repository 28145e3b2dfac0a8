"""
Simulation harness primitives.

- run_case:  play a single hidden answer with a Session.
- run_batch: run many answers in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

These functions are intentionally UI-agnostic so they can be reused by
the CLI, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from narrowdle.engine.codec import Word, pattern_to_text, word_to_text
from narrowdle.engine.errors import PreconditionViolation
from narrowdle.engine.masks import Entry, compute_mask
from narrowdle.engine.scoring import compute_pattern
from narrowdle.search import best_guess
from .session import Session

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6

log = logging.getLogger(__name__)


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: Word,
        dictionary: Sequence[Entry],
        *,
        starter: Optional[Word] = None,
        max_turns: int = WORDLE_MAX_TURNS,
        workers: Optional[int] = None,
) -> Dict:
    """
    Play one game until the answer is guessed or the turn budget runs out.

    Args:
        answer:     the hidden word for this case
        dictionary: all legal guesses (the candidate universe)
        starter:    fixed first guess; computed when None
        max_turns:  must be 6 (Wordle rule; enforced)
        workers:    process count for the best-guess search

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)] as text), answer (str),
            left (candidates remaining after each non-winning turn)
    """
    _assert_wordle_turns(max_turns)

    answer_mask = compute_mask(answer)
    history: List[tuple] = []
    left: List[int] = []

    t0 = time.time()
    session = Session(dictionary, starter=starter, workers=workers)
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        guess = session.guess
        pattern = compute_pattern(guess, answer, answer_mask)
        history.append((word_to_text(guess), pattern_to_text(pattern)))

        # Win condition: the guess is the answer
        if guess == answer:
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "left": left, "answer": word_to_text(answer),
            }

        if turn < WORDLE_MAX_TURNS:
            try:
                _, after = session.observe(pattern)
            except PreconditionViolation:
                # The answer is not in the dictionary; nothing left to guess
                log.warning("%s: no candidate left after turn %d", word_to_text(answer), turn)
                break
            left.append(after)

    # Out of turns (or candidates): lose
    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": len(history), "time_ms": dt,
        "history": history, "left": left, "answer": word_to_text(answer),
    }


def run_batch(
        answers: Sequence[Word],
        dictionary: Sequence[Entry],
        *,
        starter: Optional[Word] = None,
        max_turns: int = WORDLE_MAX_TURNS,
        workers: Optional[int] = None,
        sample: Optional[int] = None,
        seed: Optional[int] = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back.

    If `sample` is given only K answers are played: the first K, or K drawn
    by a shuffle seeded with `seed` when one is given. `progress` shows a
    tqdm bar.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        if seed is not None:
            random.Random(seed).shuffle(pool)
        pool = pool[:sample]

    # The opening guess only depends on the dictionary; compute it once
    if starter is None and pool:
        starter = best_guess(dictionary, dictionary, workers=workers)

    iterator = tqdm(pool, ncols=80, desc="Running", unit="game") if progress else pool
    return [
        run_case(ans, dictionary, starter=starter, max_turns=max_turns, workers=workers)
        for ans in iterator
    ]
