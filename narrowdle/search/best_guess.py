"""
Best-guess search: minimize the expected remaining candidates.

Idea:
  For guess g, every candidate c would answer with some pattern p(g, c).
  Score g by
      score(g) = sum over c of bucket(g, p(g, c))
  where bucket(g, p) is the number of candidates consistent with g getting
  p. Grouped by pattern this is sum_k c_k^2 over the bucket sizes c_k, i.e.
  n times the expected number of candidates left after playing g. Lower is
  better; any dictionary word may be played, not only candidates.

Cache:
  Many candidates share a pattern, so bucket sizes are kept per guess in an
  array of PATTERN_SPACE slots indexed by pattern code. A slot is filled by
  one full scan of the candidates the first time its code shows up.

Parallelism:
  Scores are independent per guess. They are computed on a process pool
  (one task per dictionary word, streamed in chunks), come back in
  dictionary order, and are folded sequentially: the minimum score wins,
  ties go to the smallest dictionary index.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from narrowdle.engine.codec import PATTERN_SPACE, Word, pattern_to_code, word_to_text
from narrowdle.engine.errors import PreconditionViolation
from narrowdle.engine.masks import Entry
from narrowdle.engine.scoring import compute_pattern, pattern_consistent

log = logging.getLogger(__name__)

# Aim for this many chunks per worker when splitting the dictionary
CHUNKS_PER_WORKER = 4

# Candidate set installed in each worker process by the pool initializer
_worker_candidates: Sequence[Entry] = ()


@dataclass(frozen=True)
class SearchResult:
    word: Word
    score: int
    index: int       # position of `word` in the dictionary
    evaluated: int   # number of guesses scored


def score_guess(guess: Word, candidates: Sequence[Entry]) -> int:
    """Sum of bucket sizes over all candidates for one guess (lower is better)."""
    cache = np.full(PATTERN_SPACE, -1, dtype=np.int64)
    total = 0
    for target, target_mask in candidates:
        pattern = compute_pattern(guess, target, target_mask)
        code = pattern_to_code(pattern)
        count = int(cache[code])
        if count < 0:
            count = 0
            for w, w_mask in candidates:
                if pattern_consistent(guess, pattern, w, w_mask):
                    count += 1
            cache[code] = count
        total += count
    return total


def _init_worker(candidates: Sequence[Entry]) -> None:
    global _worker_candidates
    _worker_candidates = candidates


def _score_in_worker(guess: Word) -> int:
    return score_guess(guess, _worker_candidates)


def default_workers() -> int:
    return os.cpu_count() or 1


def score_guesses(
        dictionary: Sequence[Entry],
        candidates: Sequence[Entry],
        *,
        workers: Optional[int] = None,
) -> List[int]:
    """
    Score every dictionary word as a guess. Results are in dictionary order.

    workers=None uses one process per CPU; workers=1 scores in-process.
    """
    guesses = [w for w, _ in dictionary]
    n_workers = default_workers() if workers is None else int(workers)
    if n_workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if n_workers == 1 or len(guesses) < 2:
        return [score_guess(g, candidates) for g in guesses]

    n_workers = min(n_workers, len(guesses))
    chunksize = max(1, len(guesses) // (n_workers * CHUNKS_PER_WORKER))
    log.debug("scoring %d guesses on %d workers (chunksize=%d)",
              len(guesses), n_workers, chunksize)
    with ProcessPoolExecutor(max_workers=n_workers,
                             initializer=_init_worker,
                             initargs=(tuple(candidates),)) as executor:
        return list(executor.map(_score_in_worker, guesses, chunksize=chunksize))


def search(
        dictionary: Sequence[Entry],
        candidates: Sequence[Entry],
        *,
        workers: Optional[int] = None,
) -> SearchResult:
    """
    Find the dictionary word with the lowest score against `candidates`.

    Raises PreconditionViolation if either list is empty.
    """
    if not candidates:
        raise PreconditionViolation("best-guess search needs at least one candidate")
    if not dictionary:
        raise PreconditionViolation("best-guess search needs a non-empty dictionary")

    t0 = time.perf_counter()
    scores = score_guesses(dictionary, candidates, workers=workers)

    best_index = 0
    for i in range(1, len(scores)):
        if scores[i] < scores[best_index]:
            best_index = i

    result = SearchResult(
        word=dictionary[best_index][0],
        score=scores[best_index],
        index=best_index,
        evaluated=len(scores),
    )
    log.info("best guess %s (score %d) over %d candidates in %.2fs",
             word_to_text(result.word), result.score, len(candidates),
             time.perf_counter() - t0)
    return result


def best_guess(
        dictionary: Sequence[Entry],
        candidates: Sequence[Entry],
        *,
        workers: Optional[int] = None,
) -> Word:
    """Return the recommended next guess (see `search`)."""
    return search(dictionary, candidates, workers=workers).word
