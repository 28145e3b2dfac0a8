"""
Writers for simulation runs.

- write_csv:      one row per game. Each turn gets the guess, its feedback as
                  c/m/x text and as base-3 code, and the candidates left after it.
- summarize:      solve rate, mean guesses and the guess-count histogram.
- write_manifest: JSON with the run config, dictionary report and summary.
- run_id:         UTC timestamp plus starter word, used in file names.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional
import csv
import json
import logging
import datetime as dt

from narrowdle.engine.codec import Word, pattern_to_code, text_to_pattern, word_to_text
from narrowdle.search.best_guess import default_workers
from .core import WORDLE_MAX_TURNS

log = logging.getLogger(__name__)


def write_csv(results: List[Dict], path: str, max_turns: int = WORDLE_MAX_TURNS) -> str:
    """
    Serialize a batch of run_case results to CSV.

    Schema (columns):
      answer, success, guesses, time_ms,
      then per turn i: guess_i, patt_i, code_i, left_i

    `left_i` stays empty on the winning turn and on turns never played.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"code_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()

        for r in results:
            row = {
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            left = r.get("left", [])
            for i, (g, patt) in enumerate(r.get("history", [])[:max_turns], start=1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = patt
                row[f"code_{i}"] = pattern_to_code(text_to_pattern(patt))
                if i <= len(left):
                    row[f"left_{i}"] = left[i - 1]
            w.writerow(row)

    log.debug("wrote %d games to %s", len(results), p)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Aggregate a batch: how many were solved, in how many guesses, which failed."""
    solved = [r for r in results if r["success"]]
    histogram = Counter(r["guesses"] for r in solved)
    return {
        "cases": len(results),
        "solved": len(solved),
        "mean_guesses": (sum(r["guesses"] for r in solved) / len(solved)) if solved else None,
        "histogram": {str(k): histogram[k] for k in sorted(histogram)},
        "failed": [r["answer"] for r in results if not r["success"]],
    }


def write_manifest(
        path: str,
        *,
        run: str,
        starter: Word,
        workers: Optional[int],
        dictionary_report: Dict,
        results: List[Dict],
        config: Optional[Dict] = None,
) -> str:
    """
    Write the JSON manifest for a batch.

    Keys: run_id, starter, workers (resolved to the real process count),
    dictionary (validate_dictionary report), summary (see summarize), config.
    """
    manifest = {
        "run_id": run,
        "starter": word_to_text(starter),
        "workers": default_workers() if workers is None else workers,
        "dictionary": dictionary_report,
        "summary": summarize(results),
        "config": config or {},
    }
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def run_id(starter: Word) -> str:
    """File-name friendly id, e.g. 20250820T024121Z_lares."""
    return f"{dt.datetime.now(dt.timezone.utc):%Y%m%dT%H%M%SZ}_{word_to_text(starter)}"
