# apps/cli/run.py
"""
CLI entry point for batch simulations.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the dictionary and the hidden answers, skipping answers it doesn't contain.
  3) Plays every answer with the best-guess search, with a progress bar, and writes:
       - CSV:  per-case results + guess/pattern/code/left columns per turn
       - JSON: manifest with starter, workers, word list report and summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from narrowdle.datasets import (
    load_dictionary, load_words, missing_answers, pretty_summary, validate_dictionary,
)
from narrowdle.engine import text_to_word, word_to_text
from narrowdle.engine.errors import InvalidWordText
from narrowdle.harness import DEFAULT_STARTER, WORDLE_MAX_TURNS, run_batch
from narrowdle.harness.io import run_id, summarize, write_csv, write_manifest
from narrowdle.search import best_guess

log = logging.getLogger("apps.cli.run")


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="narrowdle — run solver simulations")
    ap.add_argument("--words", default="words.json",
                    help="word list used as the dictionary (JSON array or one per line)")
    ap.add_argument("--answers",
                    help="hidden answers to play (defaults to the whole dictionary)")
    ap.add_argument("--starter", default=DEFAULT_STARTER,
                    help="first guess; pass 'auto' to compute it")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--workers", type=int, help="search processes (default: one per CPU)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_dictionary(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        sys.exit(f"Word list not found: {args.words}")

    # 2) Load dictionary, answers and starter
    try:
        dictionary = load_dictionary(args.words)
        answers = load_words(args.answers) if args.answers else [w for w, _ in dictionary]
        starter = None if args.starter == "auto" else text_to_word(args.starter)
    except (InvalidWordText, FileNotFoundError) as e:
        sys.exit(str(e))

    # Answers outside the dictionary can't be won; report and skip them
    missing = missing_answers(answers, dictionary)
    if missing:
        print(f"Skipping {len(missing)} answer(s) not in the dictionary "
              f"(e.g., {[word_to_text(w) for w in missing[:5]]})")
        skip = set(missing)
        answers = [a for a in answers if a not in skip]

    if starter is None:
        starter = best_guess(dictionary, dictionary, workers=args.workers)
        print(f"Computed starter: {word_to_text(starter)}")

    # 3) Run batch (deterministic sample by seed) with live progress
    results = run_batch(answers, dictionary, starter=starter, workers=args.workers,
                        sample=args.sample, seed=args.seed, progress=True)

    summary = summarize(results)
    if summary["solved"]:
        print(f"Solved {summary['solved']}/{summary['cases']} "
              f"in {summary['mean_guesses']:.3f} guesses on average")
    else:
        print(f"Solved 0/{summary['cases']}")

    # 4) Write outputs (CSV + manifest)
    rid = run_id(starter)
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{rid}.csv"), max_turns=WORDLE_MAX_TURNS)
    manifest_path = write_manifest(
        str(outdir / f"run_{rid}_manifest.json"),
        run=rid,
        starter=starter,
        workers=args.workers,
        dictionary_report=rep,
        results=results,
        config=vars(args),
    )
    log.info("batch %s finished: %d cases", rid, len(results))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
