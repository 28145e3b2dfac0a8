# apps/cli/play.py
"""
Interactive solver: suggests a guess, reads the colours you got back, and
narrows the dictionary until one word is left.

Pattern input uses one symbol per letter:
  'c' = green (correct), 'm' = yellow (misplaced), 'x' = grey (wrong)

    $ python -m apps.cli.play --words words.json
    $ python -m apps.cli.play --words words.json --compute-starter
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from narrowdle.datasets import load_dictionary, pretty_summary, validate_dictionary
from narrowdle.engine import text_to_pattern, text_to_word, word_to_text
from narrowdle.engine.errors import InvalidPatternText, InvalidWordText, PreconditionViolation
from narrowdle.harness import DEFAULT_STARTER, Session

LIST_BELOW = 10  # print the remaining candidates once fewer than this are left

WELCOME = """Welcome to the wordle solver. A pattern input must be
    'm' for yellow, 'c' for green, and 'x' for black.
    eg. mxxxc , xmxxx
"""


def _read_pattern(guess_text: str):
    """Prompt until the user types a well-formed pattern."""
    while True:
        line = input(f"Guess {guess_text} and enter pattern: ")
        try:
            return text_to_pattern(line)
        except InvalidPatternText as e:
            print(f"  {e}")


def main():
    ap = argparse.ArgumentParser(description="narrowdle — interactive Wordle solver")
    ap.add_argument("--words", default="words.json",
                    help="word list: JSON array or one word per line")
    ap.add_argument("--compute-starter", action="store_true",
                    help="compute the best first guess instead of using --starter")
    ap.add_argument("--starter", default=DEFAULT_STARTER, help="first guess to play")
    ap.add_argument("--workers", type=int, help="search processes (default: one per CPU)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    rep = validate_dictionary(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        sys.exit(f"Word list not found: {args.words}")
    dictionary = load_dictionary(args.words)

    if args.compute_starter:
        t0 = time.perf_counter()
        session = Session(dictionary, workers=args.workers)
        print(f"Best starter computed to be: {word_to_text(session.guess)} "
              f"in {time.perf_counter() - t0:.1f}s")
    else:
        try:
            starter = text_to_word(args.starter)
        except InvalidWordText as e:
            sys.exit(str(e))
        session = Session(dictionary, starter=starter, workers=args.workers)

    print(WELCOME)
    while True:
        pattern = _read_pattern(word_to_text(session.guess))
        t0 = time.perf_counter()
        try:
            before, after = session.observe(pattern)
        except PreconditionViolation as e:
            sys.exit(f"{e}; check the patterns you entered.")
        print(f"{before} -> {after} word reduction in {time.perf_counter() - t0:.2f}s")

        if after < LIST_BELOW:
            for w, _ in session.candidates:
                print(word_to_text(w))
        if session.solved:
            print(f"Word is {word_to_text(session.answer)}")
            break


if __name__ == "__main__":
    main()
