"""
Wordle-style scoring (feedback) for a single (guess, target) pair, and the
inverse question: could `word` be the target behind an observed pattern?

Both functions work on letter masks instead of counting letters on the
fly. Duplicate letters are handled purely by mask arithmetic: each Correct
or Misplaced tile consumes one occurrence of its letter, so a letter
guessed twice against a target holding it once gets one non-Wrong tile.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all Correct tiles and consumes their letters.
  2) Second pass, left to right, marks Misplaced only while the letter still
     has budget left; everything else stays Wrong.

The masks passed in are never modified; each call works on a local copy.
"""

from __future__ import annotations

from .codec import NUM_LETTERS, Pattern, Tile, Word
from .masks import LetterMask


def compute_pattern(guess: Word, target: Word, target_mask: LetterMask) -> Pattern:
    """
    Compute the feedback `guess` receives against `target`.

    Examples (as text):
      compute_pattern("hello", "there") -> "mmxxx"
      compute_pattern("speed", "abide") -> "xxmxm"
    """
    remaining = list(target_mask)
    tiles = [Tile.WRONG] * NUM_LETTERS

    # Pass 1: exact matches
    for i in range(NUM_LETTERS):
        g = guess[i]
        if g == target[i]:
            tiles[i] = Tile.CORRECT
            remaining[g] -= 1

    # Pass 2: misplaced matches, capped by what's left of each letter
    for i in range(NUM_LETTERS):
        if tiles[i] == Tile.CORRECT:
            continue
        g = guess[i]
        if remaining[g] > 0:
            tiles[i] = Tile.MISPLACED
            remaining[g] -= 1

    return tuple(tiles)


def pattern_consistent(guess: Word, pattern: Pattern, word: Word, word_mask: LetterMask) -> bool:
    """
    Return True if `word` could be the target that produced `pattern` for
    `guess`, without computing a full pattern for it.

    Mirrors the two passes of compute_pattern:
      - pass 1: every Correct tile must match positionally (bail out early
        otherwise) and consumes its letter
      - pass 2: in index order, a Misplaced tile must sit off-position and
        find its letter still available (consuming it); a Wrong tile must
        find no occurrence of its letter left
    """
    remaining = list(word_mask)

    for i in range(NUM_LETTERS):
        if pattern[i] == Tile.CORRECT:
            g = guess[i]
            if g != word[i]:
                return False
            remaining[g] -= 1

    for i in range(NUM_LETTERS):
        t = pattern[i]
        g = guess[i]
        if t == Tile.MISPLACED:
            if g == word[i] or remaining[g] == 0:
                return False
            remaining[g] -= 1
        elif t == Tile.WRONG:
            if remaining[g] > 0:
                return False

    return True
