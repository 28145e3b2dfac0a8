"""
Conversions between text and the engine's internal representations.

Conventions:
  - Word    : tuple of NUM_LETTERS letter indices, 'a' -> 0 ... 'z' -> 25
  - Tile    : Wrong (0), Misplaced (1), Correct (2)
  - Pattern : tuple of NUM_LETTERS tiles, one per guess position

Patterns have two encodings:
  - text : one char per tile, 'c' = Correct, 'm' = Misplaced, 'x' = Wrong
  - code : little-endian base 3, position i contributes value * 3**i,
           so every pattern maps to an int in [0, PATTERN_SPACE)

The integer code only exists so a pattern can index a fixed-size array.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

from .errors import InvalidPatternText, InvalidWordText

NUM_LETTERS = 5
ALPHABET_SIZE = 26
PATTERN_SPACE = 3 ** NUM_LETTERS

_BASE = ord("a")


class Tile(IntEnum):
    WRONG = 0
    MISPLACED = 1
    CORRECT = 2


Word = Tuple[int, ...]
Pattern = Tuple[Tile, ...]

_TILE_TO_CHAR = {Tile.CORRECT: "c", Tile.MISPLACED: "m", Tile.WRONG: "x"}
_CHAR_TO_TILE = {ch: t for t, ch in _TILE_TO_CHAR.items()}


def word_to_text(word: Word) -> str:
    return "".join(chr(_BASE + i) for i in word)


def text_to_word(text: str) -> Word:
    """
    Parse a word like "crane" into letter indices.

    Raises InvalidWordText if the (stripped, lower-cased) text is not
    exactly NUM_LETTERS letters from 'a'..'z'.
    """
    w = text.strip().lower()
    if len(w) != NUM_LETTERS:
        raise InvalidWordText(f"word must have {NUM_LETTERS} letters, got {text!r}")

    word = tuple(ord(ch) - _BASE for ch in w)
    if any(not 0 <= i < ALPHABET_SIZE for i in word):
        raise InvalidWordText(f"word must only use letters a-z, got {text!r}")
    return word


def pattern_to_text(pattern: Pattern) -> str:
    return "".join(_TILE_TO_CHAR[t] for t in pattern)


def text_to_pattern(text: str) -> Pattern:
    """
    Parse feedback such as "mxxxc".

    Raises InvalidPatternText on a wrong length or any symbol other than
    'c', 'm' and 'x'.
    """
    p = text.strip().lower()
    if len(p) != NUM_LETTERS:
        raise InvalidPatternText(f"pattern must have {NUM_LETTERS} symbols, got {text!r}")
    try:
        return tuple(_CHAR_TO_TILE[ch] for ch in p)
    except KeyError as e:
        raise InvalidPatternText(
            f"bad symbol {e.args[0]!r} in pattern {text!r}; use 'c', 'm' or 'x'") from e


def pattern_to_code(pattern: Pattern) -> int:
    code, power = 0, 1
    for t in pattern:
        code += int(t) * power
        power *= 3
    return code


def code_to_pattern(code: int) -> Pattern:
    if not 0 <= code < PATTERN_SPACE:
        raise ValueError(f"pattern code must be in [0, {PATTERN_SPACE}), got {code}")

    tiles = []
    for _ in range(NUM_LETTERS):
        code, trit = divmod(code, 3)
        tiles.append(Tile(trit))
    return tuple(tiles)
