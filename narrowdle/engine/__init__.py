from .codec import (
    NUM_LETTERS, PATTERN_SPACE, Tile, word_to_text, text_to_word,
    pattern_to_text, text_to_pattern, pattern_to_code, code_to_pattern,
)
from .masks import compute_mask, with_masks
from .scoring import compute_pattern, pattern_consistent
from .constraints import filter_consistent, filter_history
from .errors import InvalidWordText, InvalidPatternText, PreconditionViolation

__all__ = [
    "NUM_LETTERS", "PATTERN_SPACE", "Tile",
    "word_to_text", "text_to_word", "pattern_to_text", "text_to_pattern",
    "pattern_to_code", "code_to_pattern",
    "compute_mask", "with_masks",
    "compute_pattern", "pattern_consistent",
    "filter_consistent", "filter_history",
    "InvalidWordText", "InvalidPatternText", "PreconditionViolation",
]
