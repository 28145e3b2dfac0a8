from .validator import validate_dictionary, pretty_summary, missing_answers
from .io import read_lines, write_lines, load_words, load_dictionary

__all__ = ["validate_dictionary", "pretty_summary", "missing_answers", "read_lines", "write_lines",
           "load_words", "load_dictionary"]
