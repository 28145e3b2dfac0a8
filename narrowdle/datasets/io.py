from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from narrowdle.engine.codec import Word, text_to_word
from narrowdle.engine.errors import InvalidWordText
from narrowdle.engine.masks import Entry, with_masks

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def read_word_strings(p: Path | str) -> List[str]:
    """
    Raw word strings from a word list.

    A `.json` file holds a JSON array of strings; anything else is read as
    one word per line with blank lines dropped.
    """
    p = Path(p)
    if p.suffix.lower() == ".json":
        if not p.exists():
            raise FileNotFoundError(p)
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{p}: expected a JSON array of words")
        return [str(w) for w in data]
    return [ln.strip() for ln in read_lines(p) if ln.strip()]


def load_words(p: Path | str) -> List[Word]:
    """Parse every word of a word list; a bad entry fails the whole load."""
    words: List[Word] = []
    for i, s in enumerate(read_word_strings(p), start=1):
        try:
            words.append(text_to_word(s))
        except InvalidWordText as e:
            raise InvalidWordText(f"{p}: entry {i}: {e}") from e
    log.debug("loaded %d words from %s", len(words), p)
    return words


def load_dictionary(p: Path | str) -> List[Entry]:
    """Load a word list and pair every word with its letter mask."""
    return with_masks(load_words(p))
