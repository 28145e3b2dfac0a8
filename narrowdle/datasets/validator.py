"""
Dictionary validator for narrowdle.

What this module does:
- Validate a word list (JSON array or one word per line).
- Enforce formatting rules (a–z only, exact word length), after the same
  strip/lower-case normalization the loader applies.
- Report hidden answers that are missing from the dictionary.
- Detect duplicates and invalid entries; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from narrowdle.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import hashlib

from narrowdle.engine.codec import NUM_LETTERS, Word
from narrowdle.engine.masks import Entry
from .io import read_word_strings


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: int               # required word length
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_entries: int # number of entries that failed the format rules
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _normalize(w: str) -> str:
    return w.strip().lower()


def _is_valid(w: str) -> bool:
    return len(w) == NUM_LETTERS and w.isascii() and w.isalpha()


def _check(entries: List[str]) -> Tuple[List[str], List[str]]:
    """Split raw entries into (valid, invalid); valid words come back normalized."""
    valid: List[str] = []
    invalid: List[str] = []
    for raw in entries:
        w = _normalize(raw)
        if _is_valid(w):
            valid.append(w)
        else:
            invalid.append(raw)
    return valid, invalid


def validate_dictionary(path: str) -> Dict:
    """
    Validate the word list at `path`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        SHA-256, `passed` (non-empty, no invalid entries, no duplicates) and
        `issues` describing any problems.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, NUM_LETTERS, 0, "", 0, 0, False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    try:
        entries = read_word_strings(p)
    except ValueError as e:  # bad JSON or not an array
        rep = DictionaryReport(str(p), True, NUM_LETTERS, 0, _sha256_file(p), 0, 0, False,
                               [f"unreadable dictionary: {e}"])
        return asdict(rep)

    valid, invalid = _check(entries)
    unique = set(valid)

    if not valid:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        # Surface a few examples to debug quickly
        issues.append(f"dictionary has {len(invalid)} invalid entr"
                      f"{'y' if len(invalid) == 1 else 'ies'} (e.g., {invalid[:5]})")
    if len(unique) != len(valid):
        issues.append("dictionary contains duplicate words")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        N=NUM_LETTERS,
        count=len(valid),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_entries=len(invalid),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=12972 (uniq=12972, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_entries']} | {status}"
    )


def missing_answers(answers: Iterable[Word], dictionary: Iterable[Entry]) -> List[Word]:
    """
    Answers that are not dictionary words, in input order.

    A game whose answer is missing can never be won: its own feedback
    eventually rules out every candidate.
    """
    known = {w for w, _ in dictionary}
    return [a for a in answers if a not in known]
