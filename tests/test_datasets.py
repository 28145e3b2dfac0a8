import json
from pathlib import Path

import pytest
from narrowdle.datasets import (
    load_dictionary, load_words, missing_answers, pretty_summary, read_lines,
    validate_dictionary, write_lines,
)
from narrowdle.engine import compute_mask, text_to_word, with_masks
from narrowdle.engine.errors import InvalidWordText


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_words_json(tmp_path: Path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps(["crane", "raise", "stare"]), encoding="utf-8")
    assert load_words(p) == [text_to_word(w) for w in ("crane", "raise", "stare")]


def test_load_dictionary_txt_pairs_masks(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "", "speed"])
    d = load_dictionary(p)
    assert len(d) == 2
    for w, m in d:
        assert m == compute_mask(w)


def test_load_words_bad_entry(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "cranes"])
    with pytest.raises(InvalidWordText, match="entry 2"):
        load_words(p)


def test_load_words_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.json")


def test_read_write_lines(tmp_path: Path):
    p = tmp_path / "sub" / "out.txt"
    write_lines(["crane", "stare"], p)
    assert read_lines(p) == ["crane", "stare"]


def test_validate_dictionary_happy_path(tmp_path: Path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps(["crane", "raise", "stare"]), encoding="utf-8")

    rep = validate_dictionary(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    # wrong length and invalid chars should be flagged
    p = tmp_path / "words.txt"
    p.write_text("raise\ncranes\n???\nCRANE\n", encoding="utf-8")

    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert rep["count"] == 2
    assert rep["invalid_entries"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_dictionary_duplicates(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "stare", "crane"])

    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_and_malformed(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "missing.json"))
    assert rep["exists"] is False and rep["passed"] is False

    p = tmp_path / "words.json"
    p.write_text('{"crane": 1}', encoding="utf-8")
    rep = validate_dictionary(str(p))
    assert rep["exists"] is True and rep["passed"] is False


def test_validator_agrees_with_loader(tmp_path: Path):
    # padded or upper-case words load fine, so they must validate too
    p = tmp_path / "words.txt"
    _write(p, ["CRANE", "  stare ", "Raise"])

    rep = validate_dictionary(str(p))
    assert rep["passed"] is True
    assert rep["count"] == len(load_words(p)) == 3
    assert pretty_summary(rep).endswith("OK")


def test_validator_dedupes_after_normalizing(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "CRANE"])

    rep = validate_dictionary(str(p))
    assert rep["unique_count"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])


def test_missing_answers():
    dictionary = with_masks(text_to_word(w) for w in ("crane", "stare", "raise"))
    answers = [text_to_word(w) for w in ("zesty", "stare", "pools")]
    assert missing_answers(answers, dictionary) == [text_to_word("zesty"), text_to_word("pools")]
    assert missing_answers(answers[1:2], dictionary) == []
