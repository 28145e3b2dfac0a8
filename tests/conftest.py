import pytest
from narrowdle.engine import text_to_word, with_masks

# Small dictionary for search and session tests (order matters for tie-breaks)
WORDS = [
    "lares", "crane", "there", "hello", "river", "thero", "colon", "pools",
    "spool", "coals", "piece", "evade", "awake", "abide", "speed", "regen",
    "naval", "sissy", "troop", "stare", "trace", "cared", "racer", "scoop",
]


@pytest.fixture
def dictionary():
    return with_masks(text_to_word(w) for w in WORDS)
