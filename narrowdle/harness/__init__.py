from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest, summarize, run_id
from .session import Session, DEFAULT_STARTER

__all__ = ["run_case", "run_batch", "WORDLE_MAX_TURNS", "write_csv", "write_manifest",
           "summarize", "run_id", "Session", "DEFAULT_STARTER"]
