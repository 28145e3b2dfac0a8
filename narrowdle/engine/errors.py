"""
Typed failures raised where external text enters the engine, or where the
search is asked to run on an empty candidate set.

All of them are ValueErrors so callers that already guard input parsing
with `except ValueError` keep working.
"""


class NarrowdleError(ValueError):
    """Base class for every error raised by narrowdle."""


class InvalidWordText(NarrowdleError):
    """Word text of the wrong length or outside 'a'..'z'."""


class InvalidPatternText(NarrowdleError):
    """Pattern text of the wrong length or outside {'c', 'm', 'x'}."""


class PreconditionViolation(NarrowdleError):
    """The search (or a session) was left with nothing to work on."""
