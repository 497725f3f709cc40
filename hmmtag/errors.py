"""Exception types raised by hmmtag."""

from __future__ import annotations

from typing import Optional


class HMMTagError(Exception):
    """Base class for hmmtag errors."""


class ConfigurationError(HMMTagError, ValueError):
    """Training input or configuration has the wrong shape."""


class LengthMismatchError(HMMTagError, ValueError):
    """Two sequences that must align position by position differ in length."""

    def __init__(self, expected: int, actual: int, index: Optional[int] = None, what: str = "tags") -> None:
        self.expected = expected
        self.actual = actual
        self.index = index
        where = f"sentence {index}: " if index is not None else ""
        super().__init__(f"{where}expected {expected} {what}, got {actual}")


class DecoderStateError(HMMTagError, RuntimeError):
    """The Viterbi lattice has no valid path through the sentence."""

    def __init__(self, position: int, word: str, message: Optional[str] = None) -> None:
        self.position = position
        self.word = word
        super().__init__(message or (
            f"no reachable tag at position {position} ({word!r}); "
            "every candidate at the previous position lacks outgoing transitions"
        ))
