"""
Error kinds raised by a spelling-bee query.

Only three conditions abort a whole query. A candidate word that fails one of
the per-word tests is simply left out of the result; it is never an error.

All three share SpellingBeeError so a caller can catch them together, and each
also subclasses the closest builtin so existing `except FileNotFoundError`
style handlers keep working.
"""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet


class SpellingBeeError(Exception):
    """Base class for every query-level failure."""


class MissingRequiredLetters(SpellingBeeError, ValueError):
    """Required letters are not all part of the available letters."""

    def __init__(self, required: AbstractSet[str], available: AbstractSet[str]):
        self.required = frozenset(required)
        self.available = frozenset(available)
        self.missing = self.required - self.available
        super().__init__(
            f"Missing required letter(s) {sorted(self.missing)}: "
            f"required {sorted(self.required)} not in available {sorted(self.available)}"
        )


class WordlistNotFound(SpellingBeeError, FileNotFoundError):
    """The wordlist path does not exist."""

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"Wordlist {self.path!r} does not exist")


class WordlistIsDirectory(SpellingBeeError, IsADirectoryError):
    """The wordlist path is a directory, not a readable file."""

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"The wordlist at {self.path!r} is a directory")
