"""
spellingbee: find the words a set of letters can spell.

    >>> from spellingbee import solve
    >>> sorted(solve("dgo", "o", min_length=3))
    ['dog', 'god', 'good']
"""

from .errors import (
    SpellingBeeError,
    MissingRequiredLetters,
    WordlistNotFound,
    WordlistIsDirectory,
)
from .engine import solve, find_words, letters_of, DEFAULT_WORDLIST

__all__ = [
    "solve", "find_words", "letters_of", "DEFAULT_WORDLIST",
    "SpellingBeeError", "MissingRequiredLetters", "WordlistNotFound", "WordlistIsDirectory",
]
__version__ = "0.1.0"
