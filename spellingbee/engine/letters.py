"""
Letter sets and the per-word tests of a spelling-bee query.

A "letter" is one Unicode code point, i.e. one element of a Python `str`.
Nothing is case-folded or normalized here: "A" and "a" are different letters.
Callers that want case-insensitive puzzles lower-case both the letters and the
wordlist themselves.
"""

from __future__ import annotations

from typing import AbstractSet, FrozenSet

# Letter sets are immutable once built; one per query.
LetterSet = FrozenSet[str]


def letters_of(s: str) -> LetterSet:
    """
    Split a string into its distinct letters.

    Repeats collapse: letters_of("aab") == letters_of("ab") == {"a", "b"}.
    """
    return frozenset(s)


def is_spellable(word: str, available: AbstractSet[str]) -> bool:
    """
    True if every character of `word` is an available letter.

    Letters may be reused any number of times. Stops at the first character
    that is not available. The empty word is trivially spellable.
    """
    for ch in word:
        if ch not in available:
            return False
    return True


def is_long_enough(word: str, min_length: int) -> bool:
    return len(word) >= min_length


def has_required(word: str, required: AbstractSet[str]) -> bool:
    """True if `word` contains each required letter at least once."""
    return required <= set(word)


def word_matches(
        word: str,
        available: AbstractSet[str],
        required: AbstractSet[str],
        min_length: int,
) -> bool:
    """
    Conjunction of the three per-word tests.

    Cheapest rejections first; the order does not change the outcome.
    """
    return (
            is_spellable(word, available)
            and is_long_enough(word, min_length)
            and has_required(word, required)
    )
