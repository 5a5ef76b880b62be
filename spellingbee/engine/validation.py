"""
Query guards.

These run once per query, before any wordlist line is read:
  - required letters must all be available (else MissingRequiredLetters)
  - min_length must be a non-negative int (else ValueError; a caller bug,
    not one of the query error kinds)
"""

from typing import AbstractSet

from spellingbee.errors import MissingRequiredLetters


def check_required_letters(available: AbstractSet[str], required: AbstractSet[str]) -> None:
    """Raise MissingRequiredLetters unless required ⊆ available."""
    if not required <= available:
        raise MissingRequiredLetters(required, available)


def check_min_length(min_length: int) -> None:
    # bool is an int subclass; min_length=True is almost certainly a mistake
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise ValueError(f"min_length must be an int; got {min_length!r}")
    if min_length < 0:
        raise ValueError(f"min_length must be >= 0; got {min_length}")
