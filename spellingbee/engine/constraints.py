"""
Streaming word filter.

Given:
  - the available letters (the puzzle alphabet)
  - the required letters (each must appear in every answer)
  - a minimum word length
  - a source of wordlist lines (file handle, list, generator, ...)

Return:
  - the set of distinct lines that pass every per-word test.

The source is consumed once, in order, one line at a time; only the result
set is kept in memory, so wordlists of any size work.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Set, Union

from .letters import letters_of, word_matches
from .validation import check_min_length, check_required_letters

# Either a raw string ("abdr") or an already-built letter set.
Letters = Union[str, AbstractSet[str]]

DEFAULT_MIN_LENGTH = 4


def _as_letter_set(letters: Letters) -> AbstractSet[str]:
    if isinstance(letters, str):
        return letters_of(letters)
    return frozenset(letters)


def strip_terminator(line: str) -> str:
    """Drop one trailing line terminator ("\\n" or "\\r\\n"); keep everything else."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def find_words(
        available: Letters,
        required: Letters,
        lines: Iterable[str],
        min_length: int = DEFAULT_MIN_LENGTH,
) -> Set[str]:
    """
    Collect every line of `lines` that can be spelled from `available`,
    contains all of `required` and is at least `min_length` characters long.

    Args:
      available  : puzzle letters (string or set)
      required   : mandatory letters (string or set); "" for none
      lines      : iterable of wordlist lines, terminators optional
      min_length : minimum word length in characters (>= 0)

    Raises:
      MissingRequiredLetters if `required` is not a subset of `available`;
      checked before the first line is pulled from `lines`.
      ValueError for a negative or non-int `min_length`.

    Returns:
      Set[str] of qualifying words (duplicates in the source collapse).
    """
    available_set = _as_letter_set(available)
    required_set = _as_letter_set(required)
    check_required_letters(available_set, required_set)
    check_min_length(min_length)

    out: Set[str] = set()
    for line in lines:
        word = strip_terminator(line)
        if word_matches(word, available_set, required_set, min_length):
            out.add(word)

    return out
