"""
Public entry point: solve a spelling-bee puzzle against a wordlist file.

Order of checks:
  1) required letters must be available  -> MissingRequiredLetters
  2) wordlist path must exist            -> WordlistNotFound
  3) wordlist path must not be a dir     -> WordlistIsDirectory
  4) stream the file through find_words

Check (1) runs first so a bad query is reported even when the wordlist path
is bad too, and the file is never opened for it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Set

from tqdm import tqdm

from spellingbee.datasets.io import open_wordlist
from .constraints import DEFAULT_MIN_LENGTH, find_words
from .letters import letters_of
from .validation import check_min_length, check_required_letters

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = Path(__file__).resolve().parent.parent / "datasets" / "data" / "wordlist.txt"


def solve(
        available: str,
        required: str = "",
        *,
        wordlist: Path | str = DEFAULT_WORDLIST,
        min_length: int = DEFAULT_MIN_LENGTH,
        progress: bool = False,
) -> Set[str]:
    """
    Find every word in `wordlist` made only of `available` letters, containing
    all `required` letters and at least `min_length` characters long.

    Examples (with the bundled wordlist):
      solve("efl")                        -> {"leef", "flee", "fell", "feel"}
      solve("abdr", "a", min_length=5)    -> {"radar", "draba", "barba", "babar", "araba"}

    Set progress=True to show a tqdm bar (lines scanned) on stderr.
    """
    available_set = letters_of(available)
    required_set = letters_of(required)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Available %s; required: %s; wordlist: %s; min_length: %s",
            sorted(available_set), sorted(required_set), wordlist, min_length,
        )

    check_required_letters(available_set, required_set)
    check_min_length(min_length)

    with open_wordlist(wordlist) as f:
        lines = tqdm(f, desc="Scanning", unit="word", leave=False) if progress else f
        words = find_words(available_set, required_set, lines, min_length)

    logger.info("Found %d word(s) in %s", len(words), wordlist)
    return words
