# apps/cli/solve.py
"""
CLI entry point for solving a spelling-bee puzzle.

This script:
  1) Optionally validates the wordlist and prints a one-line summary to stderr.
  2) Solves the puzzle (available letters, optional required letters).
  3) Prints the words one per line (or writes them to --out).

Usage:
    python -m apps.cli.solve abdr a --min-length 5
    spellingbee efl --wordlist /usr/share/dict/words --progress
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from spellingbee import solve, SpellingBeeError, DEFAULT_WORDLIST
from spellingbee.datasets import validate_wordlist, pretty_summary, write_lines
from spellingbee.engine import check_required_letters, letters_of
from spellingbee.engine.constraints import DEFAULT_MIN_LENGTH

logger = logging.getLogger("spellingbee")

EXIT_OK = 0
EXIT_ERROR = 2


def _sort_words(words, order: str) -> List[str]:
    """alpha: a..z; length: longest first, then a..z."""
    if order == "length":
        return sorted(words, key=lambda w: (-len(w), w))
    return sorted(words)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="spellingbee",
        description="spellingbee: find the words a set of letters can spell",
    )
    ap.add_argument("available", help="letters words may use (each any number of times)")
    ap.add_argument("required", nargs="?", default="",
                    help="letters every word must contain (must be among AVAILABLE)")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST),
                    help="path to a wordlist, one word per line (default: bundled list)")
    ap.add_argument("--min-length", type=int, default=DEFAULT_MIN_LENGTH,
                    help=f"minimum word length (default: {DEFAULT_MIN_LENGTH})")
    ap.add_argument("--sort", choices=["alpha", "length"], default="alpha",
                    help="output order (default: alpha)")
    ap.add_argument("--out", help="write words to this file instead of stdout")
    ap.add_argument("--progress", action="store_true",
                    help="show a progress bar while scanning the wordlist")
    ap.add_argument("--check-wordlist", action="store_true",
                    help="print a wordlist hygiene summary to stderr before solving")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for info, -vv for debug logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse CLI args, solve, and print or write the words. Returns the exit status.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)

    if args.min_length < 0:
        ap.error("--min-length must be >= 0")

    try:
        # bad letters are reported before the wordlist is read, even for the summary
        check_required_letters(letters_of(args.available), letters_of(args.required))
        if args.check_wordlist:
            sys.stderr.write(pretty_summary(validate_wordlist(args.wordlist)) + "\n")
        words = solve(
            args.available,
            args.required,
            wordlist=args.wordlist,
            min_length=args.min_length,
            progress=args.progress,
        )
    except SpellingBeeError as e:
        logger.debug("Query failed", exc_info=True)
        sys.stderr.write(f"spellingbee: {e}\n")
        return EXIT_ERROR

    ordered = _sort_words(words, args.sort)
    if args.out:
        path = write_lines(ordered, args.out)
        print(f"Wrote: {path} ({len(ordered)} words)")
    else:
        for w in ordered:
            print(w)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
