"""
Clean a wordlist so every line is one distinct, solvable word.

spellingbee matches letters exactly, so a list with "Flee", "flee " and "flee"
on separate lines gives three different candidates, of which only one can
ever match. This script:
- trims whitespace around each word and drops the blank lines left over,
- optionally lower-cases every word (--lower),
- optionally drops words that are not plain lowercase a-z (--alpha-only),
- keeps the first spelling of each word (case-folded with --fold-case),
- writes the words in input order, or sorted (--sort alpha|length).

Overwrites the input unless --out is given.

Usage:
    python -m script.clean_wordlist --in spellingbee/datasets/data/wordlist.txt \
        --lower --alpha-only --sort alpha
"""

import argparse
from pathlib import Path

from spellingbee.datasets.io import read_lines, write_lines
from spellingbee.datasets.validator import is_lower_alpha


def dedupe_words(words: list[str], fold_case: bool = False) -> list[str]:
    """First spelling of each word wins; later repeats are dropped."""
    seen = set()
    kept = []
    for w in words:
        k = w.casefold() if fold_case else w
        if k in seen:
            continue
        seen.add(k)
        kept.append(w)
    return kept


def order_words(words: list[str], how: str) -> list[str]:
    if how == "alpha":
        return sorted(words)
    if how == "length":
        return sorted(words, key=lambda w: (-len(w), w))
    return list(words)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Clean a spellingbee wordlist (trim, dedupe, filter, sort).")
    ap.add_argument("--in", dest="inp", required=True, help="wordlist to clean, one word per line")
    ap.add_argument("--out", help="where to write the cleaned list (default: overwrite --in)")
    ap.add_argument("--lower", action="store_true", help="lower-case every word")
    ap.add_argument("--alpha-only", action="store_true", help="drop words that are not plain lowercase a-z")
    ap.add_argument("--fold-case", action="store_true", help="'Flee' and 'flee' count as one word; the first one seen is kept")
    ap.add_argument("--sort", choices=["input", "alpha", "length"], default="input",
                    help="output order (default: input; length = longest first)")
    args = ap.parse_args(argv)

    src = Path(args.inp)
    dest = Path(args.out) if args.out else src

    words = [ln.strip() for ln in read_lines(src)]
    words = [w for w in words if w]
    if args.lower:
        words = [w.lower() for w in words]
    if args.alpha_only:
        words = [w for w in words if is_lower_alpha(w)]

    kept = order_words(dedupe_words(words, fold_case=args.fold_case), args.sort)
    write_lines(kept, dest)
    print(f"Cleaned {src}: {len(words)} word(s) in, {len(kept)} distinct -> {dest}")


if __name__ == "__main__":
    main()
