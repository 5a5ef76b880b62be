"""
Wordlist validator for spellingbee.

What this module does:
- Inspect one wordlist file (one word per line, UTF-8).
- Count lines, blank lines, duplicate lines and lines that are not plain
  lowercase a–z; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

The solver itself accepts any wordlist; these checks only flag lines that can
never match a lowercase puzzle, so a list can be cleaned up (see
script/clean_wordlist.py).

Typical use:
    from spellingbee.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("spellingbee/datasets/data/wordlist.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib
import re

_LOWER_ALPHA_RE = re.compile(r"^[a-z]+$")


def is_lower_alpha(word: str) -> bool:
    """True for a non-empty word of plain lowercase a-z only."""
    return _LOWER_ALPHA_RE.match(word) is not None


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one wordlist file."""
    path: str              # file path (as given)
    exists: bool           # did the path exist on disk?
    is_dir: bool           # was it a directory?
    lines: int = 0         # total lines read
    blank_lines: int = 0   # empty lines (after stripping the terminator)
    duplicate_lines: int = 0
    unique_words: int = 0  # distinct non-blank lines
    non_lower_alpha: int = 0
    sha256: str = ""       # SHA-256 of raw file bytes (empty string if unreadable)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(path: Path | str) -> Dict:
    """
    Validate a wordlist file.

    Never raises for a missing path or a directory; both are reported through
    `exists` / `is_dir` and `issues` instead.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport). `passed` is True
        only for an existing, non-empty file with no blank, duplicate or
        non-lowercase-alpha lines.
    """
    p = Path(path)
    rep = WordlistReport(path=str(path), exists=p.exists(), is_dir=p.is_dir())

    if not rep.exists:
        rep.issues.append(f"wordlist not found: {path}")
        return asdict(rep)
    if rep.is_dir:
        rep.issues.append(f"wordlist is a directory: {path}")
        return asdict(rep)

    seen = set()
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            rep.lines += 1
            w = raw.rstrip("\r\n")
            if not w:
                rep.blank_lines += 1
                continue
            if w in seen:
                rep.duplicate_lines += 1
            else:
                seen.add(w)
            if not is_lower_alpha(w):
                rep.non_lower_alpha += 1

    rep.unique_words = len(seen)
    rep.sha256 = _sha256_file(p)

    if rep.unique_words == 0:
        rep.issues.append("wordlist contains 0 words")
    if rep.blank_lines:
        rep.issues.append(f"{rep.blank_lines} blank line(s)")
    if rep.duplicate_lines:
        rep.issues.append(f"{rep.duplicate_lines} duplicate line(s)")
    if rep.non_lower_alpha:
        rep.issues.append(f"{rep.non_lower_alpha} line(s) not lowercase a-z")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        wordlist=data/wordlist.txt | words=412 (lines=412, sha=abc123...) | blank=0 dup=0 non-alpha=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"] or report["is_dir"]:
        return f"wordlist={report['path']} | {'; '.join(report['issues'])} | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"wordlist={report['path']} | words={report['unique_words']} "
        f"(lines={report['lines']}, sha={sha}) "
        f"| blank={report['blank_lines']} dup={report['duplicate_lines']} "
        f"non-alpha={report['non_lower_alpha']} | {status}"
    )
