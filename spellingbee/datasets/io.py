from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO

from spellingbee.errors import WordlistIsDirectory, WordlistNotFound

logger = logging.getLogger(__name__)


def check_wordlist_path(p: Path | str) -> Path:
    """
    Make sure `p` names a readable wordlist file.
    Raises WordlistNotFound if it doesn't exist, WordlistIsDirectory if it's a directory.
    """
    p = Path(p)
    if not p.exists():
        raise WordlistNotFound(p)
    if p.is_dir():
        raise WordlistIsDirectory(p)
    return p


@contextmanager
def open_wordlist(p: Path | str) -> Iterator[TextIO]:
    """
    Open a UTF-8 wordlist for line-by-line streaming.
    The handle is closed when the `with` block exits, however it exits.
    """
    p = check_wordlist_path(p)
    logger.debug("Opening wordlist %s", p)
    with p.open("r", encoding="utf-8") as f:
        yield f


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises WordlistNotFound / WordlistIsDirectory like open_wordlist.
    """
    with open_wordlist(p) as f:
        return [ln.rstrip("\r\n") for ln in f]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)
