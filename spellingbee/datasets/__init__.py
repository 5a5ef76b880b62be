from .validator import validate_wordlist, pretty_summary
from .io import open_wordlist, check_wordlist_path, read_lines, write_lines

__all__ = [
    "validate_wordlist", "pretty_summary",
    "open_wordlist", "check_wordlist_path", "read_lines", "write_lines",
]
