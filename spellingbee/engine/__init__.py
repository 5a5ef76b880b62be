from .letters import letters_of, word_matches
from .constraints import find_words
from .validation import check_required_letters, check_min_length
from .solver import solve, DEFAULT_WORDLIST

__all__ = [
    "letters_of", "word_matches", "find_words",
    "check_required_letters", "check_min_length", "solve", "DEFAULT_WORDLIST",
]
