"""Term processing shared by indexing and querying."""
from .terms import STOP_WORDS, process_term, tokenize

__all__ = [
    "STOP_WORDS",
    "process_term",
    "tokenize",
]
