import re
from typing import Optional

# lunr 2.1.3 English stop words minus the ones that are also names in
# Julia Base (all, any, get, in, is, only, which) or keywords
# (do, else, for, let, where, while, with).
STOP_WORDS = frozenset(
    """
    a able about across after almost also am among an and are as at
    be because been but by can cannot could dear did does either ever every
    from got had has have he her hers him his how however i if into it its
    just least like likely may me might most must my neither no nor not of
    off often on or other our own rather said say says she should since so
    some than that the their them then there these they this tis to too twas
    us wants was we were what when who whom why will would yet you your
    """.split()
)

_SEPARATOR_RE = re.compile(r"[\s\-.]+")
# @ and ! are kept: they are part of macro and mutating function names.
_LEADING_RE = re.compile(r"^[^a-zA-Z0-9@!]+")
_TRAILING_RE = re.compile(r"[^a-zA-Z0-9@!]+$")


def tokenize(text: str) -> list[str]:
    """Split text on whitespace, hyphens and periods.

    Periods are separators so that "add!" is found inside
    "Documenter.Anchors.add!".
    """
    return [token for token in _SEPARATOR_RE.split(text) if token]


def process_term(term: str) -> Optional[str]:
    """Normalize a token, or return None if it should not be indexed."""
    if term.lower() in STOP_WORDS:
        return None

    word = _LEADING_RE.sub("", term)
    word = _TRAILING_RE.sub("", word)
    word = word.lower()

    return word or None
