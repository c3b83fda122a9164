"""
Text Normalizer - canonical forms for loose answer comparison.

Answers are compared case-insensitively, ignoring surrounding whitespace
and diacritical marks, so that a learner typing "caj" on an ASCII keyboard
is credited for "čaj".

Two folding paths exist:
- normalize(): explicit letter substitution table (the one used for matching)
- strip_combining_marks(): Unicode NFD decomposition with combining marks dropped

Both agree on the Latin-alphabet vocabulary this application stores. They are
not equivalent in general: letters such as "ł" have no decomposition, and
non-Latin scripts may fold differently.
"""

import re
import unicodedata
from typing import List

# Lower-case diacritic letters mapped to their base ASCII letter.
# Upper-case forms are covered because normalize() lower-cases first.
DIACRITIC_MAP = {
    'ž': 'z',
    'ć': 'c',
    'č': 'c',
    'š': 's',
    'ň': 'n',
    'ď': 'd',
    'đ': 'd',
    'ť': 't',
    'ľ': 'l',
    'ĺ': 'l',
    'ł': 'l',
    'ř': 'r',
    'ŕ': 'r',
    'á': 'a',
    'ä': 'a',
    'à': 'a',
    'â': 'a',
    'ą': 'a',
    'é': 'e',
    'ě': 'e',
    'è': 'e',
    'ê': 'e',
    'ë': 'e',
    'ę': 'e',
    'í': 'i',
    'ì': 'i',
    'î': 'i',
    'ï': 'i',
    'ó': 'o',
    'ô': 'o',
    'ò': 'o',
    'ö': 'o',
    'ő': 'o',
    'ú': 'u',
    'ů': 'u',
    'ü': 'u',
    'ù': 'u',
    'û': 'u',
    'ű': 'u',
    'ý': 'y',
    'ÿ': 'y',
    'ñ': 'n',
    'ń': 'n',
    'ś': 's',
    'ź': 'z',
    'ż': 'z',
    'ç': 'c',
}

_TRANSLATION_TABLE = str.maketrans(DIACRITIC_MAP)

_WHITESPACE_RE = re.compile(r'\s+')


def _require_str(text) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")


def normalize(text: str) -> str:
    """
    Canonicalize text for case, whitespace and diacritic insensitive comparison.

    Lower-cases, trims surrounding whitespace, collapses internal whitespace
    runs to a single space and replaces the diacritic letters in
    DIACRITIC_MAP with their base letter.

    Args:
        text: Raw text

    Returns:
        str: Canonical form (empty input yields empty output)

    Raises:
        TypeError: If text is not a string

    Examples:
        >>> normalize("  ŽIR ")
        'zir'
        >>> normalize(" hello   world ")
        'hello world'
        >>> normalize("Kuća")
        'kuca'
    """
    _require_str(text)
    collapsed = _WHITESPACE_RE.sub(' ', text.lower().strip())
    return collapsed.translate(_TRANSLATION_TABLE)


def strip_combining_marks(text: str) -> str:
    """
    Decomposition based folding: lower-case, NFD, drop combining marks,
    trim and collapse whitespace.

    Kept alongside normalize() so the two folding strategies can be checked
    against each other.
    """
    _require_str(text)
    decomposed = unicodedata.normalize('NFD', text.lower())
    stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return _WHITESPACE_RE.sub(' ', stripped.strip())


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on runs of whitespace, dropping empty tokens.

    Examples:
        >>> split_into_words("  dobar   dan ")
        ['dobar', 'dan']
        >>> split_into_words("")
        []
    """
    _require_str(text)
    return [word for word in _WHITESPACE_RE.split(text.strip()) if word]
