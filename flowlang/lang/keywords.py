"""
FlowLang keyword tables.

Statement keywords are matched case-insensitively as line prefixes, in the
order listed here. Route option keywords are only recognised inside a
``route`` block.
"""

from __future__ import annotations

import difflib
from typing import Optional, Tuple

# Dispatch order matters: the first matching prefix wins.
STATEMENT_KEYWORDS: Tuple[str, ...] = ("when", "if", "show", "set", "route")

ROUTE_OPTION_KEYWORDS: Tuple[str, ...] = (
    "from",
    "to",
    "prefer",
    "avoid",
    "max stops",
    "depart at",
    "arrive before",
)


def suggest_keyword(unknown: str, *, route_option: bool = False) -> Optional[str]:
    """
    Suggest the closest keyword for the first word of an unrecognised line.

    Examples:
        >>> suggest_keyword('shwo')
        'show'

        >>> suggest_keyword('prefr', route_option=True)
        'prefer'

        >>> suggest_keyword('xyz123')
    """
    if not unknown:
        return None
    word = unknown.split()[0].lower()
    if route_option:
        candidates = [keyword.split()[0] for keyword in ROUTE_OPTION_KEYWORDS]
    else:
        candidates = list(STATEMENT_KEYWORDS)
    matches = difflib.get_close_matches(word, candidates, n=1, cutoff=0.6)
    if not matches or matches[0] == word:
        return None
    return matches[0]


__all__ = [
    "STATEMENT_KEYWORDS",
    "ROUTE_OPTION_KEYWORDS",
    "suggest_keyword",
]
