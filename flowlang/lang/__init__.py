"""FlowLang language definition helpers."""

from .keywords import (
    ROUTE_OPTION_KEYWORDS,
    STATEMENT_KEYWORDS,
    suggest_keyword,
)

# Spaces per nesting level.
INDENT_STEP = 2

__all__ = [
    "INDENT_STEP",
    "STATEMENT_KEYWORDS",
    "ROUTE_OPTION_KEYWORDS",
    "suggest_keyword",
]
