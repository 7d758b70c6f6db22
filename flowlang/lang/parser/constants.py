"""Regular expression constants for FlowLang parsing."""

import re

from flowlang.ast.expressions import BinaryOperator

_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"

# Statement headers
WHEN_RE = re.compile(r"^when\s+(.+)$", re.IGNORECASE)
IF_RE = re.compile(r"^if\s+(.+)$", re.IGNORECASE)
ELSE_RE = re.compile(r"^else$", re.IGNORECASE)
SHOW_RE = re.compile(r"^show\s+(.+)$", re.IGNORECASE)
SET_RE = re.compile(rf"^set\s+({_IDENT})\s+to\s+(.+)$", re.IGNORECASE)
ROUTE_HEADER_RE = re.compile(rf"^route\s+({_IDENT})$", re.IGNORECASE)

# Route options
ROUTE_FROM_RE = re.compile(r"^from\s+(.+)$", re.IGNORECASE)
ROUTE_TO_RE = re.compile(r"^to\s+(.+)$", re.IGNORECASE)
ROUTE_PREFER_RE = re.compile(r"^prefer\s+(shortest_time|shortest_distance)$", re.IGNORECASE)
ROUTE_AVOID_RE = re.compile(r"^avoid\s+(tolls|highways|traffic)$", re.IGNORECASE)
ROUTE_MAX_STOPS_RE = re.compile(r"^max\s+stops\s+([0-9]+)$", re.IGNORECASE)
ROUTE_DEPART_AT_RE = re.compile(r"^depart\s+at\s+([0-9]{2}:[0-9]{2})$", re.IGNORECASE)
ROUTE_ARRIVE_BEFORE_RE = re.compile(r"^arrive\s+before\s+([0-9]{2}:[0-9]{2})$", re.IGNORECASE)

# Binary splits, tried in order. "is not" and "is after"/"is before" must be
# tried before the bare "is" so the longer operator wins.
BINARY_PATTERNS = (
    (re.compile(r"^(.+?)\s+is\s+not\s+(.+)$", re.IGNORECASE), BinaryOperator.IS_NOT),
    (re.compile(r"^(.+?)\s+is\s+after\s+(.+)$", re.IGNORECASE), BinaryOperator.AFTER),
    (re.compile(r"^(.+?)\s+is\s+before\s+(.+)$", re.IGNORECASE), BinaryOperator.BEFORE),
    (re.compile(r"^(.+?)\s+is\s+(.+)$", re.IGNORECASE), BinaryOperator.IS),
    (re.compile(r"^(.+?)\s*>\s*(.+)$"), BinaryOperator.GT),
    (re.compile(r"^(.+?)\s*<\s*(.+)$"), BinaryOperator.LT),
    (re.compile(r"^(.+?)\s+after\s+(.+)$", re.IGNORECASE), BinaryOperator.AFTER),
    (re.compile(r"^(.+?)\s+before\s+(.+)$", re.IGNORECASE), BinaryOperator.BEFORE),
)

# Atoms
BOOLEAN_RE = re.compile(r"^(true|false)$", re.IGNORECASE)
NUMBER_RE = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")
TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")
IDENTIFIER_RE = re.compile(rf"^{_IDENT}$")

__all__ = [
    "WHEN_RE",
    "IF_RE",
    "ELSE_RE",
    "SHOW_RE",
    "SET_RE",
    "ROUTE_HEADER_RE",
    "ROUTE_FROM_RE",
    "ROUTE_TO_RE",
    "ROUTE_PREFER_RE",
    "ROUTE_AVOID_RE",
    "ROUTE_MAX_STOPS_RE",
    "ROUTE_DEPART_AT_RE",
    "ROUTE_ARRIVE_BEFORE_RE",
    "BINARY_PATTERNS",
    "BOOLEAN_RE",
    "NUMBER_RE",
    "TIME_RE",
    "IDENTIFIER_RE",
]
