"""Expression parsing for FlowLang.

Expressions are at most one binary comparison between two atoms::

    expr := atom [ binop atom ]
    atom := string | "true" | "false" | number | HH:MM | ident

There is no precedence chain: the first binary pattern that matches splits
the text once and both halves must be atoms.
"""

from __future__ import annotations

from typing import Optional, Tuple

from flowlang.ast.expressions import (
    Atom,
    BinaryExpression,
    BinaryOperator,
    BooleanLiteral,
    Expression,
    Identifier,
    NumberLiteral,
    StringLiteral,
    TimeLiteral,
)
from flowlang.errors import create_parse_error

from .constants import BINARY_PATTERNS, BOOLEAN_RE, IDENTIFIER_RE, NUMBER_RE, TIME_RE


def is_quoted_string(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "'")


def unquote(text: str) -> str:
    if not is_quoted_string(text):
        return text
    return text[1:-1]


def split_binary(text: str) -> Optional[Tuple[str, BinaryOperator, str]]:
    """Split *text* at the highest priority binary operator, if any."""
    for pattern, op in BINARY_PATTERNS:
        match = pattern.match(text)
        if match:
            return match.group(1).strip(), op, match.group(2).strip()
    return None


class ExpressionParsingMixin:
    """Mixin providing expression parsing to :class:`FlowParser`."""

    def parse_expression(self, text: str, line: int) -> Expression:
        split = split_binary(text)
        if split is not None:
            left_text, op, right_text = split
            return BinaryExpression(
                op=op,
                left=self.parse_atom(left_text, line),
                right=self.parse_atom(right_text, line),
            )
        return self.parse_atom(text, line)

    def parse_atom(self, text: str, line: int) -> Atom:
        candidate = text.strip()

        if is_quoted_string(candidate):
            return StringLiteral(unquote(candidate))

        if BOOLEAN_RE.match(candidate):
            return BooleanLiteral(candidate.lower() == "true")

        if NUMBER_RE.match(candidate):
            return NumberLiteral(float(candidate))

        if TIME_RE.match(candidate):
            return TimeLiteral(candidate)

        if IDENTIFIER_RE.match(candidate):
            return Identifier(candidate)

        raise create_parse_error(
            f'Invalid expression: "{text}"',
            line=line,
            suggestion="Quote text values, e.g. show \"hello world\"" if " " in candidate else None,
        )


__all__ = ["ExpressionParsingMixin", "split_binary", "is_quoted_string", "unquote"]
