"""FlowLang parser package.

Public API:
    parse_flow(source) -> Program
    try_parse_flow(source) -> ParseOutcome
    FlowParser - The parser class
    tokenize_lines(source) -> list of LineToken
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flowlang.ast.program import Program
from flowlang.errors import IndentationParseError, ParseError

from .parse import FlowParser
from .tokenize import LineToken, tokenize_lines


def parse_flow(source: str) -> Program:
    """
    Parse FlowLang source code into a Program AST.

    Args:
        source: FlowLang source text

    Returns:
        Program AST node

    Raises:
        ParseError: On the first tokenizer or grammar violation

    Example:
        ```python
        program = parse_flow('''
        when app starts
          show "Hi"
        ''')
        print(program.body[0].type)  # "When"
        ```
    """
    return FlowParser(source).parse()


@dataclass(frozen=True)
class ParseOutcome:
    """Either a parsed program or the error that stopped parsing."""

    program: Optional[Program] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_parse_flow(source: str) -> ParseOutcome:
    """Parse *source*, returning the failure as a value instead of raising."""
    try:
        return ParseOutcome(program=parse_flow(source))
    except ParseError as exc:
        return ParseOutcome(error=exc)


__all__ = [
    "parse_flow",
    "try_parse_flow",
    "ParseOutcome",
    "FlowParser",
    "LineToken",
    "tokenize_lines",
    "ParseError",
    "IndentationParseError",
]
