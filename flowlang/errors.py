"""Unified error model for FlowLang.

Every failure surfaced by the parser is a :class:`ParseError` carrying the
1-based source line. Parsing is not error-recovering, so the first error
aborts the whole parse. :class:`EvaluationError` is reserved for internal
invariant violations in the evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class FlowError(Exception):
    """Base class for all FlowLang errors."""

    message: str
    line: Optional[int] = None
    code: str = "FLOW_ERROR"

    def __str__(self) -> str:
        parts = []
        if self.line is not None:
            parts.append(f"Line {self.line}")
        parts.append(f"[{self.code}] {self.message}")
        return " | ".join(parts)


@dataclass
class ParseError(FlowError):
    """Raised by the tokenizer and parser on any grammar violation."""

    found: Optional[str] = None
    suggestion: Optional[str] = None
    code: str = "PARSE_ERROR"

    def __str__(self) -> str:
        base = super().__str__()
        details = []

        if self.found:
            details.append(f"Found: {self.found}")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        if details:
            return base + "\n  " + "\n  ".join(details)

        return base


@dataclass
class IndentationParseError(ParseError):
    """A block is indented by something other than the expected amount."""

    expected_indent: Optional[int] = None
    found_indent: Optional[int] = None
    code: str = "INDENTATION_ERROR"

    def __str__(self) -> str:
        base = FlowError.__str__(self)
        details = []

        if self.expected_indent is not None:
            details.append(f"Expected indentation: {self.expected_indent} spaces")

        if self.found_indent is not None:
            details.append(f"Found indentation: {self.found_indent} spaces")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        if details:
            return base + "\n  " + "\n  ".join(details)

        return base


@dataclass
class EvaluationError(FlowError):
    """Internal evaluator failure, e.g. an AST node outside the closed set."""

    code: str = "INTERNAL_ERROR"


def create_parse_error(
    message: str,
    *,
    line: Optional[int] = None,
    found: Optional[str] = None,
    suggestion: Optional[str] = None,
) -> ParseError:
    """Create a parse error with context."""
    return ParseError(
        message=message,
        line=line,
        found=found,
        suggestion=suggestion,
    )


def create_indentation_error(
    message: str,
    *,
    line: Optional[int] = None,
    expected_indent: Optional[int] = None,
    found_indent: Optional[int] = None,
) -> IndentationParseError:
    """Create an indentation error with the expected/found indents attached."""
    return IndentationParseError(
        message=message,
        line=line,
        expected_indent=expected_indent,
        found_indent=found_indent,
    )


__all__ = [
    "FlowError",
    "ParseError",
    "IndentationParseError",
    "EvaluationError",
    "create_parse_error",
    "create_indentation_error",
]
