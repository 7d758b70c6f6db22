"""Recursive descent parser for FlowLang.

Block structure comes purely from indentation: a compound statement
(``when``, ``if``/``else``, ``route``) owns the following lines indented by
exactly one step more than itself, and a block ends at the first line
indented less than the block.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from flowlang.ast.program import Program
from flowlang.ast.statements import (
    IfStatement,
    SetStatement,
    ShowStatement,
    Statement,
    WhenStatement,
)
from flowlang.errors import create_indentation_error, create_parse_error
from flowlang.lang import INDENT_STEP
from flowlang.lang.keywords import suggest_keyword

from .constants import ELSE_RE, IF_RE, SET_RE, SHOW_RE, WHEN_RE
from .cursor import LineCursor
from .expressions import ExpressionParsingMixin
from .routes import RouteParsingMixin
from .tokenize import LineToken, tokenize_lines

logger = logging.getLogger(__name__)


class FlowParser(RouteParsingMixin, ExpressionParsingMixin):
    """
    Parser turning FlowLang source into a :class:`Program`.

    The parser keeps a single forward-only :class:`LineCursor`; nothing is
    ever re-read, and the first grammar violation raises ``ParseError``.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.cursor = LineCursor(tokenize_lines(source))

    def parse(self) -> Program:
        """Parse the entire source."""
        body = self.parse_block(0)
        if not self.cursor.at_end:
            token = self.cursor.peek()
            raise create_parse_error(
                "Unexpected extra input",
                line=token.line_number,
                found=token.text,
            )
        logger.debug("Parsed %d top-level statements", len(body))
        return Program(body=body)

    # ====================================================================
    # Blocks
    # ====================================================================

    def parse_block(self, base_indent: int) -> Tuple[Statement, ...]:
        """Parse statements at *base_indent* until a line indented less."""
        statements: List[Statement] = []
        while not self.cursor.at_end:
            token = self.cursor.peek()
            if token.indent < base_indent:
                break
            if token.indent > base_indent:
                raise create_indentation_error(
                    f"Unexpected indentation. Expected indent {base_indent} but got {token.indent}.",
                    line=token.line_number,
                    expected_indent=base_indent,
                    found_indent=token.indent,
                )
            statements.append(self.parse_statement(base_indent))
        return tuple(statements)

    def _expect_indented_block(self, header: LineToken, keyword: str, indent: int) -> int:
        """Check the line after *header* opens a child block; return its indent."""
        child_indent = indent + INDENT_STEP
        following = self.cursor.peek()
        if following is None or following.indent <= indent:
            raise create_parse_error(
                f'Expected an indented block after "{keyword}"',
                line=header.line_number,
            )
        if following.indent != child_indent:
            raise create_indentation_error(
                f'Invalid indentation after "{keyword}". Expected {child_indent} spaces.',
                line=following.line_number,
                expected_indent=child_indent,
                found_indent=following.indent,
            )
        return child_indent

    def _parse_child_block(self, header: LineToken, keyword: str, indent: int) -> Tuple[Statement, ...]:
        child_indent = self._expect_indented_block(header, keyword, indent)
        return self.parse_block(child_indent)

    # ====================================================================
    # Statements
    # ====================================================================

    def parse_statement(self, indent: int) -> Statement:
        token = self.cursor.peek()
        lowered = token.text.lower()

        if lowered.startswith("when "):
            return self._parse_when(indent)
        if lowered.startswith("if "):
            return self._parse_if(indent)
        if lowered.startswith("show "):
            return self._parse_show()
        if lowered.startswith("set "):
            return self._parse_set()
        if lowered.startswith("route "):
            return self._parse_route(indent)

        suggestion = suggest_keyword(token.text)
        raise create_parse_error(
            f'Unknown statement: "{token.text}"',
            line=token.line_number,
            suggestion=f"Did you mean '{suggestion}'?" if suggestion else None,
        )

    def _parse_when(self, indent: int) -> WhenStatement:
        header = self.cursor.advance()
        match = WHEN_RE.match(header.text)
        if not match:
            raise create_parse_error("Invalid when syntax", line=header.line_number)
        event_name = match.group(1).strip()
        body = self._parse_child_block(header, "when", indent)
        return WhenStatement(event_name=event_name, body=body)

    def _parse_if(self, indent: int) -> IfStatement:
        header = self.cursor.advance()
        match = IF_RE.match(header.text)
        if not match:
            raise create_parse_error("Invalid if syntax", line=header.line_number)
        test = self.parse_expression(match.group(1).strip(), header.line_number)
        then_body = self._parse_child_block(header, "if", indent)

        else_body = None
        candidate = self.cursor.peek()
        if candidate is not None and candidate.indent == indent and ELSE_RE.match(candidate.text):
            self.cursor.advance()
            else_body = self._parse_child_block(candidate, "else", indent)

        return IfStatement(test=test, then_body=then_body, else_body=else_body)

    def _parse_show(self) -> ShowStatement:
        header = self.cursor.advance()
        match = SHOW_RE.match(header.text)
        if not match:
            raise create_parse_error("Invalid show syntax", line=header.line_number)
        return ShowStatement(value=self.parse_expression(match.group(1).strip(), header.line_number))

    def _parse_set(self) -> SetStatement:
        header = self.cursor.advance()
        match = SET_RE.match(header.text)
        if not match:
            raise create_parse_error(
                "Invalid set syntax. Use: set <name> to <value>",
                line=header.line_number,
                found=header.text,
            )
        return SetStatement(
            name=match.group(1),
            value=self.parse_expression(match.group(2).strip(), header.line_number),
        )


__all__ = ["FlowParser"]
