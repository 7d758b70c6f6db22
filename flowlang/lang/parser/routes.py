"""Parsing of ``route`` blocks.

A route header is followed by an option block, one option per line::

    route delivery
      from "Warehouse A"
      to "Customer B"
      prefer shortest_time
      avoid tolls
      max stops 6
      depart at 08:30
      arrive before 12:00

Options may appear in any order. Only ``avoid`` may repeat; repeats of the
same avoidance collapse into one entry.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from flowlang.ast.expressions import StringLiteral
from flowlang.ast.statements import RouteAvoidance, RoutePreference, RouteStatement
from flowlang.errors import create_indentation_error, create_parse_error
from flowlang.lang.keywords import suggest_keyword

from .constants import (
    ROUTE_ARRIVE_BEFORE_RE,
    ROUTE_AVOID_RE,
    ROUTE_DEPART_AT_RE,
    ROUTE_FROM_RE,
    ROUTE_HEADER_RE,
    ROUTE_MAX_STOPS_RE,
    ROUTE_PREFER_RE,
    ROUTE_TO_RE,
)
from .tokenize import LineToken

logger = logging.getLogger(__name__)


class RouteParsingMixin:
    """Mixin providing ``route`` parsing to :class:`FlowParser`."""

    def _parse_route(self, indent: int) -> RouteStatement:
        header = self.cursor.advance()
        match = ROUTE_HEADER_RE.match(header.text)
        if not match:
            raise create_parse_error(
                "Invalid route syntax. Use: route <name>",
                line=header.line_number,
                found=header.text,
            )
        option_indent = self._expect_indented_block(header, "route", indent)

        options: Dict[str, Any] = {}
        avoid: List[RouteAvoidance] = []
        while not self.cursor.at_end:
            token = self.cursor.peek()
            if token.indent < option_indent:
                break
            if token.indent > option_indent:
                raise create_indentation_error(
                    f"Unexpected indentation in route block. "
                    f"Expected indent {option_indent} but got {token.indent}.",
                    line=token.line_number,
                    expected_indent=option_indent,
                    found_indent=token.indent,
                )
            self.cursor.advance()
            self._parse_route_option(token, options, avoid)

        route = RouteStatement(name=match.group(1), avoid=tuple(avoid) or None, **options)
        logger.debug("Parsed route %r with options %s", route.name, sorted(options))
        return route

    def _parse_route_option(
        self,
        token: LineToken,
        options: Dict[str, Any],
        avoid: List[RouteAvoidance],
    ) -> None:
        text = token.text

        match = ROUTE_AVOID_RE.match(text)
        if match:
            avoidance = RouteAvoidance(match.group(1).lower())
            if avoidance not in avoid:
                avoid.append(avoidance)
            return

        match = ROUTE_FROM_RE.match(text)
        if match:
            value = self._parse_route_place(match.group(1), "from", token)
            self._store_route_option(options, "origin", "from", value, token)
            return

        match = ROUTE_TO_RE.match(text)
        if match:
            value = self._parse_route_place(match.group(1), "to", token)
            self._store_route_option(options, "destination", "to", value, token)
            return

        match = ROUTE_PREFER_RE.match(text)
        if match:
            value = RoutePreference(match.group(1).lower())
            self._store_route_option(options, "prefer", "prefer", value, token)
            return

        match = ROUTE_MAX_STOPS_RE.match(text)
        if match:
            self._store_route_option(options, "max_stops", "max stops", int(match.group(1)), token)
            return

        match = ROUTE_DEPART_AT_RE.match(text)
        if match:
            self._store_route_option(options, "depart_at", "depart at", match.group(1), token)
            return

        match = ROUTE_ARRIVE_BEFORE_RE.match(text)
        if match:
            self._store_route_option(options, "arrive_before", "arrive before", match.group(1), token)
            return

        suggestion = suggest_keyword(text, route_option=True)
        raise create_parse_error(
            f'Unknown route option: "{text}"',
            line=token.line_number,
            suggestion=f"Did you mean '{suggestion}'?" if suggestion else None,
        )

    def _parse_route_place(self, text: str, keyword: str, token: LineToken) -> str:
        expr = self.parse_expression(text.strip(), token.line_number)
        if not isinstance(expr, StringLiteral):
            raise create_parse_error(
                f'Route "{keyword}" expects a string literal',
                line=token.line_number,
                found=text.strip(),
                suggestion=f'{keyword} "{text.strip()}"',
            )
        return expr.value

    @staticmethod
    def _store_route_option(
        options: Dict[str, Any],
        field_name: str,
        keyword: str,
        value: Any,
        token: LineToken,
    ) -> None:
        if field_name in options:
            raise create_parse_error(
                f'Duplicate route option "{keyword}"',
                line=token.line_number,
            )
        options[field_name] = value


__all__ = ["RouteParsingMixin"]
