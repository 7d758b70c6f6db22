"""Line tokenizer for FlowLang.

FlowLang is line oriented: instead of a character-level token stream the
parser consumes one :class:`LineToken` per significant physical line,
carrying the indentation depth that drives block structure.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from flowlang.errors import ParseError

logger = logging.getLogger(__name__)

_LEADING_WHITESPACE_RE = re.compile(r"^(\s*)(.*)$", re.DOTALL)


@dataclass(frozen=True)
class LineToken:
    """A significant source line with its indentation measured."""

    line_number: int
    indent: int
    text: str
    raw: str = ""


def tokenize_lines(source: str) -> List[LineToken]:
    """
    Split *source* into line tokens.

    Blank lines and lines whose content starts with ``#`` are dropped before
    any indentation check, so line numbers in the result may have gaps.

    Raises:
        ParseError: If a line is indented with tabs
    """
    tokens: List[LineToken] = []
    for index, raw in enumerate(source.replace("\r\n", "\n").split("\n")):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue

        match = _LEADING_WHITESPACE_RE.match(raw)
        indent_str = match.group(1)
        if "\t" in indent_str:
            raise ParseError(
                message="Tabs are not allowed. Use spaces for indentation.",
                line=index + 1,
            )

        tokens.append(
            LineToken(
                line_number=index + 1,
                indent=len(indent_str),
                text=match.group(2).strip(),
                raw=raw,
            )
        )

    logger.debug("Tokenized %d significant lines", len(tokens))
    return tokens


__all__ = ["LineToken", "tokenize_lines"]
