"""Forward-only cursor over the line tokens of a source."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .tokenize import LineToken


class LineCursor:
    """Position into a token list that only ever moves forward."""

    def __init__(self, tokens: Sequence[LineToken]) -> None:
        self.tokens: List[LineToken] = list(tokens)
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[LineToken]:
        """Return the current token without consuming it."""
        if self.at_end:
            return None
        return self.tokens[self.pos]

    def advance(self) -> LineToken:
        """Consume and return the current token."""
        token = self.peek()
        if token is None:
            raise IndexError("LineCursor advanced past the last token")
        self.pos += 1
        return token

    def __repr__(self) -> str:
        return f"LineCursor(pos={self.pos}, tokens={len(self.tokens)})"


__all__ = ["LineCursor"]
