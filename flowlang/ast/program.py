"""Program level AST node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from .statements import Statement


@dataclass(frozen=True)
class Program:
    """Root of a parsed FlowLang source; owns its whole subtree."""

    body: Tuple[Statement, ...] = ()

    type: ClassVar[str] = "Program"


__all__ = ["Program"]
