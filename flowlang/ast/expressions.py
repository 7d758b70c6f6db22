"""Expression nodes of the FlowLang AST."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class BinaryOperator(Enum):
    """Operators accepted between two atoms."""

    IS = "is"
    IS_NOT = "is_not"
    GT = "gt"
    LT = "lt"
    AFTER = "after"
    BEFORE = "before"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StringLiteral:
    value: str

    type: ClassVar[str] = "StringLiteral"


@dataclass(frozen=True)
class NumberLiteral:
    value: float

    type: ClassVar[str] = "NumberLiteral"


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool

    type: ClassVar[str] = "BooleanLiteral"


@dataclass(frozen=True)
class TimeLiteral:
    """Clock time written as ``HH:MM``; the range is not validated."""

    value: str

    type: ClassVar[str] = "TimeLiteral"


@dataclass(frozen=True)
class Identifier:
    name: str

    type: ClassVar[str] = "Identifier"


@dataclass(frozen=True)
class BinaryExpression:
    """A single ``left <op> right`` comparison; operands are always atoms."""

    op: BinaryOperator
    left: "Expression"
    right: "Expression"

    type: ClassVar[str] = "Binary"


Atom = Union[StringLiteral, NumberLiteral, BooleanLiteral, TimeLiteral, Identifier]
Expression = Union[Atom, BinaryExpression]


__all__ = [
    "BinaryOperator",
    "StringLiteral",
    "NumberLiteral",
    "BooleanLiteral",
    "TimeLiteral",
    "Identifier",
    "BinaryExpression",
    "Atom",
    "Expression",
]
