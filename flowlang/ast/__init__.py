"""Dataclasses representing the FlowLang abstract syntax tree.

Nodes are frozen and bodies are tuples, so a parsed program is never mutated
after construction. Each node class exposes its serialization tag as the
``type`` class attribute.
"""

from .expressions import (
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
from .program import Program
from .statements import (
    IfStatement,
    RouteAvoidance,
    RoutePreference,
    RouteStatement,
    SetStatement,
    ShowStatement,
    Statement,
    WhenStatement,
)

__all__ = [
    "Atom",
    "BinaryExpression",
    "BinaryOperator",
    "BooleanLiteral",
    "Expression",
    "Identifier",
    "NumberLiteral",
    "StringLiteral",
    "TimeLiteral",
    "Program",
    "IfStatement",
    "RouteAvoidance",
    "RoutePreference",
    "RouteStatement",
    "SetStatement",
    "ShowStatement",
    "Statement",
    "WhenStatement",
]
