"""
AST serialization - JSON import/export for parsed programs and run results.

Every node is rendered as a dictionary with a ``type`` discriminator and the
camelCase field names external consumers rely on. Optional fields that are
unset are omitted.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict

from .expressions import (
    BinaryExpression,
    BinaryOperator,
    BooleanLiteral,
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
    WhenStatement,
)

if TYPE_CHECKING:
    from flowlang.runtime.environment import RunResult


_NODE_TYPES = {
    cls.type: cls
    for cls in (
        Program,
        WhenStatement,
        IfStatement,
        ShowStatement,
        SetStatement,
        RouteStatement,
        StringLiteral,
        NumberLiteral,
        BooleanLiteral,
        TimeLiteral,
        Identifier,
        BinaryExpression,
    )
}


def serialize_node(node: Any) -> Dict[str, Any]:
    """
    Serialize any AST node to a JSON-compatible dictionary.

    Example:
        >>> serialize_node(Identifier("greeting"))
        {'type': 'Identifier', 'name': 'greeting'}
    """
    if not is_dataclass(node) or getattr(node, "type", None) not in _NODE_TYPES:
        raise TypeError(f"Not a FlowLang AST node: {node!r}")
    data: Dict[str, Any] = {"type": node.type}
    for f in fields(node):
        value = getattr(node, f.name)
        if value is None:
            continue
        data[f.metadata.get("json", f.name)] = _serialize_value(value)
    return data


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [_serialize_value(item) for item in value]
    if is_dataclass(value):
        return serialize_node(value)
    return value


def serialize_program(program: Program) -> Dict[str, Any]:
    """Serialize a whole program."""
    return serialize_node(program)


def serialize_run_result(result: "RunResult") -> Dict[str, Any]:
    """Serialize the record returned by :func:`flowlang.runtime.run`."""
    return {
        "shows": list(result.shows),
        "vars": dict(result.vars),
        "routes": [serialize_node(route) for route in result.routes],
    }


def deserialize_node(data: Dict[str, Any]) -> Any:
    """
    Rebuild an AST node from its serialized form.

    Raises:
        ValueError: If a ``type`` tag or enum value is not recognised
    """
    tag = data.get("type")
    cls = _NODE_TYPES.get(tag)
    if cls is None:
        raise ValueError(f"Unknown node type: {tag!r}")
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        key = f.metadata.get("json", f.name)
        if key not in data:
            continue
        kwargs[f.name] = _deserialize_field(f.name, data[key])
    return cls(**kwargs)


def _deserialize_field(name: str, value: Any) -> Any:
    if name == "op":
        return BinaryOperator(value)
    if name == "prefer":
        return RoutePreference(value)
    if name == "avoid":
        return tuple(RouteAvoidance(item) for item in value)
    if isinstance(value, dict):
        return deserialize_node(value)
    if isinstance(value, list):
        return tuple(deserialize_node(item) for item in value)
    return value


def deserialize_program(data: Dict[str, Any]) -> Program:
    """Rebuild a :class:`Program` from a dictionary produced by :func:`serialize_program`."""
    program = deserialize_node(data)
    if not isinstance(program, Program):
        raise ValueError(f"Expected a Program, got {data.get('type')!r}")
    return program


def program_to_json(program: Program, *, indent: int = 2) -> str:
    """Dump a program as JSON text."""
    return json.dumps(serialize_program(program), indent=indent)


def program_from_json(text: str) -> Program:
    """Load a program from JSON text."""
    return deserialize_program(json.loads(text))


__all__ = [
    "serialize_node",
    "serialize_program",
    "serialize_run_result",
    "deserialize_node",
    "deserialize_program",
    "program_to_json",
    "program_from_json",
]
