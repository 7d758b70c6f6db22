"""Statement nodes of the FlowLang AST."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from .expressions import Expression


class RoutePreference(Enum):
    """Optimisation goal requested by a route plan."""

    SHORTEST_TIME = "shortest_time"
    SHORTEST_DISTANCE = "shortest_distance"

    def __str__(self) -> str:
        return self.value


class RouteAvoidance(Enum):
    """Things a route plan asks the planner to stay away from."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    TRAFFIC = "traffic"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WhenStatement:
    """Event rule. The event name is free-form text and is not matched at runtime."""

    event_name: str = field(metadata={"json": "eventName"})
    body: Tuple["Statement", ...] = ()

    type: ClassVar[str] = "When"


@dataclass(frozen=True)
class IfStatement:
    test: Expression
    then_body: Tuple["Statement", ...] = field(default=(), metadata={"json": "thenBody"})
    else_body: Optional[Tuple["Statement", ...]] = field(default=None, metadata={"json": "elseBody"})

    type: ClassVar[str] = "If"


@dataclass(frozen=True)
class ShowStatement:
    value: Expression

    type: ClassVar[str] = "Show"


@dataclass(frozen=True)
class SetStatement:
    name: str
    value: Expression

    type: ClassVar[str] = "Set"


@dataclass(frozen=True)
class RouteStatement:
    """Declarative route plan.

    Routes are collected by the evaluator but never executed; solving them is
    left to an external planning engine.
    """

    name: str
    origin: Optional[str] = field(default=None, metadata={"json": "from"})
    destination: Optional[str] = field(default=None, metadata={"json": "to"})
    prefer: Optional[RoutePreference] = None
    # Deduplicated in first-seen order; None rather than empty.
    avoid: Optional[Tuple[RouteAvoidance, ...]] = None
    max_stops: Optional[int] = field(default=None, metadata={"json": "maxStops"})
    depart_at: Optional[str] = field(default=None, metadata={"json": "departAt"})
    arrive_before: Optional[str] = field(default=None, metadata={"json": "arriveBefore"})

    type: ClassVar[str] = "Route"


Statement = Union[WhenStatement, IfStatement, ShowStatement, SetStatement, RouteStatement]


__all__ = [
    "RoutePreference",
    "RouteAvoidance",
    "WhenStatement",
    "IfStatement",
    "ShowStatement",
    "SetStatement",
    "RouteStatement",
    "Statement",
]
