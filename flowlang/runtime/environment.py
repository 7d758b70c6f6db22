"""Per-run state handed to and returned from the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from flowlang.ast.statements import RouteStatement

ShowSink = Callable[[Any], None]


@dataclass
class RuntimeEnv:
    """Mutable environment for one :func:`run` call.

    ``vars`` may be seeded before the run and inspected afterwards; it is
    updated in place. ``now`` overrides the wall clock read by ``time``.
    ``on_show`` receives every displayed value as it is produced.
    """

    vars: Dict[str, Any] = field(default_factory=dict)
    now: Optional[datetime] = None
    on_show: Optional[ShowSink] = None


@dataclass
class RunResult:
    """What a run produced, in execution order."""

    shows: List[Any] = field(default_factory=list)
    vars: Dict[str, Any] = field(default_factory=dict)
    routes: List[RouteStatement] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        from flowlang.ast.serialization import serialize_run_result

        return serialize_run_result(self)


__all__ = ["RuntimeEnv", "RunResult", "ShowSink"]
