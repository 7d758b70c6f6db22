"""FlowLang runtime: evaluator, environment and value coercions."""

from .environment import RunResult, RuntimeEnv, ShowSink
from .evaluator import Evaluator, run
from .values import (
    CURRENT_TIME_TOKEN,
    Value,
    is_truthy,
    to_minutes,
    to_number,
    to_string_repr,
)

__all__ = [
    "RunResult",
    "RuntimeEnv",
    "ShowSink",
    "Evaluator",
    "run",
    "CURRENT_TIME_TOKEN",
    "Value",
    "is_truthy",
    "to_minutes",
    "to_number",
    "to_string_repr",
]
