"""
FlowLang: a small indentation-structured rule language.

A FlowLang source describes event rules, conditionals, variable
assignments, displayed values and declarative route plans::

    when user logs in
      if time is after 22:00
        show "Good evening"
      else
        show "Hello"

The package is organised as a one-way pipeline:

* ``lang.parser`` – the line tokenizer and the indentation-aware
  recursive-descent parser producing the AST.
* ``ast`` – frozen dataclasses for the abstract syntax tree plus JSON
  serialization helpers.
* ``runtime`` – the tree-walking evaluator, its environment and the value
  coercion rules.

Route plans are parsed and collected but never solved; that is the job of
a planning engine layered on top of this package.
"""

from importlib import metadata as _metadata

from .errors import EvaluationError, FlowError, IndentationParseError, ParseError
from .lang.parser import ParseOutcome, parse_flow, try_parse_flow
from .runtime import RunResult, RuntimeEnv, run

try:  # pragma: no cover - metadata fallback for source trees
    __version__ = _metadata.version("flowlang")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.2.0"

__all__ = [
    "__version__",
    "parse_flow",
    "try_parse_flow",
    "ParseOutcome",
    "run",
    "RuntimeEnv",
    "RunResult",
    "FlowError",
    "ParseError",
    "IndentationParseError",
    "EvaluationError",
]
