"""Tree-walking evaluator for FlowLang programs.

Statements run depth-first in source order against a single mutable
variable mapping. There is no event system yet: every ``when`` body runs
exactly once per call, and ``route`` plans are collected for an external
planner instead of being executed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from flowlang.ast.expressions import (
    BinaryExpression,
    BinaryOperator,
    BooleanLiteral,
    Expression,
    Identifier,
    NumberLiteral,
    StringLiteral,
    TimeLiteral,
)
from flowlang.ast.program import Program
from flowlang.ast.statements import (
    IfStatement,
    RouteStatement,
    SetStatement,
    ShowStatement,
    Statement,
    WhenStatement,
)
from flowlang.config import FlowSettings, get_settings
from flowlang.errors import EvaluationError

from .environment import RunResult, RuntimeEnv
from .values import is_truthy, to_minutes, to_number, to_string_repr

logger = logging.getLogger(__name__)


class Evaluator:
    """Executes one program against one environment."""

    def __init__(self, env: RuntimeEnv, settings: Optional[FlowSettings] = None) -> None:
        self.env = env
        self.settings = settings or get_settings()
        self.result = RunResult(vars=env.vars)
        self.now = env.now if env.now is not None else self.settings.fixed_clock()

    def run(self, program: Program) -> RunResult:
        for stmt in program.body:
            self.execute(stmt)
        logger.debug(
            "Run finished: %d shows, %d vars, %d routes",
            len(self.result.shows),
            len(self.result.vars),
            len(self.result.routes),
        )
        return self.result

    # ====================================================================
    # Statements
    # ====================================================================

    def execute_block(self, statements: Sequence[Statement]) -> None:
        for stmt in statements:
            self.execute(stmt)

    def execute(self, stmt: Statement) -> None:
        if isinstance(stmt, WhenStatement):
            logger.debug("Running when block for event %r", stmt.event_name)
            self.execute_block(stmt.body)
        elif isinstance(stmt, IfStatement):
            if is_truthy(self.evaluate(stmt.test)):
                self.execute_block(stmt.then_body)
            elif stmt.else_body is not None:
                self.execute_block(stmt.else_body)
        elif isinstance(stmt, SetStatement):
            self.env.vars[stmt.name] = self.evaluate(stmt.value)
        elif isinstance(stmt, ShowStatement):
            self._show(self.evaluate(stmt.value))
        elif isinstance(stmt, RouteStatement):
            logger.debug("Collected route plan %r", stmt.name)
            self.result.routes.append(stmt)
        else:
            raise EvaluationError(f"Unknown statement type: {type(stmt).__name__}")

    def _show(self, value: Any) -> None:
        logger.debug("show %r", value)
        self.result.shows.append(value)
        if self.env.on_show is not None:
            self.env.on_show(value)
        elif self.settings.echo_shows:
            print(to_string_repr(value))

    # ====================================================================
    # Expressions
    # ====================================================================

    def evaluate(self, expr: Expression) -> Any:
        if isinstance(expr, (StringLiteral, NumberLiteral, BooleanLiteral, TimeLiteral)):
            return expr.value
        if isinstance(expr, Identifier):
            return self.lookup(expr.name)
        if isinstance(expr, BinaryExpression):
            return self._evaluate_binary(expr)
        raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")

    def lookup(self, name: str) -> Any:
        """Resolve a variable; an unbound name evaluates to its own text."""
        if name in self.env.vars:
            return self.env.vars[name]
        logger.debug("Identifier %r is unbound, using its name", name)
        return name

    def _evaluate_binary(self, expr: BinaryExpression) -> bool:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.op

        if op is BinaryOperator.IS:
            return to_string_repr(left) == to_string_repr(right)
        if op is BinaryOperator.IS_NOT:
            return to_string_repr(left) != to_string_repr(right)
        if op is BinaryOperator.GT:
            return to_number(left) > to_number(right)
        if op is BinaryOperator.LT:
            return to_number(left) < to_number(right)
        if op is BinaryOperator.AFTER:
            return to_minutes(left, self.now) > to_minutes(right, self.now)
        if op is BinaryOperator.BEFORE:
            return to_minutes(left, self.now) < to_minutes(right, self.now)
        raise EvaluationError(f"Unknown binary operator: {op}")


def run(
    program: Program,
    env: Optional[RuntimeEnv] = None,
    *,
    settings: Optional[FlowSettings] = None,
) -> RunResult:
    """
    Execute every top-level statement of *program* once, in order.

    Args:
        program: Parsed program
        env: Variables, clock override and show sink; a fresh one if omitted
        settings: Runtime settings; the cached environment settings if omitted

    Returns:
        RunResult whose ``vars`` is the same mapping as ``env.vars``

    Example:
        >>> from flowlang import parse_flow
        >>> run(parse_flow('show "Hi"')).shows
        ['Hi']
    """
    if env is None:
        env = RuntimeEnv()
    return Evaluator(env, settings).run(program)


__all__ = ["Evaluator", "run"]
