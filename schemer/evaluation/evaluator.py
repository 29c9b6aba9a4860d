"""Core evaluator for the Schemer interpreter.

`meaning` classifies an expression, picks the handler for its action and runs
it; handlers call back into `meaning` for sub-expressions. `value` starts a
top-level evaluation in the empty environment and `evaluate` is the outward
facing name for it.
"""

from __future__ import annotations

import logging

from schemer import Expression
from schemer.evaluation.actions import ACTIONS
from schemer.errors import RecursionDepthExceeded
from schemer.evaluation.classifier import expression_to_action
from schemer.types.environment import Environment

logger = logging.getLogger(__name__)


def meaning(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` in `env`."""
    logger.debug("finding meaning of %r in %r", expr, env)
    handler = ACTIONS[expression_to_action(expr)]
    val = handler(expr, env, meaning)
    logger.debug("meaning was %r", val)
    return val


def value(expr: Expression) -> Expression:
    return meaning(expr, Environment.empty())


def evaluate(expr: Expression) -> Expression:
    """
    Evaluate a pre-structured expression and return the resulting value.

    Errors surface as subclasses of schemer.errors.SchemerError. Nesting is
    bounded by the host stack; running out of it raises RecursionDepthExceeded.
    """
    try:
        return value(expr)
    except RecursionError:
        raise RecursionDepthExceeded(
            "too much recursion, not evaluable", expr
        ) from None
