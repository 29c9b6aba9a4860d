"""Application engine for Schemer.

This module centralizes function application semantics for the interpreter:
- Primitives are resolved through the fixed primitive table and called with
  their already-evaluated arguments after an arity check.
- Closures bind their formals in a new frame prepended to the *captured*
  environment and evaluate their body there.

Keeping this logic in one place keeps the application handler small.
"""

from __future__ import annotations

import logging

from schemer import Expression, EvaluatorFn
from schemer.builtins import PRIMITIVES
from schemer.errors import ArityMismatch, NotCallable, UnknownPrimitive
from schemer.types.atoms import is_empty_list
from schemer.types.environment import Environment
from schemer.types.function import Closure, Function, Primitive, is_function

logger = logging.getLogger(__name__)


def evaluate_operand(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    """Evaluate a sub-expression, passing a literal empty list through as a value.

    Used for arguments, cond positions and closure bodies; the empty list is a
    terminal value and is never handed to the classifier.
    """
    if is_empty_list(expr):
        return expr
    return evaluate_fn(expr, env)


def require_function(fn: Expression) -> Function:
    if not is_function(fn):
        raise NotCallable(f"Cannot apply non-function {fn!r}", fn)
    return fn


def apply_primitive(fn: Primitive, args: list[Expression]) -> Expression:
    """Apply a primitive to already-evaluated arguments."""
    spec = PRIMITIVES.get(fn.name)
    if spec is None:
        raise UnknownPrimitive(f"Unknown primitive {fn.name}", fn.name)
    if len(args) != spec.arity:
        raise ArityMismatch(
            f"{fn.name} expects {spec.arity} argument(s) but got {len(args)}",
            [fn.name, *args],
        )
    logger.debug("applyPrimitive %s %r", fn.name, args)
    return spec.fn(args)


def apply_closure(
    fn: Closure, args: list[Expression], evaluate_fn: EvaluatorFn
) -> Expression:
    """Apply a user closure.

    Raises ArityMismatch unless exactly one argument is supplied per formal.
    """
    new_env = fn.extend_env(args)
    logger.debug("apply closure %s to %r", fn, args)
    return evaluate_operand(fn.body, new_env, evaluate_fn)


def apply(fn: Function, args: list[Expression], evaluate_fn: EvaluatorFn) -> Expression:
    """Apply either a Primitive or a Closure.

    Anything else in function position raises NotCallable.
    """
    match fn:
        case Primitive():
            return apply_primitive(fn, args)
        case Closure():
            return apply_closure(fn, args, evaluate_fn)
        case _:
            raise NotCallable(f"Cannot apply non-function {fn!r}", fn)
