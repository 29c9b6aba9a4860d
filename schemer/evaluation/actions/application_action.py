"""Function application.

Applications can be primitive or non primitive. A primitive application looks
like ['addOne', 10]; a non primitive one puts a lambda (or anything evaluating
to a closure) first: [['lambda', ['a', 'b'], ['cons', 'a', 'b']], 1, []].

The function position is evaluated and checked first, so a non-function head
raises NotCallable before any argument is evaluated. Arguments then evaluate
left to right.
"""

import logging

from schemer import Expression, EvaluatorFn
from schemer.evaluation.apply import apply, evaluate_operand, require_function
from schemer.types.environment import Environment

logger = logging.getLogger(__name__)


def evaluate_args(args: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> list[Expression]:
    return [evaluate_operand(arg, env, evaluate_fn) for arg in args]


def application_action(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    fn_expr, *arg_exprs = expr
    fn = require_function(evaluate_fn(fn_expr, env))
    args = evaluate_args(arg_exprs, env, evaluate_fn)
    logger.debug("apply %r %r", fn, args)
    return apply(fn, args, evaluate_fn)
