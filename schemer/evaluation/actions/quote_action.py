from schemer import Expression, EvaluatorFn
from schemer.errors import InvalidSpecialForm
from schemer.types.environment import Environment


def quote_action(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    """(quote payload) returns payload verbatim; this stops the evaluation process."""
    if len(expr) != 2:
        raise InvalidSpecialForm("quote requires exactly one argument", expr)
    _, quoted = expr
    return quoted
