from schemer import Expression, EvaluatorFn
from schemer.errors import InvalidSpecialForm
from schemer.types.atoms import is_list, is_symbol
from schemer.types.environment import Environment
from schemer.types.function import Closure


def lambda_action(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    # (lambda (formals...) body): exactly one body expression, stored unevaluated
    if len(expr) != 3:
        raise InvalidSpecialForm("lambda requires a parameter list and a body", expr)

    _, formals, body = expr
    if not is_list(formals) or not all(is_symbol(f) for f in formals):
        raise InvalidSpecialForm("lambda parameters must be a list of symbols", expr)
    if len(set(formals)) != len(formals):
        raise InvalidSpecialForm("lambda parameters must be distinct", expr)

    return Closure(env, formals, body)
