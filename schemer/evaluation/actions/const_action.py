from schemer import Expression, EvaluatorFn
from schemer.builtins import is_primitive_name
from schemer.errors import UnknownPrimitive
from schemer.types.atoms import is_boolean, is_number
from schemer.types.environment import Environment
from schemer.types.function import Primitive, is_function


def const_action(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    """Numbers, booleans and function values evaluate to themselves; a primitive
    name evaluates to the Primitive it denotes."""
    if is_number(expr) or is_boolean(expr) or is_function(expr):
        return expr
    if is_primitive_name(expr):
        return Primitive(expr)
    # Unreachable unless the classifier and this handler disagree
    raise UnknownPrimitive(f"const cannot evaluate {expr!r}", expr)
