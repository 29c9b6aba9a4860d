# Core type aliases for Schemer's data model.
# We use plain Python types (int, float, bool, str, list) to represent both
# code (expressions) and runtime values. Symbols are plain `str`; lists are
# plain `list`. No explicit Cons or Symbol type is defined.
#
# Naming guidance:
# - Atom:       a number, a boolean or a symbolic name.
# - Expression: an Atom, a list of Expressions, or a function value
#               (Primitive / Closure) produced by evaluation.

from typing import Any, Callable, Union

Atom = Union[int, float, bool, str]
# Recursive structure is not expressible without a forward reference; keep it loose.
Expression = Any

# Evaluator function type: the recursive `meaning(expr, env)` handed to action handlers
EvaluatorFn = Callable[..., Expression]

from schemer.evaluation.evaluator import evaluate, meaning, value  # noqa: E402

__all__ = ["Atom", "Expression", "EvaluatorFn", "evaluate", "meaning", "value"]
