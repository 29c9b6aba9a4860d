"""Primitive operations for the Schemer evaluator.

Every primitive receives its already-evaluated arguments as a Python list and
returns an Expression. The table is fixed at import time: `PRIMITIVES` maps each
recognised name to its arity and implementation, and the classifier consults
`PRIMITIVE_NAMES` to decide that a symbol denotes a primitive constant.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from schemer import Expression
from schemer.errors import EmptyListAccess, TypeMismatch
from schemer.types.atoms import is_atom as _is_atom, is_list, is_number


def _require_list(name: str, x: Expression) -> list[Expression]:
    if not is_list(x):
        raise TypeMismatch(f"{name} requires a list argument, got {x!r}", x)
    return x


def _require_number(name: str, x: Expression) -> int | float:
    if not is_number(x):
        raise TypeMismatch(f"{name} requires a numeric argument, got {x!r}", x)
    return x


# -------------------------------
# List processing
# -------------------------------
def cons(args: list[Expression]) -> list[Expression]:
    """Prepend the first argument to the list given as the second (non-destructive)."""
    first, rest = args
    return [first] + _require_list("cons", rest)


def head(args: list[Expression]) -> Expression:
    """First element of a list.

    Raises EmptyListAccess on the empty list rather than producing an absent value.
    """
    xs = _require_list("head", args[0])
    if not xs:
        raise EmptyListAccess("head of the empty list", xs)
    return xs[0]


def tail(args: list[Expression]) -> list[Expression]:
    """All but the first element; the empty list stays empty."""
    return _require_list("tail", args[0])[1:]


def is_empty(args: list[Expression]) -> bool:
    return len(_require_list("isEmpty", args[0])) == 0


# -------------------------------
# Equality and predicates
# -------------------------------
def is_equal(args: list[Expression]) -> bool:
    """Value equality for atoms, identity for lists.

    Two separately built lists with the same elements are *not* equal.
    Booleans and numbers never compare equal to each other.
    """
    a, b = args
    if is_list(a) or is_list(b):
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def is_atom(args: list[Expression]) -> bool:
    """True for anything that is not a list, function values included."""
    return _is_atom(args[0])


def is_zero(args: list[Expression]) -> bool:
    x = args[0]
    return is_number(x) and x == 0


def is_number_(args: list[Expression]) -> bool:
    return is_number(args[0])


# -------------------------------
# Arithmetic
# -------------------------------
def add_one(args: list[Expression]) -> int | float:
    return _require_number("addOne", args[0]) + 1


def sub_one(args: list[Expression]) -> int | float:
    return _require_number("subOne", args[0]) - 1


@dataclass(frozen=True)
class PrimitiveSpec:
    arity: int
    fn: Callable[[list[Expression]], Expression]


PRIMITIVES: Mapping[str, PrimitiveSpec] = MappingProxyType(
    {
        "cons": PrimitiveSpec(2, cons),
        "head": PrimitiveSpec(1, head),
        "tail": PrimitiveSpec(1, tail),
        "isEmpty": PrimitiveSpec(1, is_empty),
        "isEqual": PrimitiveSpec(2, is_equal),
        "isAtom": PrimitiveSpec(1, is_atom),
        "isZero": PrimitiveSpec(1, is_zero),
        "addOne": PrimitiveSpec(1, add_one),
        "subOne": PrimitiveSpec(1, sub_one),
        "isNumber": PrimitiveSpec(1, is_number_),
    }
)

PRIMITIVE_NAMES: frozenset[str] = frozenset(PRIMITIVES)


def is_primitive_name(x: Expression) -> bool:
    return isinstance(x, str) and x in PRIMITIVE_NAMES
