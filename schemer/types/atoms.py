"""Shape predicates over host values used as Schemer expressions."""

from __future__ import annotations

from schemer import Expression


def is_boolean(x: Expression) -> bool:
    return x is True or x is False


def is_number(x: Expression) -> bool:
    # bool subclasses int in Python; booleans are never numbers here
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_symbol(x: Expression) -> bool:
    return isinstance(x, str)


def is_list(x: Expression) -> bool:
    return isinstance(x, list)


def is_atom(x: Expression) -> bool:
    """Anything that is not a list, function values included."""
    return not isinstance(x, list)


def is_empty_list(x: Expression) -> bool:
    return isinstance(x, list) and not x
