"""Expression classification.

Every expression maps to exactly one of six actions. Classification looks only
at the shape of the expression and the primitive registry, never at the
environment; a symbol naming a primitive is therefore always a constant, even
where a closure parameter of the same name is in scope.
"""

from __future__ import annotations

import logging
from enum import Enum

from schemer import Atom, Expression
from schemer.builtins import is_primitive_name
from schemer.errors import InvalidExpression
from schemer.types.atoms import is_boolean, is_list, is_number, is_symbol
from schemer.types.function import Function, is_function

logger = logging.getLogger(__name__)


class Action(Enum):
    CONST = "*const"
    IDENTIFIER = "*identifier"
    QUOTE = "*quote"
    LAMBDA = "*lambda"
    COND = "*cond"
    APPLICATION = "*application"


# Leading keywords that select a special form
KEYWORDS: dict[str, Action] = {
    "quote": Action.QUOTE,
    "lambda": Action.LAMBDA,
    "cond": Action.COND,
}


def atom_to_action(atom: Atom | Function) -> Action:
    if is_number(atom) or is_boolean(atom):
        return Action.CONST
    if is_primitive_name(atom):
        return Action.CONST
    if is_symbol(atom):
        return Action.IDENTIFIER
    # Function values produced by evaluation are self-evaluating
    if is_function(atom):
        return Action.CONST
    raise InvalidExpression(f"Not an expression: {atom!r}", atom)


def list_to_action(xs: list[Expression]) -> Action:
    if not xs:
        # The empty list is a terminal value, never something to reduce
        raise InvalidExpression("The empty list cannot be evaluated", xs)
    first = xs[0]
    if is_symbol(first) and first in KEYWORDS:
        return KEYWORDS[first]
    return Action.APPLICATION


def expression_to_action(expr: Expression) -> Action:
    action = list_to_action(expr) if is_list(expr) else atom_to_action(expr)
    logger.debug("%s %r", action.value, expr)
    return action
