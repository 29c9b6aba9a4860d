"""Function values: built-in primitives and user closures."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Union

from schemer import Expression
from schemer.types.environment import Environment
from schemer.errors import ArityMismatch


@dataclass(frozen=True)
class Primitive:
    """A reference to an entry in the primitive operation table."""

    name: str

    def __str__(self) -> str:
        return self.name


class Closure:
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("env", "formals", "body")

    def __init__(self, env: Environment, formals: list[str], body: Expression):
        self.env: Environment = env
        # Copied so later changes to the caller's list cannot leak in
        self.formals: tuple[str, ...] = tuple(formals)
        self.body: Expression = body

    def __str__(self) -> str:
        from schemer.debug_utils.pprint import pprint_expr, PLAIN_OPTIONS

        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(self.formals))
            buffer.write(") ")
            buffer.write(pprint_expr(self.body, options=PLAIN_OPTIONS))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)

    def extend_env(self, args: list[Expression]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new Environment for evaluating the body.

        The new frame is prepended to the captured environment, never to the
        caller's, which is what makes scoping lexical.
        """
        if len(args) != len(self.formals):
            raise ArityMismatch(
                f"Expected {len(self.formals)} argument(s) but got {len(args)}",
                self,
            )
        return self.env.extend(dict(zip(self.formals, args)))


Function = Union[Primitive, Closure]


def is_function(x: Expression) -> bool:
    return isinstance(x, (Primitive, Closure))
