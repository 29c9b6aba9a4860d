from __future__ import annotations


class SchemerError(Exception):
    """ Base class for all Schemer errors"""

    def __init__(self, message: str, expression=None):
        super().__init__(message)
        # The offending sub-expression, when there is one to point at
        self.expression = expression

    def describe(self) -> str:
        """Kind and message, followed by the offending expression when known."""
        from schemer.debug_utils.pprint import pprint_expr, PLAIN_OPTIONS

        text = f"{type(self).__name__}: {self}"
        if self.expression is not None:
            text += f"\n  in: {pprint_expr(self.expression, options=PLAIN_OPTIONS)}"
        return text


class UnboundIdentifier(SchemerError):
    """ Raised when an identifier is not bound in any enclosing frame"""

class UnknownPrimitive(SchemerError):
    """ Raised when a name reaches the primitive table without being registered"""

class InvalidSpecialForm(SchemerError):
    """ Raised when quote, lambda or cond has the wrong shape"""

class InvalidExpression(SchemerError):
    """ Raised when something that is not an expression is handed to the evaluator"""

class InvalidSymbol(SchemerError):
    """ Raised when a non-symbol is used as a binding name"""

class ArityMismatch(SchemerError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class NoMatchingClause(SchemerError):
    """ Raised when no cond clause matches"""

class TypeMismatch(SchemerError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class EmptyListAccess(SchemerError):
    """ Raised when the first element of the empty list is requested"""

class NotCallable(SchemerError):
    """ Raised when the function position does not evaluate to a function"""

class RecursionDepthExceeded(SchemerError):
    """ Raised when evaluation nests deeper than the host stack allows"""
