"""Special form: cond.

(cond (p1 e1) (p2 e2) ... (else en)) evaluates predicates in written order and
returns the consequent of the first clause whose predicate is truthy. The
literal symbol `else` in predicate position always matches. Nothing after the
selected clause is evaluated.
"""

import logging

from schemer import Expression, EvaluatorFn
from schemer.evaluation.apply import evaluate_operand
from schemer.errors import InvalidSpecialForm, NoMatchingClause
from schemer.types.atoms import is_list
from schemer.types.environment import Environment

logger = logging.getLogger(__name__)

ELSE = "else"


def is_truthy(val: Expression) -> bool:
    # Only #f is false; 0 and the empty list are true
    return val is not False


def cond_action(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    clauses = expr[1:]
    for clause in clauses:
        if not is_list(clause) or len(clause) != 2:
            raise InvalidSpecialForm("cond clause must be (predicate consequent)", clause)
        predicate, consequent = clause
        if predicate == ELSE or is_truthy(evaluate_operand(predicate, env, evaluate_fn)):
            logger.debug("cond selected %r", clause)
            return evaluate_operand(consequent, env, evaluate_fn)
    raise NoMatchingClause("No cond clause matched", expr)
