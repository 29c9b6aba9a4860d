import logging

from schemer import Expression, EvaluatorFn
from schemer.types.environment import Environment

logger = logging.getLogger(__name__)


def identifier_action(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    logger.debug("lookup %s", expr)
    return env.lookup(expr)
