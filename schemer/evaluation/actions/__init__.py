"""Registry of action handlers for the Schemer evaluator.

Maps each Action to the function implementing its evaluation rule. Every
handler has the signature (expr, env, evaluate_fn) -> Expression, where
evaluate_fn is the recursive evaluator used for sub-expressions.
"""

from schemer.evaluation.classifier import Action
from schemer.evaluation.actions.const_action import const_action
from schemer.evaluation.actions.identifier_action import identifier_action
from schemer.evaluation.actions.quote_action import quote_action
from schemer.evaluation.actions.lambda_action import lambda_action
from schemer.evaluation.actions.cond_action import cond_action
from schemer.evaluation.actions.application_action import application_action

ACTIONS = {
    Action.CONST: const_action,
    Action.IDENTIFIER: identifier_action,
    Action.QUOTE: quote_action,
    Action.LAMBDA: lambda_action,
    Action.COND: cond_action,
    Action.APPLICATION: application_action,
}

_missing = set(Action) - set(ACTIONS)
if _missing:
    raise ImportError(f"No handler registered for {sorted(a.name for a in _missing)}")
