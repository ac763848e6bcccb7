"""let and letrec.

let is rewritten into an immediate lambda application evaluated in the
outer environment, so initializers cannot see each other.

letrec binds every name to a placeholder in a fresh frame, evaluates the
initializers in the extended environment, then patches the frame with the
results. Closures created by the initializers capture that frame, which is
what lets them call themselves and each other by name.
"""

import logging

from mceval import EvaluatorFn
from mceval import Expression, Value
from mceval.errors import MalformedForm
from mceval.evaluation.special_forms.lambda_form import LAMBDA, check_params
from mceval.printer import to_lisp
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol
from mceval.types.unit import Unassigned

logger = logging.getLogger(__name__)


def split_bindings(
    tail: list[Expression], form: str
) -> tuple[list[Symbol], list[Expression], Expression]:
    """((p1 a1) (p2 a2) ...) body  ->  [p1, p2, ...], [a1, a2, ...], body"""
    if len(tail) != 2 or not isinstance(tail[0], list):
        raise MalformedForm(f"{form} requires a binding list and a body")
    bindings, body = tail
    for binding in bindings:
        if not (isinstance(binding, list) and len(binding) == 2):
            raise MalformedForm(f"{form} binding must be (name expr), got {to_lisp(binding)}")
    params = check_params([b[0] for b in bindings], form)
    args = [b[1] for b in bindings]
    return params, args, body


def let_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (let ((p1 a1) ...) body)  ==  ((lambda (p1 ...) body) a1 ...)
    """
    params, args, body = split_bindings(tail, "let")
    return evaluate_fn([[LAMBDA, params, body], *args], env)


def letrec_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (letrec ((p1 a1) ...) body)
    Initializers are evaluated in the environment that already holds the
    (placeholder) bindings. Once the frame is patched, ((lambda (p1 ...) body)
    a1 ...) is evaluated in that environment, so each initializer runs again.
    """
    params, args, body = split_bindings(tail, "letrec")
    ext_env = env.extend(params, [Unassigned] * len(params))
    values = [evaluate_fn(arg, ext_env) for arg in args]
    ext_env.rebind_head(params, values)
    logger.debug("letrec bound %s", to_lisp(params))
    return evaluate_fn([[LAMBDA, params, body], *args], ext_env)
