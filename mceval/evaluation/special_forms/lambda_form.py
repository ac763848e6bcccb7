from mceval import EvaluatorFn
from mceval import Expression, Value
from mceval.errors import MalformedForm
from mceval.printer import to_lisp
from mceval.types.closure import Closure
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol

LAMBDA = Symbol("lambda")


def check_params(params: Expression, form: str) -> list[Symbol]:
    """Validate a parameter list: a list of distinct symbols."""
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalformedForm(f"{form} parameters must be a list of symbols, got {to_lisp(params)}")
    if len(set(params)) != len(params):
        raise MalformedForm(f"{form} has duplicate parameters: {to_lisp(params)}")
    return params


def lambda_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (lambda (params...) body)
    The body is not evaluated here; the closure keeps `env` itself, not a copy.
    """
    if len(tail) != 2:
        raise MalformedForm("lambda requires a parameter list and a body")

    params, body = tail
    return Closure(check_params(params, "lambda"), body, env)
