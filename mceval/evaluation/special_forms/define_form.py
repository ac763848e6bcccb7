import logging

from mceval import EvaluatorFn
from mceval import Expression, Value
from mceval.errors import MalformedForm
from mceval.evaluation.special_forms.lambda_form import LAMBDA
from mceval.printer import to_lisp
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol
from mceval.types.unit import Unit

logger = logging.getLogger(__name__)


def split_define(tail: list[Expression]) -> tuple[Symbol, Expression]:
    """Return the defined name and the expression producing its value.

    (define (f p ...) body) is read as (define f (lambda (p ...) body)).
    """
    if len(tail) != 2:
        raise MalformedForm("define requires exactly 2 arguments")

    target, val_expr = tail
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise MalformedForm(f"define: bad function header {to_lisp(target)}")
        return target[0], [LAMBDA, target[1:], val_expr]
    if not isinstance(target, Symbol):
        raise MalformedForm(f"define: cannot bind {to_lisp(target)}")
    return target, val_expr


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (define name value) or (define (name params...) body)
    An existing binding is overwritten in the frame that holds it; otherwise
    a new frame is pushed onto `env` itself, so closures already holding
    `env` see the new name.
    """
    name, val_expr = split_define(tail)
    frame = env.find(name)
    value = evaluate_fn(val_expr, env)
    if frame is not None:
        logger.debug("define %s: rebinding in place", name)
        frame[name] = value
    else:
        logger.debug("define %s: new frame", name)
        env.extend_in_place([name], [value])
    return Unit
