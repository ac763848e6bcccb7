"""Core evaluator for mceval.

`evaluate` is the public entry point. `eval_expr` is the recursive worker:
numbers evaluate to themselves, symbols are looked up, sequences headed by
a special-form keyword go to their handler, and any other sequence is an
application. There is no tail-call elimination; deep recursion is bounded
by the host stack and reported as RecursionDepthExceeded.
"""

from __future__ import annotations

import logging
import sys

from mceval import Expression, Value
from mceval.config import get_recursion_limit
from mceval.errors import EvalError, MalformedExpression, RecursionDepthExceeded
from mceval.evaluation.apply import apply
from mceval.evaluation.special_forms import SPECIAL_FORMS
from mceval.printer import to_lisp
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Value:
    """Evaluate `expr` in `env` and return its value.

    Failures surface as EvalError subclasses; nothing is retried and no
    partial result is returned.
    """
    limit = get_recursion_limit()
    previous = sys.getrecursionlimit()
    if limit is not None and limit > previous:
        sys.setrecursionlimit(limit)
    try:
        return eval_expr(expr, env)
    except RecursionError as e:
        logger.warning("Recursion limit %d exhausted while evaluating %s",
                       sys.getrecursionlimit(), to_lisp(expr))
        raise RecursionDepthExceeded(
            f"Maximum recursion depth exceeded evaluating {to_lisp(expr)}"
        ) from e
    except EvalError as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Evaluation of %s failed: %s", to_lisp(expr), e)
        raise
    finally:
        if sys.getrecursionlimit() != previous:
            sys.setrecursionlimit(previous)


def eval_expr(expr: Expression, env: Environment) -> Value:
    match expr:
        case bool():
            # bool subclasses int but is not an expression
            raise MalformedExpression(f"Not an expression: {expr!r}")
        case int() | float():
            return expr
        case Symbol():
            return env.lookup(expr)
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, eval_expr)
        case [head, *tail]:
            fn = eval_expr(head, env)
            args = [eval_expr(arg, env) for arg in tail]
            return apply(fn, args, eval_expr)
        case []:
            raise MalformedExpression("Cannot evaluate the empty list")
    raise MalformedExpression(f"Not an expression: {expr!r}")
