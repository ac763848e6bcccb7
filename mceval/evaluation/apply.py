"""Application engine for mceval.

Centralizes function application for the evaluator and for special forms
that apply closures directly (letrec):
- Primitives are called natively with the evaluated arguments; the result
  is returned without re-entering the evaluator.
- Closures bind their parameters in a new frame placed in front of the
  environment they captured (lexical scope), then evaluate their body.
"""

from __future__ import annotations

from mceval import Value, EvaluatorFn
from mceval.errors import ArityMismatch, NotCallable
from mceval.printer import to_lisp
from mceval.types.closure import Closure
from mceval.types.primitive import Primitive


def apply_primitive(fn: Primitive, args: list[Value]) -> Value:
    if fn.arity is not None and len(args) != fn.arity:
        raise ArityMismatch(f"{fn.tag} expects {fn.arity} argument(s), got {len(args)}")
    return fn.fn(*args)


def apply_closure(fn: Closure, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Evaluate the closure body with params bound over the captured env.

    The caller's environment plays no part here.
    """
    new_env = fn.env.extend(fn.params, args)
    return evaluate_fn(fn.body, new_env)


def apply(fn: Value, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply either a Primitive or a Closure; anything else is not callable."""
    match fn:
        case Primitive():
            return apply_primitive(fn, args)
        case Closure():
            return apply_closure(fn, args, evaluate_fn)
    raise NotCallable(f"Cannot apply non-function {to_lisp(fn)}")
