# Core type aliases for mceval's data model.
# Code and data share one representation: Python ints/floats for numbers,
# Symbol for identifiers and plain lists for sequences. Runtime values add
# bool, Closure, Primitive and the Unit marker. No Cons type is defined.
#
# Naming guidance:
# - Expression: syntactic forms handed to the evaluator (code-as-data).
# - Value:      results of evaluation.
# Both aliases resolve to `Any`; list values are reused as expressions.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Forms alias
Expression = Any

# Evaluator function type passed into special forms and apply
EvaluatorFn = Callable[..., Value]

from mceval.evaluation.evaluator import evaluate  # noqa: E402
from mceval.builtin.env_builtin import global_environment  # noqa: E402

__all__ = [
    "Value",
    "Expression",
    "EvaluatorFn",
    "evaluate",
    "global_environment",
]
