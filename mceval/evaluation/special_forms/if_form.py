from mceval import EvaluatorFn
from mceval import Expression, Value
from mceval.errors import MalformedForm
from mceval.types.environment import Environment
from mceval.types.unit import Unit


def is_true(value: Value) -> bool:
    # Only false and unit are false; 0 and the empty list count as true
    return value is not False and value is not Unit


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) != 3:
        raise MalformedForm("if requires a condition, a then-expression and an else-expression")

    cond, then_expr, else_expr = tail
    if is_true(evaluate_fn(cond, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
