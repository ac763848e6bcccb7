"""Built-in primitives for the mceval global environment.

Three frames make up the global environment, in lookup order: list
primitives (with `nil`), arithmetic and comparison, and the booleans.
Every call to `global_environment` builds fresh frames, so definitions made
in one environment never leak into another.
"""
from __future__ import annotations

from mceval import Value
from mceval.errors import ArgumentTypeError, EmptyListAccess, UnsupportedOperation
from mceval.printer import to_lisp
from mceval.types.environment import Environment, Frame
from mceval.types.primitive import Primitive
from mceval.types.symbol import Symbol


def is_number(value: Value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_equal(a: Value, b: Value) -> bool:
    """Structural equality: numbers numerically, lists element-wise."""
    if a is b:
        return True
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def _require_numbers(name: str, *args: Value) -> None:
    for arg in args:
        if not is_number(arg):
            raise ArgumentTypeError(f"{name} expects numbers, got {to_lisp(arg)}")


def _require_list(name: str, value: Value) -> list:
    if not isinstance(value, list):
        raise ArgumentTypeError(f"{name} expects a list, got {to_lisp(value)}")
    return value


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def add(x: Value, y: Value) -> Value:
    _require_numbers("+", x, y)
    return x + y


def sub(x: Value, y: Value) -> Value:
    _require_numbers("-", x, y)
    return x - y


def mul(x: Value, y: Value) -> Value:
    _require_numbers("*", x, y)
    return x * y


def gt(x: Value, y: Value) -> bool:
    _require_numbers(">", x, y)
    return x > y


def gte(x: Value, y: Value) -> bool:
    _require_numbers(">=", x, y)
    return x >= y


def lt(x: Value, y: Value) -> bool:
    _require_numbers("<", x, y)
    return x < y


def lte(x: Value, y: Value) -> bool:
    _require_numbers("<=", x, y)
    return x <= y


def equals(x: Value, y: Value) -> bool:
    return is_equal(x, y)


# -------------------------------
# Lists
# -------------------------------
def null(value: Value) -> bool:
    """True only for the empty list."""
    return isinstance(value, list) and not value


def cons(a: Value, b: Value) -> list:
    """Prepend `a` to the list `b`. Dotted pairs are not supported."""
    if not isinstance(b, list):
        raise UnsupportedOperation(f"cons onto non-list {to_lisp(b)}: dotted pairs are not supported")
    return [a, *b]


def car(lst: Value) -> Value:
    if not _require_list("car", lst):
        raise EmptyListAccess("car of empty list")
    return lst[0]


def cdr(lst: Value) -> list:
    if not _require_list("cdr", lst):
        raise EmptyListAccess("cdr of empty list")
    return lst[1:]


def list_builtin(*items: Value) -> list:
    return list(items)


def _primitives(table: dict[str, tuple]) -> Frame:
    return {Symbol(name): Primitive(Symbol(name), fn, arity) for name, (fn, arity) in table.items()}


def list_frame() -> Frame:
    frame = {Symbol("nil"): []}
    frame.update(
        _primitives(
            {
                "null?": (null, 1),
                "cons": (cons, 2),
                "car": (car, 1),
                "cdr": (cdr, 1),
                "list": (list_builtin, None),
            }
        )
    )
    return frame


def arithmetic_frame() -> Frame:
    return _primitives(
        {
            "+": (add, 2),
            "-": (sub, 2),
            "*": (mul, 2),
            ">": (gt, 2),
            ">=": (gte, 2),
            "<": (lt, 2),
            "<=": (lte, 2),
            "==": (equals, 2),
        }
    )


def boolean_frame() -> Frame:
    return {Symbol("true"): True, Symbol("false"): False}


def global_environment() -> Environment:
    """Build a fresh global environment: lists, then arithmetic, then booleans."""
    return Environment([list_frame(), arithmetic_frame(), boolean_frame()])
