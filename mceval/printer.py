"""Render values and expressions in Lisp notation."""

from __future__ import annotations

from mceval import Value
from mceval.types.closure import Closure
from mceval.types.primitive import Primitive
from mceval.types.symbol import Symbol


def to_lisp(obj: Value) -> str:
    match obj:
        case bool():
            return "true" if obj else "false"
        case int() | float():
            return repr(obj)
        case Symbol():
            return obj.id
        case list():
            return "(" + " ".join(to_lisp(item) for item in obj) + ")"
        case Closure():
            return f"#<closure {to_lisp(obj.params)} {to_lisp(obj.body)}>"
        case Primitive():
            return f"#<primitive {obj.tag}>"
    return repr(obj)
