"""Native operations exposed to evaluated code."""

from __future__ import annotations

from typing import Callable

from mceval import Value
from mceval.types.symbol import Symbol


class Primitive:
    """A native callable bound under `tag`.

    `arity` is the exact number of arguments the callable takes, or None for
    variadic primitives such as `list`.
    """

    __slots__ = ("tag", "fn", "arity")

    def __init__(self, tag: Symbol, fn: Callable[..., Value], arity: int | None = 2):
        self.tag = tag
        self.fn = fn
        self.arity = arity

    def __repr__(self) -> str:
        return f"#<primitive {self.tag}>"
