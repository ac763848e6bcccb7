"""Closure representation for mceval."""

from __future__ import annotations

from mceval import Expression
from mceval.types.environment import Environment
from mceval.types.symbol import Symbol


class Closure:
    """A first-class function: parameters, body, and the defining environment.

    `env` is the very Environment object that was active when the lambda was
    evaluated, not a copy. Bindings added to it later by define, or patched in
    by letrec, are visible when the closure is applied.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: Expression, env: Environment):
        self.params: list[Symbol] = params
        self.body: Expression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from mceval.printer import to_lisp
        return to_lisp(self)

    def __repr__(self) -> str:
        return str(self)
