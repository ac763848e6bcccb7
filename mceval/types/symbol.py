from __future__ import annotations


class Symbol:
    """An identifier or keyword token.

    Symbols are canonical: constructing a name twice yields the same object,
    so frame dicts hash and compare them by identity.
    """

    __slots__ = ("id",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = name
            cls._table[name] = sym
        return sym

    def __reduce__(self):
        return (Symbol, (self.id,))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
