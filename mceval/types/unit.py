from __future__ import annotations


class UnitType:
    """The value of forms evaluated for effect only, such as define."""

    __slots__ = ()

    def __repr__(self): return "#<unit>"


class UnassignedType:
    """Placeholder held by letrec bindings until their initializers are evaluated."""

    __slots__ = ()

    def __repr__(self): return "#<unassigned>"


Unit = UnitType()
Unassigned = UnassignedType()
