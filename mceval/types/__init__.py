from mceval.types.symbol import Symbol
from mceval.types.unit import Unit, Unassigned
from mceval.types.environment import Environment, Frame, make_frame
from mceval.types.closure import Closure
from mceval.types.primitive import Primitive

__all__ = [
    "Symbol",
    "Unit",
    "Unassigned",
    "Environment",
    "Frame",
    "make_frame",
    "Closure",
    "Primitive",
]
