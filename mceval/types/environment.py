"""Runtime environment for mceval.

An Environment is an ordered chain of frames searched front to back. Each
frame is a plain dict from Symbol to value. Frames are shared by reference
between every Environment and Closure that holds them, so in-place updates
made by define and letrec are seen through all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional, Sequence

from mceval import Value
from mceval.errors import ArityMismatch, UnboundVariable, UnassignedVariable
from mceval.types.symbol import Symbol
from mceval.types.unit import Unassigned

Frame = dict[Symbol, Value]


def make_frame(params: Sequence[Symbol], args: Sequence[Value]) -> Frame:
    """Pair parameters with arguments into a new frame.

    Raises ArityMismatch when the two sequences differ in length.
    """
    if len(params) != len(args):
        raise ArityMismatch(
            f"Expected {len(params)} argument(s) for "
            f"({' '.join(str(p) for p in params)}), got {len(args)}"
        )
    return dict(zip(params, args))


class Environment:
    """Ordered chain of frames, most recently introduced frame first."""

    __slots__ = ("frames",)

    def __init__(self, frames: Optional[Iterable[Frame]] = None):
        self.frames: list[Frame] = list(frames) if frames is not None else []

    def find(self, name: Symbol) -> Optional[Frame]:
        """Return the first frame that binds `name`, or None."""
        for frame in self.frames:
            if name in frame:
                return frame
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name` in the first frame that has it.

        Raises UnboundVariable if no frame binds the symbol, and
        UnassignedVariable if it is a letrec binding still being initialized.
        """
        frame = self.find(name)
        if frame is None:
            raise UnboundVariable(name)
        value = frame[name]
        if value is Unassigned:
            raise UnassignedVariable(name)
        return value

    def extend(self, params: Sequence[Symbol], args: Sequence[Value]) -> Environment:
        """Return a new environment with one frame for `params` in front.

        The receiver is left untouched; the existing frames are shared.
        """
        return Environment([make_frame(params, args), *self.frames])

    def extend_in_place(self, params: Sequence[Symbol], args: Sequence[Value]) -> None:
        """Prepend a frame for `params` to this environment object itself."""
        self.frames.insert(0, make_frame(params, args))

    def rebind_head(self, params: Sequence[Symbol], args: Sequence[Value]) -> None:
        """Overwrite bindings of `params` in the head frame with `args`."""
        if len(params) != len(args):
            raise ArityMismatch(f"Expected {len(params)} value(s), got {len(args)}")
        head = self.frames[0]
        for param, arg in zip(params, args):
            head[param] = arg

    def __len__(self) -> int:
        return len(self.frames)

    @staticmethod
    def _write_frame(frame: Frame, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Head frame only, with an indicator when more frames follow."""
        with StringIO() as buffer:
            if self.frames:
                self._write_frame(self.frames[0], buffer)
            else:
                buffer.write("{}")
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            for i, frame in enumerate(self.frames):
                if i:
                    buffer.write(" -> ")
                self._write_frame(frame, buffer)
            buffer.write(">")
            return buffer.getvalue()
