"""Logic gates, constant sources and the shapes used to draw them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Union

Point = tuple[float, float]


@dataclass(frozen=True)
class Line:
    """A straight line from (x1, y1) to (x2, y2) in item coordinates."""

    x1: int
    y1: int
    x2: int
    y2: int


@dataclass(frozen=True)
class Arc:
    """An elliptical arc inside a box; angles are in degrees, counter-clockwise."""

    x: int
    y: int
    width: int
    height: int
    start: int
    span: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle, optionally filled."""

    x: int
    y: int
    width: int
    height: int
    filled: bool = False


Shape = Union[Line, Arc, Rect]

MAX_PINS = 5

# Vertical offsets of the input stubs for each supported input count.
PIN_ROWS: dict[int, tuple[int, ...]] = {
    1: (25,),
    2: (10, 40),
    3: (10, 25, 40),
    4: (10, 20, 30, 40),
    5: (5, 15, 25, 35, 45),
}

# How far an input stub reaches to the right, by row, for each body style.
_STRAIGHT_REACH = {row: 20 for row in (5, 10, 15, 20, 25, 30, 35, 40, 45)}
_CURVED_REACH = {5: 29, 10: 32, 15: 33, 20: 34, 25: 35, 30: 34, 35: 33, 40: 32, 45: 29}
_DOUBLE_CURVED_REACH = {row: reach - 5 for row, reach in _CURVED_REACH.items()}

_AND_BODY = (
    Line(20, 0, 50, 0),
    Line(20, 0, 20, 50),
    Line(20, 50, 50, 50),
    Arc(30, 0, 40, 50, 90, -180),
)
_OR_BODY = (
    Arc(5, 0, 30, 50, 90, -180),
    Arc(-40, 0, 120, 50, 90, -90),
    Arc(-40, 0, 120, 50, -90, 90),
)
_XOR_BODY = (
    Arc(5, 0, 30, 50, 90, -180),
    Arc(0, 0, 30, 50, 90, -180),
    Arc(-40, 0, 120, 50, 90, -90),
    Arc(-40, 0, 120, 50, -90, 90),
)


class Gate(ABC):
    """An item on the board with a position, input pins and a boolean output."""

    name: ClassVar[str] = ""
    default_max_input: ClassVar[int] = MAX_PINS
    bounds: ClassVar[Rect] = Rect(0, 0, 20, 20)
    _body: ClassVar[tuple[Shape, ...]] = ()
    _reach: ClassVar[dict[int, int]] = _STRAIGHT_REACH

    def __init__(self, x: float, y: float, input_count: int = 0) -> None:
        self.x = x
        self.y = y
        self.input_count = input_count
        self.max_input = self.default_max_input
        self.active_pins = [False] * MAX_PINS
        self.inputs: list[bool] = []
        self.connected_out = False
        self.connected_in = False
        self.output = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, input_count={self.input_count})"

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def active_inputs(self) -> int:
        """Number of pins that have a signal attached."""
        return sum(self.active_pins)

    def distance_from(self, point: Point) -> float:
        """Euclidean distance from this item's position to ``point``."""
        return math.hypot(point[0] - self.x, point[1] - self.y)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def determine_output(self) -> bool:
        """Evaluate the gate on its collected inputs and store the result."""
        self.output = self._evaluate(self.inputs)
        return self.output

    @abstractmethod
    def _evaluate(self, inputs: list[bool]) -> bool:
        """Compute the output for the given inputs."""

    def shapes(self) -> list[Shape]:
        """The drawing primitives for this item in item coordinates."""
        stubs = [Line(0, row, self._reach[row], row) for row in PIN_ROWS.get(self.input_count, ())]
        return [*self._body, *stubs]


class AndGate(Gate):
    name = "AND"
    _body = (*_AND_BODY, Line(70, 25, 100, 25))

    def _evaluate(self, inputs: list[bool]) -> bool:
        return all(inputs)


class NandGate(Gate):
    name = "NAND"
    _body = (*_AND_BODY, Line(80, 25, 100, 25), Arc(70, 20, 10, 10, 0, 360))

    def _evaluate(self, inputs: list[bool]) -> bool:
        return not all(inputs)


class OrGate(Gate):
    name = "OR"
    _body = (*_OR_BODY, Line(80, 25, 100, 25))
    _reach = _CURVED_REACH

    def _evaluate(self, inputs: list[bool]) -> bool:
        return any(inputs)


class NorGate(Gate):
    name = "NOR"
    _body = (*_OR_BODY, Arc(80, 20, 10, 10, 0, 360), Line(90, 25, 100, 25))
    _reach = _CURVED_REACH

    def _evaluate(self, inputs: list[bool]) -> bool:
        return not any(inputs)


class XorGate(Gate):
    """True when exactly one input is true."""

    name = "XOR"
    _body = (*_XOR_BODY, Line(80, 25, 100, 25))
    _reach = _DOUBLE_CURVED_REACH

    def _evaluate(self, inputs: list[bool]) -> bool:
        return sum(inputs) == 1

    def determine_output(self) -> bool:
        # The stored output is raised whatever the result; only the returned
        # value reflects the evaluation.
        self.output = True
        return self._evaluate(self.inputs)


class XnorGate(Gate):
    """False when exactly one input is true."""

    name = "XNOR"
    _body = (*_XOR_BODY, Arc(80, 20, 10, 10, 0, 360), Line(90, 25, 100, 25))
    _reach = _DOUBLE_CURVED_REACH

    def _evaluate(self, inputs: list[bool]) -> bool:
        return sum(inputs) != 1


class NotGate(Gate):
    name = "NOT"
    default_max_input = 1
    _body = (
        Line(20, 0, 20, 50),
        Line(20, 0, 70, 25),
        Line(70, 25, 20, 50),
        Line(80, 25, 100, 25),
        Arc(70, 20, 10, 10, 0, 360),
    )

    def _evaluate(self, inputs: list[bool]) -> bool:
        if not inputs:
            raise ValueError("NOT gate has no input to invert")
        return not inputs[0]


class On(Gate):
    """A constant true signal."""

    name = "On"
    bounds = Rect(0, 0, 5, 5)

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y)
        self.output = True

    def _evaluate(self, inputs: list[bool]) -> bool:
        return True

    def shapes(self) -> list[Shape]:
        return [Rect(0, 0, 6, 6, filled=True)]


class Off(Gate):
    """A constant false signal."""

    name = "Off"
    bounds = Rect(0, 0, 6, 6)

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y)

    def _evaluate(self, inputs: list[bool]) -> bool:
        return False

    def shapes(self) -> list[Shape]:
        return [Rect(0, 0, 6, 6)]