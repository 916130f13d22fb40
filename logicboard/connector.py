"""Wires that carry a signal from an output to a point on the board."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from logicboard.gates import Line, Rect

Point = tuple[float, float]


class SourceKind(Enum):
    """What kind of item a connector takes its signal from."""

    GATE = 1
    ON = 2
    OFF = 3


def _half(value: int) -> int:
    """Integer half, truncated toward zero."""
    return int(value / 2)


@dataclass
class Connector:
    """A stepped wire drawn from its start point across a (dis_x, dis_y) box."""

    start_x: int
    start_y: int
    dis_x: int
    dis_y: int
    value: bool
    up_down: bool
    source_kind: SourceKind
    source_index: int
    dir_x: bool
    dir_y: bool

    @property
    def position(self) -> Point:
        return (self.start_x, self.start_y)

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.dis_x, self.dis_y)

    def distance_from(self, point: Point) -> float:
        """Euclidean distance from the connector's start to ``point``."""
        return math.hypot(point[0] - self.start_x, point[1] - self.start_y)

    def segments(self) -> list[Line]:
        """The three line segments of the wire in item coordinates."""
        mid = _half(self.dis_x)
        if self.up_down:
            return [
                Line(0, 0, mid, 0),
                Line(mid, 0, mid, self.dis_y),
                Line(mid, self.dis_y, self.dis_x, self.dis_y),
            ]
        return [
            Line(0, self.dis_y, mid, self.dis_y),
            Line(mid, 0, mid, self.dis_y),
            Line(mid, 0, self.dis_x, 0),
        ]

    def end_point(self) -> tuple[int, int]:
        """Scene point at which the wire delivers its signal."""
        x = self.start_x + self.dis_x if self.dir_x else self.start_x
        y = self.start_y + self.dis_y if self.dir_y else self.start_y
        return (x, y)