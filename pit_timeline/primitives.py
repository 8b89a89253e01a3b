from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    color: str


@dataclass(frozen=True)
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str


@dataclass(frozen=True)
class Label:
    text: str
    x: float
    y: float
    font_size: int = 12


Primitive = Union[Point, Segment, Label]


def max_x(primitives: tuple[Primitive, ...] | list[Primitive]) -> float | None:
    xs: list[float] = []
    for primitive in primitives:
        if isinstance(primitive, Segment):
            xs.extend((primitive.x1, primitive.x2))
        elif isinstance(primitive, Point):
            xs.append(primitive.x)
    return max(xs) if xs else None
