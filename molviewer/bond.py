"""Bonds between atoms and the line segments they are drawn as."""

from __future__ import annotations

import math
from dataclasses import dataclass

from molviewer.atom import WHITE, Atom, Colour, Vec3
from molviewer.library import POSITION_SCALE

DOUBLE_POSITION_SCALE = 0.1
DOUBLE_LINE_WIDTH = 2.5
SINGLE_LINE_WIDTH = 5.0

_SMALL_NUMBER = 1e-8


@dataclass(frozen=True)
class LineSegment:
    """A line to draw in scene units."""

    start: Vec3
    end: Vec3
    width: float
    colour: Colour = WHITE


def rotate_about_z(vector: Vec3, degrees: float) -> Vec3:
    """Rotate a vector by an angle in degrees about the Z axis."""
    radians = math.radians(degrees)
    c, s = math.cos(radians), math.sin(radians)
    x, y, z = vector
    return (c * x - s * y, s * x + c * y, z)


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(v: Vec3, k: float) -> Vec3:
    return (v[0] * k, v[1] * k, v[2] * k)


def _normalized(v: Vec3) -> Vec3:
    """Return the unit vector, or the vector unchanged if it is near zero."""
    squared = v[0] * v[0] + v[1] * v[1] + v[2] * v[2]
    if squared > _SMALL_NUMBER:
        return _scale(v, 1.0 / math.sqrt(squared))
    return v


@dataclass
class Bond:
    """A single or double bond between two atoms."""

    start: Atom | None = None
    end: Atom | None = None
    is_double: bool = False

    def lines(self) -> list[LineSegment]:
        """Return the segments the bond is drawn as; none if an atom is missing."""
        if self.start is None or self.end is None:
            return []
        start_pos = self.start.position
        end_pos = self.end.position
        if not self.is_double:
            return [
                LineSegment(
                    _scale(start_pos, POSITION_SCALE),
                    _scale(end_pos, POSITION_SCALE),
                    SINGLE_LINE_WIDTH,
                )
            ]
        direction = _normalized(_sub(start_pos, end_pos))
        offset = _scale(rotate_about_z(direction, 90.0), DOUBLE_POSITION_SCALE)
        return [
            LineSegment(
                _scale(shift(start_pos, offset), POSITION_SCALE),
                _scale(shift(end_pos, offset), POSITION_SCALE),
                DOUBLE_LINE_WIDTH,
            )
            for shift in (_add, _sub)
        ]