"""Small integer geometry primitives: points, rectangles and clipped lines."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Protocol

Coord = tuple[int, int]


class Drawable(Protocol):
    """Anything with a pixel size and RGBA pixel data."""

    width: int
    height: int
    pixels: bytes | bytearray


@dataclass(frozen=True)
class Point:
    """A tiny position vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Point) -> Point:
        return Point(self.x * other.x, self.y * other.y)


@dataclass(frozen=True)
class Rect:
    """A rectangle spanned by two absolute points (p2 is exclusive)."""

    p1: Point = Point()
    p2: Point = Point()

    @classmethod
    def from_drawable(cls, pos: Point, drawable: Drawable) -> Rect:
        """Rectangle covering ``drawable`` placed at ``pos``."""
        return cls(pos, pos + Point(drawable.width, drawable.height))

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap."""
        top1, right1, bottom1, left1 = self.bounds()
        top2, right2, bottom2, left2 = other.bounds()
        return bottom1 > top2 and bottom2 > top1 and right1 > left2 and right2 > left1

    def bounds(self) -> tuple[int, int, int, int]:
        """Bounding box as ``(top, right, bottom, left)``."""
        return (self.p1.y, self.p2.x, self.p2.y, self.p1.x)


def _bresenham(p0: Coord, p1: Coord) -> Iterator[Coord]:
    x, y = p0
    x1, y1 = p1
    dx = abs(x1 - x)
    dy = -abs(y1 - y)
    sx = 1 if x < x1 else -1
    sy = 1 if y < y1 else -1
    err = dx + dy
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def clip_line(
    p0: Coord, p1: Coord, clip_min: Coord, clip_max: Coord
) -> Optional[list[Coord]]:
    """Rasterise the segment p0..p1 (inclusive) and keep the pixels inside the window.

    The window is given by its inclusive corners.  Returns ``None`` when no
    pixel of the segment falls inside it.
    """
    (x0, y0), (x1, y1) = p0, p1
    (xmin, ymin), (xmax, ymax) = clip_min, clip_max
    if (
        max(x0, x1) < xmin
        or min(x0, x1) > xmax
        or max(y0, y1) < ymin
        or min(y0, y1) > ymax
    ):
        return None
    points = [
        (x, y)
        for x, y in _bresenham(p0, p1)
        if xmin <= x <= xmax and ymin <= y <= ymax
    ]
    return points or None