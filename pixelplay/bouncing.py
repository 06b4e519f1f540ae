"""Small animated scenes: a bouncing box, a resizable bouncing box and a bouncing circle."""

from __future__ import annotations

from dataclasses import dataclass

BOX_SIZE = 64
CIRCLE_RADIUS = 64

BOX_COLOR = bytes((0x5E, 0x48, 0xE8, 0xFF))
BOX_BACKGROUND = bytes((0x48, 0xB2, 0xE8, 0xFF))
CIRCLE_COLOR = bytes((0xAC, 0x00, 0xE6, 0xFF))
CIRCLE_BACKGROUND = bytes((0x26, 0x00, 0x33, 0xFF))


def _i16(value: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    return (value + 0x8000) % 0x10000 - 0x8000


def _paint_rows(frame: bytearray, width: int, row_for) -> None:
    """Fill whole RGBA pixels of ``frame`` row by row.

    ``row_for(y)`` returns the bytes of a full row of ``width`` pixels.
    A trailing partial row is cut short; trailing bytes that do not form a
    whole pixel are left alone.
    """
    pixels = len(frame) // 4
    for start in range(0, pixels, width):
        count = min(width, pixels - start)
        row = row_for(start // width)
        frame[start * 4 : (start + count) * 4] = row[: count * 4]


def _box_painter(width: int, box_x: int, box_y: int):
    plain = BOX_BACKGROUND * width
    crossing = b"".join(
        BOX_COLOR if box_x <= x < box_x + BOX_SIZE else BOX_BACKGROUND for x in range(width)
    )

    def row_for(y: int) -> bytes:
        return crossing if box_y <= y < box_y + BOX_SIZE else plain

    return row_for


@dataclass
class BouncingBox:
    """A box that bounces around a fixed-size screen."""

    width: int = 320
    height: int = 240
    box_x: int = 24
    box_y: int = 16
    velocity_x: int = 1
    velocity_y: int = 1

    def update(self) -> None:
        """Move the box one step, reversing direction at the edges."""
        if self.box_x <= 0 or self.box_x + BOX_SIZE > self.width:
            self.velocity_x = -self.velocity_x
        if self.box_y <= 0 or self.box_y + BOX_SIZE > self.height:
            self.velocity_y = -self.velocity_y
        self.box_x = _i16(self.box_x + self.velocity_x)
        self.box_y = _i16(self.box_y + self.velocity_y)

    def draw(self, frame: bytearray) -> None:
        """Draw the scene into an RGBA frame buffer."""
        _paint_rows(frame, self.width, _box_painter(self.width, self.box_x, self.box_y))


class ResizableBouncingBox:
    """A bouncing box whose screen can be resized."""

    def __init__(self, width: int, height: int) -> None:
        self.width = _i16(width)
        self.height = _i16(height)
        self.box_x = 24
        self.box_y = 16
        self.velocity_x = 1
        self.velocity_y = 1

    def update(self) -> None:
        """Move the box one step, heading away from any edge it touches."""
        if self.box_x <= 0:
            self.velocity_x = 1
        if self.box_x + BOX_SIZE > self.width:
            self.velocity_x = -1
        if self.box_y <= 0:
            self.velocity_y = 1
        if self.box_y + BOX_SIZE > self.height:
            self.velocity_y = -1
        self.box_x = _i16(self.box_x + self.velocity_x)
        self.box_y = _i16(self.box_y + self.velocity_y)

    def resize(self, width: int, height: int) -> None:
        """Change the screen size."""
        self.width = _i16(width)
        self.height = _i16(height)

    def draw(self, frame: bytearray) -> None:
        """Draw the scene into an RGBA frame buffer of the current size."""
        if self.width <= 0:
            raise ValueError(f"cannot draw with a width of {self.width}")
        _paint_rows(frame, self.width, _box_painter(self.width, self.box_x, self.box_y))


@dataclass
class BouncingCircle:
    """A circle that bounces around a fixed-size screen."""

    width: int = 600
    height: int = 400
    circle_x: int = 300
    circle_y: int = 200
    velocity_x: int = 5
    velocity_y: int = 5

    def update(self) -> None:
        """Move the circle one step, reversing direction at the edges."""
        if self.circle_x - CIRCLE_RADIUS <= 0 or self.circle_x + CIRCLE_RADIUS > self.width:
            self.velocity_x = -self.velocity_x
        if self.circle_y - CIRCLE_RADIUS <= 0 or self.circle_y + CIRCLE_RADIUS > self.height:
            self.velocity_y = -self.velocity_y
        self.circle_x = _i16(self.circle_x + self.velocity_x)
        self.circle_y = _i16(self.circle_y + self.velocity_y)

    def draw(self, frame: bytearray) -> None:
        """Draw the scene into an RGBA frame buffer."""
        limit = CIRCLE_RADIUS * CIRCLE_RADIUS
        cx, cy = self.circle_x, self.circle_y

        def row_for(y: int) -> bytes:
            remaining = limit - (y - cy) ** 2
            if remaining <= 0:
                return CIRCLE_BACKGROUND * self.width
            return b"".join(
                CIRCLE_COLOR if (x - cx) ** 2 < remaining else CIRCLE_BACKGROUND
                for x in range(self.width)
            )

        _paint_rows(frame, self.width, row_for)