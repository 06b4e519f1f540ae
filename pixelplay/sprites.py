"""Sprites, animation frames and drawing onto the RGBA screen buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from pixelplay.geo import Drawable, Point, clip_line

WIDTH = 224
"""Screen width in pixels."""
HEIGHT = 256
"""Screen height in pixels."""
FPS = 240
"""Fixed update rate."""
TIME_STEP = 1_000_000_000 // FPS
"""Length of one fixed time step, in nanoseconds."""

_NANOS_PER_SECOND = 1_000_000_000


class Frame(Enum):
    """Identifier of a single animation frame."""

    BLIPJOY1 = auto()
    BLIPJOY2 = auto()
    FERRIS1 = auto()
    FERRIS2 = auto()
    CTHULHU1 = auto()
    CTHULHU2 = auto()
    PLAYER1 = auto()
    PLAYER2 = auto()
    SHIELD1 = auto()
    BULLET1 = auto()
    BULLET2 = auto()
    BULLET3 = auto()
    BULLET4 = auto()
    BULLET5 = auto()
    LASER1 = auto()
    LASER2 = auto()
    LASER3 = auto()
    LASER4 = auto()
    LASER5 = auto()
    LASER6 = auto()
    LASER7 = auto()
    LASER8 = auto()


def _cycle(*frames: Frame) -> dict[Frame, Frame]:
    return dict(zip(frames, frames[1:] + frames[:1]))


_NEXT_FRAME: dict[Frame, Frame] = {
    **_cycle(Frame.BLIPJOY1, Frame.BLIPJOY2),
    **_cycle(Frame.FERRIS1, Frame.FERRIS2),
    **_cycle(Frame.CTHULHU1, Frame.CTHULHU2),
    **_cycle(Frame.PLAYER1, Frame.PLAYER2),
    **_cycle(Frame.BULLET1, Frame.BULLET2, Frame.BULLET3, Frame.BULLET4, Frame.BULLET5),
    **_cycle(
        Frame.LASER1,
        Frame.LASER2,
        Frame.LASER3,
        Frame.LASER4,
        Frame.LASER5,
        Frame.LASER6,
        Frame.LASER7,
        Frame.LASER8,
    ),
}


@dataclass(frozen=True)
class CachedSprite:
    """Decoded RGBA image as stored in the asset cache."""

    width: int
    height: int
    pixels: bytes


class _SpriteSource(Protocol):
    sprites: dict[Frame, CachedSprite]


@dataclass
class Sprite:
    """A sprite that owns a mutable copy of its pixels and is not animated."""

    width: int
    height: int
    pixels: bytearray

    @classmethod
    def from_assets(cls, assets: _SpriteSource, frame: Frame) -> Sprite:
        cached = assets.sprites[frame]
        return cls(cached.width, cached.height, bytearray(cached.pixels))


@dataclass
class SpriteRef:
    """An animated sprite that shares its pixels with the asset cache.

    ``duration`` and ``dt`` are in nanoseconds.
    """

    width: int
    height: int
    pixels: bytes
    frame: Frame
    duration: int
    dt: int = 0

    @classmethod
    def from_assets(cls, assets: _SpriteSource, frame: Frame, duration: int) -> SpriteRef:
        cached = assets.sprites[frame]
        return cls(cached.width, cached.height, cached.pixels, frame, duration)

    def step_frame(self, assets: _SpriteSource) -> None:
        """Advance to the next frame of the animation cycle."""
        try:
            following = _NEXT_FRAME[self.frame]
        except KeyError:
            raise ValueError(f"frame {self.frame.name} is not animated") from None
        self.pixels = assets.sprites[following].pixels
        self.frame = following

    def animate(self, assets: _SpriteSource) -> None:
        """Advance the animation by one fixed time step."""
        if self.duration % _NANOS_PER_SECOND == 0:
            self.step_frame(assets)
            return
        self.dt += TIME_STEP
        while self.dt >= self.duration:
            self.dt -= self.duration
            self.step_frame(assets)


def blit(screen: bytearray, dest: Point, sprite: Drawable) -> None:
    """Copy the non-zero bytes of ``sprite`` onto the screen at ``dest``."""
    if dest.x + sprite.width > WIDTH or dest.y + sprite.height > HEIGHT:
        raise ValueError(f"sprite at ({dest.x}, {dest.y}) does not fit on the screen")
    row_bytes = sprite.width * 4
    for row in range(sprite.height):
        start = (dest.x + (dest.y + row) * WIDTH) * 4
        source = sprite.pixels[row * row_bytes : (row + 1) * row_bytes]
        target = screen[start : start + row_bytes]
        screen[start : start + row_bytes] = bytes(
            s if s else d for d, s in zip(target, source)
        )


def line(screen: bytearray, p1: Point, p2: Point, color: tuple[int, int, int, int]) -> None:
    """Draw a line clipped to the screen."""
    points = clip_line((p1.x, p1.y), (p2.x, p2.y), (0, 0), (WIDTH - 1, HEIGHT - 1))
    if points is None:
        return
    pixel = bytes(color)
    for x, y in points:
        i = (x + y * WIDTH) * 4
        screen[i : i + 4] = pixel


def rect(screen: bytearray, p1: Point, p2: Point, color: tuple[int, int, int, int]) -> None:
    """Draw a rectangle outline; ``p2`` is the exclusive opposite corner."""
    p2 = Point(p2.x - 1, p2.y - 1)
    p3 = Point(p1.x, p2.y)
    p4 = Point(p2.x, p1.y)
    line(screen, p1, p3, color)
    line(screen, p3, p2, color)
    line(screen, p2, p4, color)
    line(screen, p4, p1, color)