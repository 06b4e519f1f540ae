"""Game entities: player, shields, projectiles and the invader fleet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from pixelplay.assets import Assets
from pixelplay.geo import Point
from pixelplay.sprites import TIME_STEP, Frame, Sprite, SpriteRef

ONE_FRAME = 1_000_000_000 // 60
"""Internal animation frame length, in nanoseconds."""

START = Point(24, 64)
GRID = Point(16, 16)
ROWS = 5
COLS = 11

PLAYER_START = Point(80, 216)
LASER_OFFSET = Point(4, 10)
BULLET_OFFSET = Point(7, 0)

_MILLIS = 1_000_000
_PLAYER_FRAME_TIME = 100 * _MILLIS

_BLIPJOY_OFFSET = Point(3, 4)
_FERRIS_OFFSET = Point(2, 5)
_CTHULHU_OFFSET = Point(1, 3)


def update_dt(elapsed: int, step: int) -> tuple[int, int]:
    """Advance ``elapsed`` by one time step.

    Returns the number of whole ``step`` periods that passed and the
    remaining elapsed time.
    """
    return divmod(elapsed + TIME_STEP, step)


class Direction(Enum):
    """Horizontal movement."""

    STILL = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass
class Controls:
    """Player control inputs."""

    direction: Direction = Direction.STILL
    fire: bool = False


@dataclass
class Player:
    """The player's cannon."""

    sprite: SpriteRef
    pos: Point = PLAYER_START
    dt: int = 0

    @classmethod
    def create(cls, assets: Assets) -> Player:
        return cls(SpriteRef.from_assets(assets, Frame.PLAYER1, _PLAYER_FRAME_TIME))

    def advance(self) -> int:
        """Advance the timer; return the number of frames elapsed."""
        frames, self.dt = update_dt(self.dt, ONE_FRAME)
        return frames


@dataclass
class Shield:
    """A shield that owns its pixels so it can be deformed."""

    sprite: Sprite
    pos: Point

    @classmethod
    def create(cls, assets: Assets, pos: Point) -> Shield:
        return cls(Sprite.from_assets(assets, Frame.SHIELD1), pos)


@dataclass
class Laser:
    """A laser fired by an invader."""

    sprite: SpriteRef
    pos: Point
    dt: int = 0

    def advance(self) -> int:
        """Advance the timer; return the number of frames elapsed."""
        frames, self.dt = update_dt(self.dt, ONE_FRAME)
        return frames


@dataclass
class Bullet:
    """A bullet fired by the player."""

    sprite: SpriteRef
    pos: Point
    dt: int = 0

    def advance(self) -> int:
        """Advance the timer; return the number of time steps elapsed."""
        frames, self.dt = update_dt(self.dt, TIME_STEP)
        return frames


@dataclass
class Invader:
    """A single invader."""

    sprite: SpriteRef
    pos: Point
    score: int = 10


@dataclass
class Bounds:
    """Boundary around the live invaders."""

    pos: Point = START
    left_col: int = 0
    right_col: int = COLS - 1
    top_row: int = 0
    bottom_row: int = ROWS - 1


def _invader_row(assets: Assets, y: int, frame: Frame, offset: Point) -> list[Optional[Invader]]:
    return [
        Invader(SpriteRef.from_assets(assets, frame, 0), START + offset + Point(x, y) * GRID)
        for x in range(COLS)
    ]


def make_invader_grid(assets: Assets) -> list[list[Optional[Invader]]]:
    """Create the full grid of invaders, top row first."""
    rows = [_invader_row(assets, 0, Frame.BLIPJOY1, _BLIPJOY_OFFSET)]
    rows += [_invader_row(assets, y, Frame.FERRIS1, _FERRIS_OFFSET) for y in (1, 2)]
    rows += [_invader_row(assets, y, Frame.CTHULHU1, _CTHULHU_OFFSET) for y in (3, 4)]
    return rows


@dataclass
class Invaders:
    """The invader fleet."""

    grid: list[list[Optional[Invader]]]
    stepper: Point = Point(COLS - 1, 0)
    direction: Direction = Direction.RIGHT
    descend: bool = False
    bounds: Bounds = field(default_factory=Bounds)

    @classmethod
    def create(cls, assets: Assets) -> Invaders:
        return cls(make_invader_grid(assets))

    def _any_alive(self) -> bool:
        return any(invader is not None for row in self.grid for invader in row)

    def get_bounds(self) -> tuple[int, int, int, int]:
        """Bounding box of the fleet as ``(top, right, bottom, left)``."""
        width = (self.bounds.right_col - self.bounds.left_col + 1) * GRID.x
        height = (self.bounds.bottom_row - self.bounds.top_row + 1) * GRID.y
        top = self.bounds.pos.y
        left = self.bounds.pos.x
        return (top, left + width, top + height, left)

    def shrink_bounds(self) -> bool:
        """Fit the bounds to the live invaders; True when none are left."""
        alive = [
            (x, y)
            for y, row in enumerate(self.grid)
            for x, invader in enumerate(row)
            if invader is not None
        ]
        if not alive:
            return True
        xs = [x for x, _ in alive]
        ys = [y for _, y in alive]
        left, right, top, bottom = min(xs), max(xs), min(ys), max(ys)

        pos = self.bounds.pos
        self.bounds.pos = Point(
            pos.x + (left - self.bounds.left_col) * GRID.x,
            pos.y + (top - self.bounds.top_row) * GRID.y,
        )
        self.bounds.left_col = left
        self.bounds.right_col = right
        self.bounds.top_row = top
        self.bounds.bottom_row = bottom
        return False

    def closest_invader(self, col: int) -> Invader:
        """Lowest live invader, searching columns rightwards from ``col``."""
        for offset in range(COLS):
            column = (col + offset) % COLS
            for row in reversed(self.grid):
                invader = row[column]
                if invader is not None:
                    return invader
        raise ValueError("no invaders left")

    def next_invader(self) -> tuple[Invader, bool]:
        """Step to the next live invader; the flag marks the fleet leader."""
        if not self._any_alive():
            raise ValueError("no invaders left")
        is_leader = False
        x, y = self.stepper.x, self.stepper.y
        while True:
            x += 1
            if x >= COLS:
                x = 0
                if y == 0:
                    y = ROWS - 1
                    is_leader = True
                else:
                    y -= 1
            invader = self.grid[y][x]
            if invader is not None:
                self.stepper = Point(x, y)
                return invader, is_leader