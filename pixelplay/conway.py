"""Conway's Game of Life on a wrapping grid, with a fading heat trail."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from pixelplay.geo import clip_line
from pixelplay.rng import Pcg32, f32_half_open_right, generate_seed


def _as_f32(value: float) -> float:
    return struct.unpack("=f", struct.pack("=f", value))[0]


BIRTH_RULE = (False, False, False, True, False, False, False, False, False)
"""Whether a dead cell with n live neighbours comes alive."""
SURVIVE_RULE = (False, False, True, True, False, False, False, False, False)
"""Whether a live cell with n live neighbours stays alive."""
INITIAL_FILL = _as_f32(0.3)
"""Threshold above which a random draw makes a cell alive."""

_MAX_HEAT = 255
_WARMUP_STEPS = 3
_WARMUP_DECAY = 0.4

_ALIVE_PIXEL = bytes((0x00, 0xFF, 0xFF, 0xFF))


@dataclass
class Cell:
    """A single cell; ``heat`` is 255 while alive and fades once it dies."""

    alive: bool = False
    heat: int = 0

    def update_neighbours(self, n: int) -> Cell:
        """The cell's next generation given ``n`` live neighbours."""
        rule = SURVIVE_RULE if self.alive else BIRTH_RULE
        return self.next_state(rule[n])

    def next_state(self, alive: bool) -> Cell:
        """The cell after becoming ``alive`` (or not), with its heat adjusted."""
        heat = _MAX_HEAT if alive else max(self.heat - 1, 0)
        return Cell(alive, heat)

    def set_alive(self, alive: bool) -> None:
        """Move this cell to its next state in place."""
        following = self.next_state(alive)
        self.alive = following.alive
        self.heat = following.heat

    def cool_off(self, decay: float) -> None:
        """Scale the heat of a dead cell by ``decay``."""
        if self.alive:
            return
        heat = self.heat * decay
        if math.isnan(heat):
            raise ValueError(f"decay {decay!r} gives no usable heat")
        self.heat = int(min(max(heat, 0.0), float(_MAX_HEAT)))


class ConwayGrid:
    """A toroidal grid of cells stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = [Cell() for _ in range(width * height)]

    @classmethod
    def random(
        cls, width: int, height: int, seed: Optional[tuple[int, int]] = None
    ) -> ConwayGrid:
        """A grid filled at random; a fresh seed is drawn when none is given."""
        grid = cls(width, height)
        grid.randomize(seed)
        return grid

    def randomize(self, seed: Optional[tuple[int, int]] = None) -> None:
        """Refill the grid at random, settle it a little and soften the trail."""
        state, stream = seed if seed is not None else generate_seed()
        rng = Pcg32(state, stream)
        self.cells = [
            Cell(f32_half_open_right(rng.next_u32()) > INITIAL_FILL)
            for _ in range(len(self.cells))
        ]
        for _ in range(_WARMUP_STEPS):
            self.update()
        for cell in self.cells:
            cell.cool_off(_WARMUP_DECAY)

    def _neighbour_indices(self, x: int, y: int) -> Iterator[int]:
        for dy in (-1, 0, 1):
            row = (y + dy) % self.height
            for dx in (-1, 0, 1):
                if dx or dy:
                    yield (x + dx) % self.width + row * self.width

    def count_neighbours(self, x: int, y: int) -> int:
        """Number of live cells around (x, y), wrapping at the edges."""
        return sum(self.cells[i].alive for i in self._neighbour_indices(x, y))

    def update(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            self.cells[x + y * self.width].update_neighbours(self.count_neighbours(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]

    def toggle(self, x: int, y: int) -> bool:
        """Flip the cell at (x, y); return its new state, or False when off the grid."""
        i = self.index(x, y)
        if i is None:
            return False
        cell = self.cells[i]
        cell.set_alive(not cell.alive)
        return cell.alive

    def draw(self, screen: bytearray) -> None:
        """Paint the grid into an RGBA buffer of exactly one pixel per cell."""
        if len(screen) != 4 * len(self.cells):
            raise ValueError(
                f"screen holds {len(screen)} bytes, expected {4 * len(self.cells)}"
            )
        screen[:] = b"".join(
            _ALIVE_PIXEL if cell.alive else bytes((0, 0, cell.heat, 0xFF))
            for cell in self.cells
        )

    def set_line(self, x0: int, y0: int, x1: int, y1: int, alive: bool) -> bool:
        """Set every cell on the line to ``alive``; False when it misses the grid."""
        points = clip_line((x0, y0), (x1, y1), (0, 0), (self.width - 1, self.height - 1))
        if points is None:
            return False
        for x, y in points:
            self.cells[x + y * self.width].set_alive(alive)
        return True

    def index(self, x: int, y: int) -> Optional[int]:
        """Position of (x, y) in ``cells``, or None when off the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return x + y * self.width
        return None