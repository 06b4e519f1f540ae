"""Collision detection between bullets, lasers, invaders, shields and the player."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from pixelplay.entities import COLS, GRID, ROWS, Bullet, Invaders, Laser, Player, Shield
from pixelplay.geo import Point, Rect


@dataclass(frozen=True, order=True)
class BulletDetail:
    """What a bullet collided with; ordered invaders first, then shields, then lasers."""

    class Kind(IntEnum):
        INVADER = 0
        SHIELD = 1
        LASER = 2

    kind: BulletDetail.Kind
    index: tuple[int, ...] = ()

    @classmethod
    def invader(cls, col: int, row: int) -> BulletDetail:
        return cls(cls.Kind.INVADER, (col, row))

    @classmethod
    def shield(cls, index: int) -> BulletDetail:
        return cls(cls.Kind.SHIELD, (index,))

    @classmethod
    def laser(cls) -> BulletDetail:
        return cls(cls.Kind.LASER)


@dataclass(frozen=True, order=True)
class LaserDetail:
    """What a laser collided with; ordered shields first, then the player."""

    class Kind(IntEnum):
        SHIELD = 0
        PLAYER = 1

    kind: LaserDetail.Kind
    index: tuple[int, ...] = ()

    @classmethod
    def shield(cls, index: int) -> LaserDetail:
        return cls(cls.Kind.SHIELD, (index,))

    @classmethod
    def player(cls) -> LaserDetail:
        return cls(cls.Kind.PLAYER)


def _shield_rects(shields: Sequence[Shield]) -> list[Rect]:
    return [Rect.from_drawable(shield.pos, shield.sprite) for shield in shields]


@dataclass
class Collision:
    """Collision details gathered during one update, kept for debug drawing."""

    bullet_details: set[BulletDetail] = field(default_factory=set)
    laser_details: set[LaserDetail] = field(default_factory=set)

    def clear(self) -> None:
        self.bullet_details.clear()
        self.laser_details.clear()

    def bullet_to_invader(self, bullet: Bullet, invaders: Invaders) -> bool:
        """Kill the first invader the bullet hits; True when the bullet is spent."""
        top, right, bottom, left = invaders.get_bounds()
        fleet_rect = Rect(Point(left, top), Point(right, bottom))
        bullet_rect = Rect.from_drawable(bullet.pos, bullet.sprite)
        if not bullet_rect.intersects(fleet_rect):
            return False

        p1, p2 = bullet_rect.p1, bullet_rect.p2
        for x, y in ((p1.x, p1.y), (p1.x, p2.y), (p2.x, p1.y), (p2.x, p2.y)):
            col = max(x - left, 0) // GRID.x + invaders.bounds.left_col
            row = max(y - top, 0) // GRID.y + invaders.bounds.top_row
            if col < COLS and row < ROWS and invaders.grid[row][col] is not None:
                self.bullet_details.add(BulletDetail.invader(col, row))

        for detail in sorted(self.bullet_details):
            if detail.kind is not BulletDetail.Kind.INVADER:
                continue
            col, row = detail.index
            invader = invaders.grid[row][col]
            if invader is None:
                continue
            if bullet_rect.intersects(Rect.from_drawable(invader.pos, invader.sprite)):
                invaders.grid[row][col] = None
                return True
        return False

    def bullet_to_shield(self, bullet: Optional[Bullet], shields: Sequence[Shield]) -> bool:
        """Record shield hits; True when the bullet is spent."""
        if bullet is None:
            return False
        bullet_rect = Rect.from_drawable(bullet.pos, bullet.sprite)
        destroy = False
        for i, shield_rect in enumerate(_shield_rects(shields)):
            if bullet_rect.intersects(shield_rect):
                self.bullet_details.add(BulletDetail.shield(i))
                destroy = True
        return destroy

    def laser_to_player(self, laser: Laser, player: Player) -> bool:
        """True when the laser hits the player."""
        laser_rect = Rect.from_drawable(laser.pos, laser.sprite)
        player_rect = Rect.from_drawable(player.pos, player.sprite)
        if laser_rect.intersects(player_rect):
            self.laser_details.add(LaserDetail.player())
            return True
        return False

    def laser_to_bullet(self, laser: Laser, bullet: Optional[Bullet]) -> bool:
        """True when the laser and bullet destroy each other."""
        if bullet is None:
            return False
        laser_rect = Rect.from_drawable(laser.pos, laser.sprite)
        bullet_rect = Rect.from_drawable(bullet.pos, bullet.sprite)
        if bullet_rect.intersects(laser_rect):
            self.bullet_details.add(BulletDetail.laser())
            return True
        return False

    def laser_to_shield(self, laser: Laser, shields: Sequence[Shield]) -> bool:
        """Record shield hits; True when the laser is spent."""
        laser_rect = Rect.from_drawable(laser.pos, laser.sprite)
        destroy = False
        for i, shield_rect in enumerate(_shield_rects(shields)):
            if laser_rect.intersects(shield_rect):
                self.laser_details.add(LaserDetail.shield(i))
                destroy = True
        return destroy