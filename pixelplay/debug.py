"""Debug overlays: bounding boxes coloured by collision state."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from pixelplay.collision import BulletDetail, Collision, LaserDetail
from pixelplay.entities import GRID, Bullet, Invaders, Laser, Player, Shield
from pixelplay.geo import Point
from pixelplay.sprites import rect

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
YELLOW = (255, 255, 0, 255)


def _box(screen: bytearray, pos: Point, width: int, height: int, color) -> None:
    rect(screen, pos, pos + Point(width, height), color)


def draw_invaders(screen: bytearray, invaders: Invaders, collision: Collision) -> None:
    """Draw the fleet's bounding box and a box around each invader."""
    top, right, bottom, left = invaders.get_bounds()
    rect(screen, Point(left, top), Point(right, bottom), BLUE)

    for y, row in enumerate(invaders.grid):
        for x, invader in enumerate(row):
            detail = BulletDetail.invader(x, y)
            hit = detail in collision.bullet_details
            if invader is not None:
                color = YELLOW if hit else GREEN
                _box(screen, invader.pos, invader.sprite.width, invader.sprite.height, color)
            elif hit:
                cell = Point(x - invaders.bounds.left_col, y - invaders.bounds.top_row)
                p1 = invaders.bounds.pos + cell * GRID
                rect(screen, p1, p1 + GRID, RED)


def draw_bullet(screen: bytearray, bullet: Optional[Bullet]) -> None:
    """Draw the bullet's bounding box, if there is a bullet."""
    if bullet is not None:
        _box(screen, bullet.pos, bullet.sprite.width, bullet.sprite.height, GREEN)


def draw_lasers(screen: bytearray, lasers: Iterable[Laser]) -> None:
    """Draw a bounding box around every laser."""
    for laser in lasers:
        _box(screen, laser.pos, laser.sprite.width, laser.sprite.height, GREEN)


def draw_player(screen: bytearray, player: Player, collision: Collision) -> None:
    """Draw the player's bounding box, red when hit by a laser."""
    color = RED if LaserDetail.player() in collision.laser_details else GREEN
    _box(screen, player.pos, player.sprite.width, player.sprite.height, color)


def draw_shields(screen: bytearray, shields: Sequence[Shield], collision: Collision) -> None:
    """Draw a bounding box around each shield, red when hit."""
    for i, shield in enumerate(shields):
        hit = (
            LaserDetail.shield(i) in collision.laser_details
            or BulletDetail.shield(i) in collision.bullet_details
        )
        _box(screen, shield.pos, shield.sprite.width, shield.sprite.height, RED if hit else GREEN)