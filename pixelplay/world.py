"""The invaders game world: simulation and rendering."""

from __future__ import annotations

from typing import Optional

from pixelplay import debug as overlay
from pixelplay.assets import Assets
from pixelplay.collision import Collision
from pixelplay.entities import (
    BULLET_OFFSET,
    COLS,
    LASER_OFFSET,
    ONE_FRAME,
    PLAYER_START,
    Bullet,
    Controls,
    Direction,
    Invaders,
    Laser,
    Player,
    Shield,
)
from pixelplay.geo import Point
from pixelplay.rng import Pcg32
from pixelplay.sprites import TIME_STEP, WIDTH, Frame, SpriteRef, blit

DEFAULT_SEED = (6_364_136_223_846_793_005, 1)

_MILLIS = 1_000_000
_LASER_FRAME_TIME = 16 * _MILLIS
_BULLET_FRAME_TIME = 32 * _MILLIS
_LASER_CHANCE = 50
_MAX_LASERS = 3


def clear(screen: bytearray) -> None:
    """Fill the screen with opaque black."""
    size = len(screen)
    screen[:] = (b"\x00\x00\x00\xff" * (size // 4 + 1))[:size]


def _make_shields(assets: Assets) -> list[Shield]:
    return [Shield.create(assets, Point(i * 45 + 32, 192)) for i in range(4)]


class World:
    """All game state; advanced by ``update`` and rendered by ``draw``."""

    def __init__(self, assets: Assets, seed: tuple[int, int], debug: bool = False) -> None:
        self.assets = assets
        self.invaders = Invaders.create(assets)
        self.lasers: list[Laser] = []
        self.shields = _make_shields(assets)
        self.player = Player.create(assets)
        self.bullet: Optional[Bullet] = None
        self.collision = Collision()
        self.score = 0
        self.dt = 0
        self.gameover = False
        self.prng = Pcg32(seed[0], seed[1])
        self.debug = debug

    @classmethod
    def with_default_seed(cls, assets: Assets) -> World:
        """Create a world with a fixed PRNG seed."""
        return cls(assets, DEFAULT_SEED, False)

    def update(self, controls: Controls) -> None:
        """Advance the game by one fixed time step."""
        if self.gameover:
            return

        self.dt += TIME_STEP
        self.collision.clear()

        while self.dt >= ONE_FRAME:
            self.dt -= ONE_FRAME
            self._step_invaders()

        self._step_player(controls)
        self._step_bullet()
        self._step_lasers()

    def _step_bullet(self) -> None:
        bullet = self.bullet
        if bullet is None:
            return
        velocity = bullet.advance()
        if bullet.pos.y <= velocity:
            self.bullet = None
            return
        bullet.pos = Point(bullet.pos.x, bullet.pos.y - velocity)
        bullet.sprite.animate(self.assets)

        if self.collision.bullet_to_invader(bullet, self.invaders):
            self.bullet = None
            self.gameover = self.invaders.shrink_bounds()
        elif self.collision.bullet_to_shield(bullet, self.shields):
            self.bullet = None

    def _step_lasers(self) -> None:
        survivors = []
        for laser in self.lasers:
            velocity = laser.advance() * 2
            if laser.pos.y >= self.player.pos.y:
                continue
            laser.pos = Point(laser.pos.x, laser.pos.y + velocity)
            laser.sprite.animate(self.assets)

            if self.collision.laser_to_player(laser, self.player):
                self.gameover = True
                continue
            if self.collision.laser_to_bullet(laser, self.bullet):
                self.bullet = None
                continue
            if self.collision.laser_to_shield(laser, self.shields):
                continue
            survivors.append(laser)
        self.lasers = survivors

    def draw(self, screen: bytearray) -> None:
        """Render the world onto an RGBA screen buffer."""
        clear(screen)

        for row in self.invaders.grid:
            for invader in row:
                if invader is not None:
                    blit(screen, invader.pos, invader.sprite)
        for shield in self.shields:
            blit(screen, shield.pos, shield.sprite)
        blit(screen, self.player.pos, self.player.sprite)
        if self.bullet is not None:
            blit(screen, self.bullet.pos, self.bullet.sprite)
        for laser in self.lasers:
            blit(screen, laser.pos, laser.sprite)

        if self.debug:
            overlay.draw_invaders(screen, self.invaders, self.collision)
            overlay.draw_bullet(screen, self.bullet)
            overlay.draw_lasers(screen, self.lasers)
            overlay.draw_player(screen, self.player, self.collision)
            overlay.draw_shields(screen, self.shields, self.collision)

    def _step_invaders(self) -> None:
        fleet = self.invaders
        _, right, _, left = fleet.get_bounds()
        invader, is_leader = fleet.next_invader()

        if is_leader:
            fleet.descend = False
            pos = fleet.bounds.pos
            if fleet.direction is Direction.LEFT:
                if left < 2:
                    fleet.bounds.pos = Point(pos.x + 2, pos.y + 8)
                    fleet.descend = True
                    fleet.direction = Direction.RIGHT
                else:
                    fleet.bounds.pos = Point(pos.x - 2, pos.y)
            else:
                if right > WIDTH - 2:
                    fleet.bounds.pos = Point(pos.x - 2, pos.y + 8)
                    fleet.descend = True
                    fleet.direction = Direction.LEFT
                else:
                    fleet.bounds.pos = Point(pos.x + 2, pos.y)

        step = -2 if fleet.direction is Direction.LEFT else 2
        invader.pos = Point(invader.pos.x + step, invader.pos.y)

        if fleet.descend:
            invader.pos = Point(invader.pos.x, invader.pos.y + 8)
            if invader.pos.y + 8 >= self.player.pos.y:
                self.gameover = True

        invader.sprite.step_frame(self.assets)

        r = self.prng.next_u32()
        if len(self.lasers) < _MAX_LASERS and r % _LASER_CHANCE == 0:
            col = r // _LASER_CHANCE % COLS
            shooter = fleet.closest_invader(col)
            self.lasers.append(
                Laser(
                    SpriteRef.from_assets(self.assets, Frame.LASER1, _LASER_FRAME_TIME),
                    shooter.pos + LASER_OFFSET,
                )
            )

    def _step_player(self, controls: Controls) -> None:
        player = self.player
        frames = player.advance()
        width = player.sprite.width

        if controls.direction is Direction.LEFT:
            if player.pos.x > width:
                player.pos = Point(player.pos.x - frames, player.pos.y)
                player.sprite.animate(self.assets)
        elif controls.direction is Direction.RIGHT:
            if player.pos.x < WIDTH - width * 2:
                player.pos = Point(player.pos.x + frames, player.pos.y)
                player.sprite.animate(self.assets)

        if controls.fire and self.bullet is None:
            self.bullet = Bullet(
                SpriteRef.from_assets(self.assets, Frame.BULLET1, _BULLET_FRAME_TIME),
                player.pos + BULLET_OFFSET,
            )

    def reset_game(self) -> None:
        """Restore the fleet, shields, player and score to their starting state."""
        self.invaders = Invaders.create(self.assets)
        self.lasers.clear()
        self.shields = _make_shields(self.assets)
        self.player.pos = PLAYER_START
        self.bullet = None
        self.collision.clear()
        self.score = 0
        self.gameover = False