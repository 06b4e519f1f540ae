import pytest

from pixelplay.assets import Assets
from pixelplay.entities import PLAYER_START, Direction
from pixelplay.game import Game
from pixelplay.sprites import HEIGHT, WIDTH, CachedSprite, Frame
from pixelplay.world import World


def make_assets():
    sprites = {}
    for frame in Frame:
        if frame.name.startswith("BULLET"):
            w, h = 1, 4
        elif frame.name.startswith("LASER"):
            w, h = 3, 8
        elif frame.name.startswith("PLAYER") or frame is Frame.SHIELD1:
            w, h = 16, 8
        else:
            w, h = 10, 8
        sprites[frame] = CachedSprite(w, h, bytes([255]) * (w * h * 4))
    return Assets(sprites)


@pytest.fixture
def game():
    return Game(World.with_default_seed(make_assets()))


def test_pause_toggles(game):
    game.update_controls(False, False, False, True)
    assert game.paused is True
    game.update_controls(False, False, False, False)
    assert game.paused is True
    game.update_controls(False, False, False, True)
    assert game.paused is False


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (True, True, Direction.LEFT),
        (True, False, Direction.LEFT),
        (False, True, Direction.RIGHT),
        (False, False, Direction.STILL),
    ],
)
def test_direction_priority(game, left, right, expected):
    game.update_controls(left, right, False, False)
    assert game.controls.direction is expected


def test_fire_is_passed_through(game):
    game.update_controls(False, False, True, False)
    assert game.controls.fire is True
    game.update()
    assert game.world.bullet is not None


def test_paused_game_does_not_advance(game):
    game.update_controls(True, False, False, True)
    for _ in range(10):
        game.update()
    assert game.world.player.pos == PLAYER_START


def test_running_game_advances(game):
    game.update_controls(True, False, False, False)
    for _ in range(10):
        game.update()
    assert game.world.player.pos.x < PLAYER_START.x


def test_draw_fills_screen(game):
    screen = bytearray(WIDTH * HEIGHT * 4)
    game.draw(screen)
    assert screen[3] == 255
    assert screen[:3] == bytearray(3)


def test_reset_game(game):
    game.world.gameover = True
    game.world.invaders.grid[0][0] = None
    game.reset_game()
    assert game.world.gameover is False
    assert game.world.invaders.grid[0][0] is not None