"""Game session: player input, pause state and the world it drives."""

from __future__ import annotations

from pixelplay.entities import Controls, Direction
from pixelplay.world import World


class Game:
    """Holds the world together with the current controls and pause state."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.controls = Controls()
        self.paused = False

    def update_controls(self, left: bool, right: bool, fire: bool, pause: bool) -> None:
        """Turn raw input into controls; ``pause`` toggles the pause state."""
        if pause:
            self.paused = not self.paused
        if left:
            direction = Direction.LEFT
        elif right:
            direction = Direction.RIGHT
        else:
            direction = Direction.STILL
        self.controls = Controls(direction, fire)

    def update(self) -> None:
        """Advance the world one time step unless paused."""
        if not self.paused:
            self.world.update(self.controls)

    def draw(self, screen: bytearray) -> None:
        """Render the world onto ``screen``."""
        self.world.draw(screen)

    def reset_game(self) -> None:
        """Start the game over."""
        self.world.reset_game()