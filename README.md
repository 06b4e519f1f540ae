# pixelplay

Small games and demos that draw straight into a plain RGBA frame buffer
(`bytearray`, four bytes per pixel, rows top to bottom). You own the frame and
decide how often to advance the simulation; the buffer can be handed to any
display library, saved as an image, or inspected in tests.

What is inside:

- **Invaders** (`pixelplay.world`, `pixelplay.game`) – a Space Invaders clone:
  an invader fleet that marches and descends, a player cannon, shields,
  bullets and lasers, collision detection, and an optional debug overlay of
  bounding boxes.
- **Conway's Game of Life** (`pixelplay.conway`) – a wrapping grid with a
  fading "heat" trail behind dead cells, cell toggling and line drawing.
- **Bouncing shapes** (`pixelplay.bouncing`) – a box or a circle bouncing
  around a fixed or resizable frame.

The package has no run-time dependencies beyond the standard library.

## Invaders

Sprites are loaded from a directory of PCX images named `blipjoy1.pcx`,
`blipjoy2.pcx`, `ferris1.pcx`, `ferris2.pcx`, `cthulhu1.pcx`, `cthulhu2.pcx`,
`player1.pcx`, `player2.pcx`, `shield.pcx`, `bullet1.pcx` … `bullet5.pcx` and
`laser1.pcx` … `laser8.pcx`.

```python
from pixelplay.assets import load_assets
from pixelplay.game import Game
from pixelplay.world import World

assets = load_assets("path/to/sprites")
world = World.with_default_seed(assets)      # or World(assets, seed, debug)
game = Game(world)

screen = bytearray(224 * 256 * 4)            # the invaders screen is 224 x 256

# once per fixed time step (240 steps per second):
game.update_controls(left=False, right=True, fire=True, pause=False)
game.update()
game.draw(screen)

if world.gameover:
    game.reset_game()
```

`Game.update_controls` turns raw input into `Controls`: left wins over right,
and a true `pause` toggles the pause state, during which `Game.update` does
nothing. The game ends (`World.gameover`) when every invader is shot, when a
laser hits the player, or when the fleet reaches the player's row.

Pass `debug=True` to `World(assets, seed, debug)` to draw bounding boxes over
the fleet (blue), invaders, shields, player and projectiles (green); boxes
turn yellow or red where a collision was recorded during the last update.

Random numbers come from `pixelplay.rng.Pcg32`; `pixelplay.rng.generate_seed()`
draws a fresh seed pair from the operating system.

`pixelplay.assets.load_pcx(data)` decodes the bytes of a single PCX file into a
`CachedSprite` with `width`, `height` and RGBA `pixels`. It reads raw or
run-length encoded images with one plane of 1, 2, 4 or 8 bits per pixel
(paletted) or three planes of 8 bits (RGB), and raises `PcxError` for anything
else or for truncated data.

## Game of Life

```python
from pixelplay.conway import ConwayGrid

grid = ConwayGrid.random(400, 300, seed=None)   # None picks a fresh seed
frame = bytearray(400 * 300 * 4)

grid.update()            # one generation
grid.toggle(10, 20)      # flip one cell, returns whether it is now alive
grid.set_line(0, 0, 50, 50, True)   # False if the line misses the grid
grid.draw(frame)         # frame must hold exactly 4 bytes per cell
```

Live cells are drawn cyan; dead cells glow blue and fade by one step of
brightness each generation. The grid wraps at its edges. Passing the same
`seed` tuple to `ConwayGrid.random` or `randomize` gives the same grid.

## Bouncing shapes

```python
from pixelplay.bouncing import BouncingBox, BouncingCircle, ResizableBouncingBox

box = BouncingBox()                  # draws into a 320 x 240 frame
frame = bytearray(320 * 240 * 4)
box.update()
box.draw(frame)

circle = BouncingCircle()            # draws into a 600 x 400 frame
resizable = ResizableBouncingBox(640, 480)
resizable.resize(800, 600)
```

## What the package does not do

- It opens no window, reads no keyboard, mouse or gamepad, and keeps no clock:
  the caller supplies input (`Game.update_controls`, `ConwayGrid.toggle`,
  `ConwayGrid.set_line`) and calls `update` at its own pace.
- It ships no sprite images; `load_assets` needs a directory of PCX files.
- It has no GPU shader effects and no on-screen GUI menus or dialogs; scenes
  are drawn pixel by pixel in software.
- It installs no command; everything is used from Python.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.