"""Games and demos drawn into RGBA frame buffers: invaders, Game of Life and bouncing shapes."""

__version__ = "0.1.0"