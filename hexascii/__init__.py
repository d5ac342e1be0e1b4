"""Draw, tile, erase and route through hexagons drawn in ASCII art."""

__version__ = "0.1.0"
__all__ = ["outline", "tiling", "echo", "shapes", "erase", "route"]