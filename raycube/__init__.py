"""Scene loading and checking, XPM image decoding and a window loop for a grid raycaster."""

__version__ = "0.1.0"
__all__ = ["colornames", "image", "xpm", "utils", "parsing", "game", "cli"]