"""First-person raycasting engine: .cub scene parsing, XPM textures, rendering and a pygame game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]