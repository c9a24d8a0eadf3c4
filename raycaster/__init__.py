"""First-person raycasting walker with textured walls, floor, sky and a minimap."""

__version__ = "0.1.0"
__all__ = ["game", "player", "render", "world"]