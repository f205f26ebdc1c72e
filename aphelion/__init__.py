"""Simulation core of a 2D space game: geometry, bodies, scene, states, animation, paths, settings."""

__version__ = "0.1.0"
__all__ = [
    "animation",
    "blackbody",
    "body",
    "geometry",
    "paths",
    "scene",
    "settings",
    "states",
]