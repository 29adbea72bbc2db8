"""Scenes, models, materials, editor input and project files of a small 3D game engine."""

__version__ = "0.1.0"