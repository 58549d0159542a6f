"""Composite rigs built from the primitives of a scene context."""

from .builder import build_environment
from .environment import environment, environment_sky, environment_texture

__all__ = [
    "environment",
    "environment_texture",
    "environment_sky",
    "build_environment",
]
