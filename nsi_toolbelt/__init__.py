"""Nodal Scene Interface toolbelt.

Shortcuts that assemble common multi-node rigs, such as environment lights,
through the primitives of a scene context.
"""

__version__ = "0.1.0"

from nsi_toolbelt.contexts import BaseContext, ContextFactory, MemoryContext
from nsi_toolbelt.rigs import build_environment, environment, environment_sky, environment_texture

__all__ = [
    "BaseContext",
    "ContextFactory",
    "MemoryContext",
    "environment",
    "environment_texture",
    "environment_sky",
    "build_environment",
]
