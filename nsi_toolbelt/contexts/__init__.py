"""Scene contexts the rigs are built into."""

from .base import BaseContext
from .factory import ContextFactory
from .memory import Connection, MemoryContext, Node, SceneGraphError

__all__ = [
    "BaseContext",
    "ContextFactory",
    "MemoryContext",
    "Node",
    "Connection",
    "SceneGraphError",
]
