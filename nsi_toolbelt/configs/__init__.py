"""Configuration system."""

from .context import ContextConfig, ContextType
from .environment import EnvironmentConfig, EnvironmentType
from .toolbelt import ToolbeltConfig

__all__ = [
    "ContextType",
    "ContextConfig",
    "EnvironmentType",
    "EnvironmentConfig",
    "ToolbeltConfig",
]
