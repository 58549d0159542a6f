from dataclasses import field

from nsi_toolbelt.utils.config import configclass

from .context import ContextConfig
from .environment import EnvironmentConfig


@configclass
class ToolbeltConfig:
    context: ContextConfig = field(default_factory=ContextConfig)
    """Configuration of the scene context the rigs are built into."""
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    """Configuration of the environment rig."""
