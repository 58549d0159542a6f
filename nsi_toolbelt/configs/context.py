from enum import Enum

from nsi_toolbelt.utils.config import configclass


class ContextType(Enum):
    """Enumeration of supported scene context types."""

    MEMORY = "memory"


@configclass
class ContextConfig:
    type: ContextType = ContextType.MEMORY
    """Which scene context implementation to create."""
    verbose: bool = False
    """Whether the context logs every primitive it receives."""
