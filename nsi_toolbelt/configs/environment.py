from dataclasses import field
from enum import Enum
from typing import Any

from nsi_toolbelt.utils.config import configclass


class EnvironmentType(Enum):
    """Enumeration of environment rig variants."""

    EMPTY = "empty"
    TEXTURE = "texture"
    SKY = "sky"


@configclass
class EnvironmentConfig:
    kind: EnvironmentType = EnvironmentType.SKY
    """Rig variant to build. ``empty`` leaves the shader without attributes."""
    handle: str | None = None
    """Handle of the rig root. If None, a handle is generated."""
    texture: str | None = None
    """Latitude-longitude texture map. Required for the ``texture`` variant."""
    angle: float = 0.0
    """Rotation around the up axis, in degrees."""
    exposure: float = 0.0
    """Intensity scale in stops (EV)."""
    visible: bool = True
    """Whether the environment is visible to the camera."""
    attributes: dict[str, Any] = field(default_factory=dict)
    """Shader attributes applied after the computed defaults."""
