"""Environment light rigs.

Every rig shares the same four node topology::

    rotation (transform, returned as the rig root)
      └─ objects ← environment
                     └─ geometryattributes ← attributes (visibility.camera)
                                               └─ surfaceshader ← shader (returned)

None of these functions catch errors raised by the context. The first failing
primitive propagates and nodes created before it are not removed.
"""

import math

import numpy as np
from loguru import logger

from nsi_toolbelt.contexts.base import BaseContext
from nsi_toolbelt.types import ArgList, NodeType, float_, integer, string

ENVIRONMENT_LIGHT_SHADER = "${DELIGHT}/osl/environmentLight"
SKY_SHADER = "${DELIGHT}/osl/dlSky"

UP_AXIS = (0.0, 1.0, 0.0)

# Degrees are mapped to a full turn per 90 units, not 360. Existing scenes
# rely on this scaling.
_ANGLE_SCALE = math.tau / 90.0


def rotation_angle(angle: float) -> float:
    """Convert an environment rotation given in degrees to the transform angle."""
    return angle * _ANGLE_SCALE


def exposure_to_intensity(exposure: float) -> float:
    """Linear intensity multiplier for an exposure in stops.

    Computed in single precision, saturating to infinity instead of overflowing.
    """
    with np.errstate(over="ignore"):
        return float(np.exp2(np.float32(exposure)))


def environment(
    ctx: BaseContext,
    handle: str | None = None,
    angle: float | None = None,
    visible: bool | None = None,
) -> tuple[str, str]:
    """Create a typical environment rig.

    A latitude-longitude environment map is aligned as-shot with the horizon
    along the X-Z plane at infinity.

    The returned shader node is empty. It is up to the caller to set attributes
    on it or to hook up a shading network below it.

    Args:
        ctx: Scene context to build into.
        handle: Handle of the rig root. If None, a handle is generated.
        angle: Rotation around the Y (up) axis, in degrees. Defaults to 0.
        visible: Whether the environment is visible to the camera. Defaults to True.
    Returns:
        The rig root handle and the shader handle.
    """
    angle = 0.0 if angle is None else angle
    visible = True if visible is None else visible

    rotation = ctx.rotation(handle, rotation_angle(angle), UP_AXIS)

    light = ctx.node(None, NodeType.ENVIRONMENT)
    ctx.append(rotation, None, light)

    attributes = ctx.node(None, NodeType.ATTRIBUTES, [integer("visibility.camera", int(visible))])
    shader = ctx.node(None, NodeType.SHADER)

    ctx.append(light, "geometryattributes", ctx.append(attributes, "surfaceshader", shader)[0])

    logger.debug(f"Built environment rig '{rotation}' (angle={angle}, visible={visible})")
    return rotation, shader


def _set_shader(ctx: BaseContext, shader: str, defaults: ArgList, args: ArgList | None) -> None:
    ctx.set_attribute(shader, defaults)
    if args:
        ctx.set_attribute(shader, args)


def environment_texture(
    ctx: BaseContext,
    texture: str,
    handle: str | None = None,
    angle: float | None = None,
    exposure: float | None = None,
    visible: bool | None = None,
    args: ArgList | None = None,
) -> tuple[str, str]:
    """Create a textured environment light.

    Args:
        ctx: Scene context to build into.
        texture: A latitude-longitude texture map in one of the formats the
            renderer reads: TIFF, JPEG, Radiance, OpenEXR, GIF, IFF, SGI, PIC,
            Photoshop PSD or TGA. The path is passed through unchecked.
        handle: Handle of the rig root. If None, a handle is generated.
        angle: Rotation around the Y (up) axis, in degrees.
        exposure: Scales the intensity in stops (EV). Defaults to 0.
        visible: Whether the environment is visible to the camera.
        args: Shader attributes applied after the defaults, overriding them.
    Returns:
        The rig root handle and the shader handle.
    """
    intensity = exposure_to_intensity(0.0 if exposure is None else exposure)
    rotation, shader = environment(ctx, handle, angle, visible)

    _set_shader(
        ctx,
        shader,
        [
            string("shaderfilename", ENVIRONMENT_LIGHT_SHADER),
            float_("intensity", intensity),
            string("image", texture),
        ],
        args,
    )
    return rotation, shader


def environment_sky(
    ctx: BaseContext,
    handle: str | None = None,
    angle: float | None = None,
    exposure: float | None = None,
    visible: bool | None = None,
    args: ArgList | None = None,
) -> tuple[str, str]:
    """Create a physically plausible, procedural sky environment light.

    This instances a ``dlSky`` shader; use the returned shader handle to set
    more attributes on it. Arguments are those of `environment_texture`
    without the texture.
    """
    intensity = exposure_to_intensity(0.0 if exposure is None else exposure)
    rotation, shader = environment(ctx, handle, angle, visible)

    _set_shader(
        ctx,
        shader,
        [
            string("shaderfilename", SKY_SHADER),
            float_("intensity", intensity),
        ],
        args,
    )
    return rotation, shader
