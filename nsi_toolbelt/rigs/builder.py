"""Build rigs from configuration."""

from loguru import logger

from nsi_toolbelt.configs import EnvironmentConfig, EnvironmentType
from nsi_toolbelt.contexts.base import BaseContext
from nsi_toolbelt.types import args_from_dict

from .environment import environment, environment_sky, environment_texture


def build_environment(ctx: BaseContext, config: EnvironmentConfig) -> tuple[str, str]:
    """Build the environment rig described by `config` into `ctx`.

    Args:
        ctx: Scene context to build into.
        config: Environment rig configuration.
    Returns:
        The rig root handle and the shader handle.
    Raises:
        ValueError: If a texture rig is requested without a texture.
    """
    kind = EnvironmentType(config.kind)
    overrides = args_from_dict(config.attributes)

    if kind == EnvironmentType.TEXTURE:
        if not config.texture:
            raise ValueError("A texture environment needs a texture path.")
        return environment_texture(
            ctx,
            config.texture,
            handle=config.handle,
            angle=config.angle,
            exposure=config.exposure,
            visible=config.visible,
            args=overrides,
        )
    if kind == EnvironmentType.SKY:
        return environment_sky(
            ctx,
            handle=config.handle,
            angle=config.angle,
            exposure=config.exposure,
            visible=config.visible,
            args=overrides,
        )

    root, shader = environment(ctx, handle=config.handle, angle=config.angle, visible=config.visible)
    if overrides:
        ctx.set_attribute(shader, overrides)
    else:
        logger.info(f"Environment shader '{shader}' left empty.")
    return root, shader
