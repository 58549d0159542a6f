"""Tests for building rigs from configuration."""

import pytest

from nsi_toolbelt.configs import EnvironmentConfig, EnvironmentType, ToolbeltConfig
from nsi_toolbelt.contexts import ContextFactory, MemoryContext
from nsi_toolbelt.rigs import build_environment
from nsi_toolbelt.rigs.environment import ENVIRONMENT_LIGHT_SHADER, SKY_SHADER


def test_build_sky(ctx: MemoryContext) -> None:
    root, shader = build_environment(ctx, EnvironmentConfig(kind=EnvironmentType.SKY, exposure=1.0))

    assert ctx.attributes(shader) == {"shaderfilename": SKY_SHADER, "intensity": 2.0}
    assert len(ctx.nodes) == 4


def test_build_texture(ctx: MemoryContext, texture_path: str) -> None:
    config = EnvironmentConfig(kind=EnvironmentType.TEXTURE, handle="hdri", texture=texture_path)
    root, shader = build_environment(ctx, config)

    assert root == "hdri"
    assert ctx.attributes(shader) == {
        "shaderfilename": ENVIRONMENT_LIGHT_SHADER,
        "intensity": 1.0,
        "image": texture_path,
    }


def test_build_texture_without_path_fails(ctx: MemoryContext) -> None:
    with pytest.raises(ValueError):
        build_environment(ctx, EnvironmentConfig(kind=EnvironmentType.TEXTURE))
    assert ctx.nodes == {}


def test_build_empty(ctx: MemoryContext) -> None:
    _, shader = build_environment(ctx, EnvironmentConfig(kind=EnvironmentType.EMPTY))
    assert ctx.attributes(shader) == {}


def test_build_empty_with_attributes(ctx: MemoryContext) -> None:
    config = EnvironmentConfig(kind=EnvironmentType.EMPTY, attributes={"shaderfilename": "mySky.oso"})
    _, shader = build_environment(ctx, config)
    assert ctx.attributes(shader) == {"shaderfilename": "mySky.oso"}


def test_config_attributes_override_defaults(ctx: MemoryContext) -> None:
    config = EnvironmentConfig.from_dict(
        {"kind": "sky", "exposure": 2, "visible": False, "attributes": {"intensity": 0.75, "elevation": 30.0}}
    )
    root, shader = build_environment(ctx, config)

    assert ctx.attributes(shader) == {"shaderfilename": SKY_SHADER, "intensity": 0.75, "elevation": 30.0}
    (light,) = ctx.children(root)
    (attributes,) = ctx.children(light, "geometryattributes")
    assert ctx.attributes(attributes) == {"visibility.camera": 0}


def test_build_from_hydra_config(hydra_config_dict: dict) -> None:
    cfg = ToolbeltConfig.from_dict(hydra_config_dict)
    ctx = ContextFactory.create_context(cfg.context)
    root, shader = build_environment(ctx, cfg.environment)

    assert isinstance(ctx, MemoryContext)
    assert root in ctx.nodes
    assert ctx.attributes(shader)["shaderfilename"] == SKY_SHADER
