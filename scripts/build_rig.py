#!/usr/bin/env python3
"""Script to build an environment rig from configuration and dump the scene graph."""

from pathlib import Path

import hydra
import yaml
from loguru import logger
from omegaconf import DictConfig, OmegaConf

import nsi_toolbelt
from nsi_toolbelt.configs import ToolbeltConfig
from nsi_toolbelt.contexts import ContextFactory, MemoryContext
from nsi_toolbelt.rigs import build_environment

PROJECT_DIR = Path(nsi_toolbelt.__file__).parents[1].resolve()


@hydra.main(version_base=None, config_path=str(PROJECT_DIR / "configs"), config_name="default")
def main(cfg: DictConfig) -> None:
    """Main entry point.

    Switch rig variants easily:
        python scripts/build_rig.py environment=sky environment.exposure=1.5
        python scripts/build_rig.py environment=texture environment.texture=studio.exr
        python scripts/build_rig.py environment=empty environment.visible=false

    Args:
        cfg: Hydra configuration object
    """
    cfg = ToolbeltConfig.from_dict(OmegaConf.to_container(cfg, resolve=True))
    cfg.print()

    ctx = ContextFactory.create_context(cfg.context)
    root, shader = build_environment(ctx, cfg.environment)
    logger.info(f"Built environment rig: root='{root}', shader='{shader}'")

    if isinstance(ctx, MemoryContext):
        logger.info("Scene graph:\n{}", yaml.dump(ctx.to_dict(), default_flow_style=False, sort_keys=False))


if __name__ == "__main__":
    main()
