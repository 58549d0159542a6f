import types
from pathlib import Path
from typing import Union, get_args, get_origin

import pytest
from hydra import compose, initialize_config_dir
from omegaconf import DictConfig, OmegaConf

from nsi_toolbelt.contexts import MemoryContext


@pytest.fixture(scope="session")
def project_dir() -> Path:
    """Root directory of the project (repository root)."""

    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def config_dir(project_dir: Path) -> Path:
    """Path to the configs directory."""
    return project_dir / "configs"


@pytest.fixture(scope="session")
def hydra_config(config_dir: Path) -> DictConfig:
    """Load configuration using Hydra with defaults."""
    with initialize_config_dir(config_dir=str(config_dir.absolute()), version_base=None):
        cfg = compose(config_name="default")
    return cfg


@pytest.fixture(scope="session")
def hydra_config_dict(hydra_config: DictConfig) -> dict:
    """Convert Hydra DictConfig to plain Python dict."""
    return OmegaConf.to_container(hydra_config, resolve=True)


@pytest.fixture
def ctx() -> MemoryContext:
    """A fresh, empty in-memory scene context."""
    return MemoryContext()


@pytest.fixture
def texture_path() -> str:
    return "/textures/studio_small_08_4k.exr"


def assert_class_type(obj: object, expect: type) -> None:
    """Assert that the fields of a config instance match their annotations.

    Args:
        obj: The object to check.
        expect: The expected config class of the object.
    Raises:
        AssertionError: If a field is not of the annotated type.
    """
    for exp_name, exp_type in expect.__annotations__.items():
        obj_value = getattr(obj, exp_name)
        origin = get_origin(exp_type)

        if origin is Union or origin is types.UnionType:
            expected = get_args(exp_type)
        elif origin is not None:
            expected = origin
        else:
            expected = exp_type
        if not isinstance(obj_value, expected):
            raise AssertionError(f"Field '{exp_name}' is of type {type(obj_value)}, expected {exp_type}.")
        if hasattr(exp_type, "__dataclass_fields__"):
            assert_class_type(obj_value, exp_type)
