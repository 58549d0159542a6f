from dataclasses import asdict, dataclass
from enum import Enum
from os import PathLike
from typing import Any

import dacite
import yaml
from loguru import logger


def _to_dict(cfg) -> dict[str, Any]:
    """Convert a config instance to a plain dictionary, enums as their values."""
    return asdict(cfg, dict_factory=lambda items: {k: v.value if isinstance(v, Enum) else v for k, v in items})


def _from_dict(cls, cfg_dict: dict):
    """Build a config from a dictionary with dacite.

    Enums are cast from their values, integers are accepted for float fields
    and unknown keys are rejected.
    """
    return dacite.from_dict(
        data_class=cls,
        data=cfg_dict,
        config=dacite.Config(type_hooks={float: float}, cast=[Enum], strict=True),
    )


def _from_yaml(cls, path: PathLike):
    """Load configuration from YAML file."""
    with open(path) as f:
        cfg_dict = yaml.safe_load(f)
    return cls.from_dict(cfg_dict or {})


def _save(cfg, path: PathLike, save_type: str = "yaml") -> None:
    """Save configuration to file."""
    cfg_dict = cfg.to_dict()
    with open(path, "w") as f:
        if save_type == "yaml":
            yaml.dump(cfg_dict, f, default_flow_style=False)
        else:
            raise ValueError(f"Unsupported save type: {save_type}")


def _print(cfg) -> None:
    """Log configuration as YAML."""
    logger.info(f"Configuration:\n{yaml.dump(cfg.to_dict(), default_flow_style=False)}")


_CLASS_METHODS = {
    "from_dict": _from_dict,
    "from_yaml": _from_yaml,
}
_INSTANCE_METHODS = {
    "to_dict": _to_dict,
    "save": _save,
    "print": _print,
}


def configclass(_cls=None, **dataclass_kwargs):
    """Decorator turning a class into a dataclass with loading and saving helpers.

    Adds ``from_dict``/``from_yaml`` class methods and ``to_dict``/``save``/``print``
    methods. Methods already defined on the class are left untouched.

    Usage:
        @configclass
        class MyConfig:
            value: int = 0

        cfg = MyConfig.from_dict({"value": 1})
    """

    def wrap(cls):
        dataclass_cls = dataclass(**dataclass_kwargs)(cls)
        for method_name, method_func in _CLASS_METHODS.items():
            if not hasattr(dataclass_cls, method_name):
                setattr(dataclass_cls, method_name, classmethod(method_func))
        for method_name, method_func in _INSTANCE_METHODS.items():
            if not hasattr(dataclass_cls, method_name):
                setattr(dataclass_cls, method_name, method_func)
        return dataclass_cls

    if _cls is None:
        return wrap
    return wrap(_cls)
