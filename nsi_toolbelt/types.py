from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

########################## Node & Argument Types ##########################


class NodeType(Enum):
    """Node types of the scene interface used by the toolbelt."""

    TRANSFORM = "transform"
    ENVIRONMENT = "environment"
    ATTRIBUTES = "attributes"
    SHADER = "shader"


class ArgType(Enum):
    """Value types an attribute can carry."""

    INTEGER = "int"
    FLOAT = "float"
    STRING = "string"
    DOUBLE_MATRIX = "doublematrix"


@dataclass(frozen=True)
class Arg:
    """A single named, typed attribute value."""

    name: str
    value: Any
    type: ArgType


ArgList = Sequence[Arg]


def integer(name: str, value: int) -> Arg:
    return Arg(name, int(value), ArgType.INTEGER)


def float_(name: str, value: float) -> Arg:
    return Arg(name, float(value), ArgType.FLOAT)


def string(name: str, value: str) -> Arg:
    return Arg(name, str(value), ArgType.STRING)


def double_matrix(name: str, value: np.ndarray | Sequence[float]) -> Arg:
    """Create a 4x4 double matrix argument, stored as a flat tuple of 16 values."""
    matrix = np.asarray(value, dtype=np.float64).reshape(-1)
    assert matrix.size == 16, f"A double matrix needs 16 values, got {matrix.size}."
    return Arg(name, tuple(matrix.tolist()), ArgType.DOUBLE_MATRIX)


def args_from_dict(values: dict[str, Any]) -> list[Arg]:
    """Convert a plain mapping into an argument list.

    bool and int map to INTEGER, float to FLOAT and str to STRING.

    Raises:
        TypeError: If a value has no matching argument type.
    """
    args = []
    for name, value in values.items():
        if isinstance(value, (bool, int)):
            args.append(integer(name, value))
        elif isinstance(value, float):
            args.append(float_(name, value))
        elif isinstance(value, str):
            args.append(string(name, value))
        else:
            raise TypeError(f"Unsupported attribute type for '{name}': {type(value).__name__}")
    return args
