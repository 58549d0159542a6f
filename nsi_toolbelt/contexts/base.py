import uuid
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from nsi_toolbelt.types import ArgList, NodeType, double_matrix
from nsi_toolbelt.utils.helper import generate_or_use_handle


########################### Base Context ##########################
class BaseContext(ABC):
    """Base class for a scene context.

    A context is the stateful handle through which nodes are created,
    connected and given attributes. Subclasses implement the primitives;
    the composite helpers (`node`, `append`, `rotation`) are built on top of them.
    """

    def generate_handle(self, prefix: str | None = None) -> str:
        """Generate a fresh, unique handle, namespaced by ``prefix``."""
        token = uuid.uuid4().hex
        return f"{prefix}_{token}" if prefix else token

    # Composite helpers
    def node(self, handle: str | None, node_type: NodeType, args: ArgList | None = None) -> str:
        """Create a node and return its handle.

        If `handle` is None a handle is generated, namespaced by the node type.
        """
        handle = generate_or_use_handle(self, handle, node_type.value)
        self.create(handle, node_type, args)
        return handle

    def append(self, to: str, slot: str | None, handle: str) -> tuple[str, str]:
        """Connect `handle` into the `slot` of `to` (``objects`` if None).

        Returns:
            The pair (to, handle) so calls can be nested.
        """
        self.connect(handle, "", to, slot or "objects")
        return to, handle

    def rotation(self, handle: str | None, angle: float, axis: Sequence[float]) -> str:
        """Create a transform rotating its children by `angle` radians about `axis`."""
        handle = generate_or_use_handle(self, handle, "rotation")
        self.create(handle, NodeType.TRANSFORM)
        self.set_attribute(handle, [double_matrix("transformationmatrix", rotation_matrix(angle, axis))])
        return handle

    # Abstract Methods
    @abstractmethod
    def create(self, handle: str, node_type: NodeType, args: ArgList | None = None) -> None:
        """Create a node of `node_type` named `handle`."""
        raise NotImplementedError

    @abstractmethod
    def connect(
        self,
        from_handle: str,
        from_attr: str,
        to_handle: str,
        to_attr: str,
        args: ArgList | None = None,
    ) -> None:
        """Connect `from_handle.from_attr` to `to_handle.to_attr`."""
        raise NotImplementedError

    @abstractmethod
    def set_attribute(self, handle: str, args: ArgList) -> None:
        """Set attributes on an existing node. Later calls override earlier ones."""
        raise NotImplementedError


def rotation_matrix(angle: float, axis: Sequence[float]) -> np.ndarray:
    """4x4 rotation of `angle` radians about `axis`, in row-vector convention."""
    axis = np.asarray(axis, dtype=np.float64)
    norm = np.linalg.norm(axis)
    assert norm > 0.0, "Rotation axis must be non-zero."
    rot = Rotation.from_rotvec(axis / norm * angle).as_matrix()
    matrix = np.eye(4, dtype=np.float64)
    # Points are row vectors (p' = p @ M), so the rotation is transposed.
    matrix[:3, :3] = rot.T
    return matrix
