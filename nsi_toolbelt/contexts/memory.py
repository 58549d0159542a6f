from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from nsi_toolbelt.contexts.base import BaseContext
from nsi_toolbelt.types import Arg, ArgList, NodeType


class SceneGraphError(ValueError):
    """Raised when the scene graph rejects an operation."""


@dataclass
class Node:
    """A node in the in-memory scene graph."""

    handle: str
    type: NodeType
    attributes: dict[str, Arg] = field(default_factory=dict)


@dataclass(frozen=True)
class Connection:
    """A directed edge `from_handle.from_attr -> to_handle.to_attr`."""

    from_handle: str
    from_attr: str
    to_handle: str
    to_attr: str
    attributes: dict[str, Arg] = field(default_factory=dict, compare=False)


class MemoryContext(BaseContext):
    """Scene context that keeps the whole graph in memory.

    Useful to build rigs without a renderer, to inspect them in tests and to
    export them as plain data.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.nodes: dict[str, Node] = {}
        self.connections: list[Connection] = []

    def create(self, handle: str, node_type: NodeType, args: ArgList | None = None) -> None:
        if not handle:
            raise SceneGraphError("Cannot create a node with an empty handle.")
        node = self.nodes.get(handle)
        if node is not None and node.type != node_type:
            raise SceneGraphError(
                f"Node '{handle}' already exists with type '{node.type.value}', cannot create '{node_type.value}'."
            )
        if node is None:
            self.nodes[handle] = Node(handle=handle, type=node_type)
            if self.verbose:
                logger.debug(f"Created {node_type.value} node '{handle}'")
        if args:
            self.set_attribute(handle, args)

    def connect(
        self,
        from_handle: str,
        from_attr: str,
        to_handle: str,
        to_attr: str,
        args: ArgList | None = None,
    ) -> None:
        self._get_node(from_handle)
        self._get_node(to_handle)
        values = self._check_args(to_handle, args or [])
        connection = Connection(from_handle, from_attr, to_handle, to_attr)
        if connection in self.connections:
            # Reconnecting an edge only updates its attributes.
            connection = self.connections[self.connections.index(connection)]
        else:
            self.connections.append(connection)
        connection.attributes.update(values)
        if self.verbose:
            logger.debug(f"Connected '{from_handle}' -> '{to_handle}.{to_attr}'")

    def set_attribute(self, handle: str, args: ArgList) -> None:
        node = self._get_node(handle)
        node.attributes.update(self._check_args(handle, args))
        if self.verbose:
            logger.debug(f"Set attributes {[arg.name for arg in args]} on '{handle}'")

    # Queries
    def attributes(self, handle: str) -> dict[str, Any]:
        """Return the attribute values of a node keyed by name."""
        return {name: arg.value for name, arg in self._get_node(handle).attributes.items()}

    def children(self, handle: str, slot: str = "objects") -> list[str]:
        """Return the handles connected into `slot` of `handle`."""
        return [c.from_handle for c in self.connections if c.to_handle == handle and c.to_attr == slot]

    def connections_to(self, handle: str) -> list[Connection]:
        return [c for c in self.connections if c.to_handle == handle]

    def nodes_of_type(self, node_type: NodeType) -> list[str]:
        return [h for h, node in self.nodes.items() if node.type == node_type]

    def to_dict(self) -> dict[str, Any]:
        """Export the graph as plain data."""
        return {
            "nodes": {
                handle: {
                    "type": node.type.value,
                    "attributes": _export_args(node.attributes),
                }
                for handle, node in self.nodes.items()
            },
            "connections": [
                {
                    "from": c.from_handle,
                    "from_attr": c.from_attr,
                    "to": c.to_handle,
                    "to_attr": c.to_attr,
                    "attributes": _export_args(c.attributes),
                }
                for c in self.connections
            ],
        }

    @staticmethod
    def _check_args(handle: str, args: ArgList) -> dict[str, Arg]:
        names = [arg.name for arg in args]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise SceneGraphError(f"Duplicate attributes {duplicates} in a single call on '{handle}'.")
        return {arg.name: arg for arg in args}

    def _get_node(self, handle: str) -> Node:
        if handle not in self.nodes:
            raise SceneGraphError(f"Unknown node '{handle}'.")
        return self.nodes[handle]


def _export_args(args: dict[str, Arg]) -> dict[str, Any]:
    return {
        name: {
            "type": arg.type.value,
            "value": list(arg.value) if isinstance(arg.value, tuple) else arg.value,
        }
        for name, arg in args.items()
    }
