"""Typed node tree consumed by the normalizers.

Input trees arrive as plain JSON, one object per node:

    {"type": "slide", "props": {"hidden": true, "children": [...]}}

`build_tree` turns that into `Node` instances. Only `props.children` and the
cells of a table's `props.rows` hold nested nodes; every other prop is kept
as-is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from slidenorm.core.errors import InvalidTreeError, UnknownNodeKindError


class NodeType(str, Enum):
    PRESENTATION = "presentation"
    SLIDE = "slide"
    MASTER_SLIDE = "master-slide"
    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"
    TABLE = "table"
    TABLE_CELL = "table-cell"
    LINE = "line"
    TEXT_LINK = "text-link"
    TEXT_BULLET = "text-bullet"


VISUAL_NODE_TYPES: frozenset[NodeType] = frozenset(
    {
        NodeType.TEXT,
        NodeType.IMAGE,
        NodeType.SHAPE,
        NodeType.TABLE,
        NodeType.TABLE_CELL,
        NodeType.LINE,
    }
)


@dataclass(frozen=True)
class Node:
    type: NodeType
    props: dict[str, Any] = field(default_factory=dict)

    @property
    def children(self) -> Any:
        return self.props.get("children")

    @property
    def style(self) -> dict[str, Any] | None:
        return self.props.get("style")


def node(node_type: NodeType | str, /, **props: Any) -> Node:
    """Shorthand constructor, mostly for tests and scripted trees."""
    return Node(NodeType(node_type), props)


def is_node(value: Any, *types: NodeType) -> bool:
    if not isinstance(value, Node):
        return False
    return not types or value.type in types


def _convert_children(value: Any) -> Any:
    if isinstance(value, dict):
        return build_tree(value)
    if isinstance(value, (list, tuple)):
        return [_convert_children(v) for v in value]
    return value


def _convert_rows(rows: Any) -> Any:
    if not isinstance(rows, list):
        return rows
    out: list[Any] = []
    for row in rows:
        if not isinstance(row, list):
            raise InvalidTreeError(f"table rows must be arrays, got {type(row).__name__}")
        out.append([build_tree(c) if isinstance(c, dict) else c for c in row])
    return out


def build_tree(obj: Any) -> Node:
    """Convert a JSON node object (and its descendants) into `Node`s."""
    if isinstance(obj, Node):
        return obj
    if not isinstance(obj, dict):
        raise InvalidTreeError(f"expected a node object, got {type(obj).__name__}")
    tag = obj.get("type")
    if not isinstance(tag, str):
        raise InvalidTreeError("node object is missing its 'type' tag")
    try:
        node_type = NodeType(tag)
    except ValueError as e:
        raise UnknownNodeKindError(tag, where="node type") from e

    props = obj.get("props")
    if props is None:
        props = {}
    if not isinstance(props, dict):
        raise InvalidTreeError(f"{tag}.props must be an object")

    props = dict(props)
    if "children" in props:
        props["children"] = _convert_children(props["children"])
    if node_type is NodeType.TABLE and "rows" in props:
        props["rows"] = _convert_rows(props["rows"])
    return Node(node_type, props)


__all__ = [
    "NodeType",
    "VISUAL_NODE_TYPES",
    "Node",
    "node",
    "is_node",
    "build_tree",
]
