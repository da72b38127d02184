"""slidenorm — normalize declarative presentation trees into canonical form.

    from slidenorm import build_tree, normalize_presentation
    canonical = normalize_presentation(build_tree(tree_json))
"""
from __future__ import annotations

from slidenorm.core.errors import (
    InvalidColorError,
    InvalidPositionError,
    InvalidSizingError,
    InvalidTextChildError,
    InvalidTreeError,
    MissingMasterNameError,
    MissingStyleError,
    NormalizeError,
    UnknownNodeKindError,
)
from slidenorm.core.nodes import Node, NodeType, build_tree, node
from slidenorm.core.normalize import (
    normalize_color,
    normalize_coordinate,
    normalize_hex_color,
    normalize_master_slide,
    normalize_presentation,
    normalize_presentation_json,
    normalize_slide,
    normalize_text,
    normalize_visual_node,
)

__version__ = "0.1.0"

__all__ = [
    "Node",
    "NodeType",
    "build_tree",
    "node",
    "normalize_color",
    "normalize_hex_color",
    "normalize_coordinate",
    "normalize_text",
    "normalize_visual_node",
    "normalize_slide",
    "normalize_master_slide",
    "normalize_presentation",
    "normalize_presentation_json",
    "NormalizeError",
    "InvalidColorError",
    "InvalidPositionError",
    "InvalidTextChildError",
    "InvalidSizingError",
    "MissingStyleError",
    "MissingMasterNameError",
    "UnknownNodeKindError",
    "InvalidTreeError",
]
