"""
Error hierarchy for the normalization engine.

Every error here is a contract violation on malformed input. The core raises
them and never catches them; callers (the CLI, or whatever builds the tree)
turn them into diagnostics.
"""
from __future__ import annotations

from typing import Any, Optional


class NormalizeError(Exception):
    """Base exception for all normalization errors"""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidColorError(NormalizeError, ValueError):
    """Color string rejected by the color parser"""

    def __init__(self, value: Any):
        super().__init__(f"{value!r} is not a valid color", context={"value": value})
        self.value = value


class InvalidPositionError(NormalizeError, ValueError):
    """String position not of the form '<digits>%'"""

    def __init__(self, value: Any):
        super().__init__(
            f"{value!r} is invalid position; string positions must be of format '[0-9]+%'",
            context={"value": value},
        )
        self.value = value


class InvalidTextChildError(NormalizeError, TypeError):
    """Text content that is not a string, number, list or text marker node"""

    def __init__(self, value: Any):
        super().__init__(
            "Invalid text child found; only strings, numbers, text/text-link/text-bullet "
            f"nodes and lists of them are accepted (got {type(value).__name__})",
            context={"value": value},
        )
        self.value = value


class MissingStyleError(NormalizeError, TypeError):
    """Visual node (other than a line) without a style attribute"""

    def __init__(self, node_type: str):
        super().__init__(f"A {node_type} object is missing style attribute", context={"type": node_type})
        self.node_type = node_type


class MissingMasterNameError(NormalizeError, TypeError):
    """Master slide declared without a name"""

    def __init__(self):
        super().__init__("A master-slide is missing its name attribute")


class UnknownNodeKindError(NormalizeError, TypeError):
    """Node type tag outside the set accepted at this position"""

    def __init__(self, node_type: Any, where: str = "slide object"):
        super().__init__(f"unknown {where}: {node_type!r}", context={"type": node_type})
        self.node_type = node_type


class InvalidSizingError(NormalizeError, ValueError):
    """Image sizing that is not an object with fit in contain|cover|crop"""

    def __init__(self, value: Any):
        super().__init__(
            f"{value!r} is invalid image sizing; fit must be one of contain, cover, crop",
            context={"value": value},
        )
        self.value = value


class InvalidTreeError(NormalizeError, ValueError):
    """JSON input that does not have the shape of a node tree"""


__all__ = [
    "NormalizeError",
    "InvalidColorError",
    "InvalidPositionError",
    "InvalidTextChildError",
    "MissingStyleError",
    "MissingMasterNameError",
    "UnknownNodeKindError",
    "InvalidSizingError",
    "InvalidTreeError",
]
