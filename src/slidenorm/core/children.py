from __future__ import annotations

from typing import Any

from slidenorm.core.nodes import Node


def flatten_children(children: Any) -> list[Any]:
    """Flatten nested lists of children into one ordered list.

    `None` and booleans are dropped (conditional children such as
    `cond and node` leave them behind); everything else is kept in order.
    """
    out: list[Any] = []
    if children is None or isinstance(children, bool):
        return out
    if isinstance(children, (list, tuple)):
        for c in children:
            out.extend(flatten_children(c))
        return out
    out.append(children)
    return out


def flatten_elements(children: Any) -> list[Node]:
    """Like `flatten_children`, keeping only `Node` elements."""
    return [c for c in flatten_children(children) if isinstance(c, Node)]


__all__ = ["flatten_children", "flatten_elements"]
