from __future__ import annotations

from typing import Any

from slidenorm.core.children import flatten_elements
from slidenorm.core.errors import MissingMasterNameError
from slidenorm.core.nodes import Node
from slidenorm.core.normalize.color import normalize_color
from slidenorm.core.normalize.visual import normalize_visual_node


def _normalize_objects(children: Any) -> list[dict[str, Any]]:
    objects = [normalize_visual_node(el) for el in flatten_elements(children)]
    return [o for o in objects if o is not None]


def _background(props: dict[str, Any]) -> dict[str, Any]:
    style = props.get("style") or {}
    bg_color = style.get("backgroundColor")
    return {
        "backgroundColor": normalize_color(bg_color) if bg_color else None,
        "backgroundImage": style.get("backgroundImage"),
    }


def normalize_slide(node: Node) -> dict[str, Any]:
    props = node.props
    slide: dict[str, Any] = {
        "masterName": props.get("masterName"),
        "hidden": bool(props.get("hidden", False)),
        **_background(props),
        "objects": _normalize_objects(props.get("children")),
    }
    if props.get("notes") is not None:
        slide["notes"] = props["notes"]
    return slide


def normalize_master_slide(node: Node) -> dict[str, Any]:
    props = node.props
    name = props.get("name")
    if not isinstance(name, str) or not name:
        raise MissingMasterNameError()
    return {
        "name": name,
        **_background(props),
        "objects": _normalize_objects(props.get("children")),
    }


__all__ = ["normalize_slide", "normalize_master_slide"]
