"""Visual node dispatch.

Each visual node kind has one handler in `_HANDLERS`; the table is the closed
set of kinds a slide may contain. Every kind except `line` is positioned by a
box (x, y, w, h) resolved through `normalize_box`.
"""
from __future__ import annotations

from typing import Any, Callable

from slidenorm.core.errors import InvalidSizingError, MissingStyleError, UnknownNodeKindError
from slidenorm.core.nodes import Node, NodeType
from slidenorm.core.normalize.color import normalize_color, normalize_hex_color
from slidenorm.core.normalize.coordinate import normalize_box
from slidenorm.core.normalize.style import DEFAULT_FONT_FACE, DEFAULT_FONT_SIZE
from slidenorm.core.normalize.text import normalize_text

_SIZING_KEYS = ("fit", "imageWidth", "imageHeight")
_SIZING_FITS = frozenset({"contain", "cover", "crop"})


def _hex_or_none(value: Any) -> str | None:
    return normalize_hex_color(value) if value else None


def _color_or_none(value: Any) -> str | dict[str, Any] | None:
    return normalize_color(value) if value else None


def _default(value: Any, default: Any) -> Any:
    return default if value is None else value


def _normalize_image_src(src: Any) -> Any:
    if isinstance(src, str):
        return {"kind": "path", "path": src}
    return src


def _normalize_sizing(sizing: Any) -> dict[str, Any] | None:
    if sizing is None:
        return None
    if not isinstance(sizing, dict) or sizing.get("fit") not in _SIZING_FITS:
        raise InvalidSizingError(sizing)
    return {k: sizing[k] for k in _SIZING_KEYS if sizing.get(k) is not None}


def _text_body(node: Node, box: dict[str, Any]) -> dict[str, Any]:
    style = node.props["style"]
    children = node.props.get("children")
    return {
        "kind": "text",
        "text": normalize_text(children) if children is not None else [],
        "style": {
            **style,
            **box,
            "color": _hex_or_none(style.get("color")),
            "fontFace": _default(style.get("fontFace"), DEFAULT_FONT_FACE),
            "fontSize": _default(style.get("fontSize"), DEFAULT_FONT_SIZE),
        },
    }


def _normalize_text_node(node: Node, box: dict[str, Any]) -> dict[str, Any]:
    return _text_body(node, box)


def _normalize_table_cell(node: Node, box: dict[str, Any]) -> dict[str, Any]:
    out = _text_body(node, box)
    for key in ("colSpan", "rowSpan"):
        if node.props.get(key) is not None:
            out[key] = node.props[key]
    return out


def _normalize_image(node: Node, box: dict[str, Any]) -> dict[str, Any]:
    style = node.props["style"]
    return {
        "kind": "image",
        "src": _normalize_image_src(node.props.get("src")),
        "style": {**box, "sizing": _normalize_sizing(style.get("sizing"))},
    }


def _normalize_shape(node: Node, box: dict[str, Any]) -> dict[str, Any]:
    style = node.props["style"]
    children = node.props.get("children")
    return {
        "kind": "shape",
        "type": node.props.get("type"),
        # None (no text region) is distinct from [] (empty text region)
        "text": normalize_text(children) if children is not None else None,
        "style": {
            **box,
            "backgroundColor": _color_or_none(style.get("backgroundColor")),
            "borderColor": _hex_or_none(style.get("borderColor")),
            "borderWidth": style.get("borderWidth"),
        },
    }


def _string_cell(text: str) -> dict[str, Any]:
    return {
        "kind": "text",
        "text": [{"text": text, "style": {}}],
        "style": {"x": 0, "y": 0, "w": 0, "h": 0, "color": None},
    }


def _normalize_table(node: Node, box: dict[str, Any]) -> dict[str, Any]:
    style = node.props["style"]
    rows: list[list[dict[str, Any]]] = []
    for row in node.props.get("rows") or []:
        cells: list[dict[str, Any]] = []
        for cell in row:
            if isinstance(cell, str):
                cells.append(_string_cell(cell))
            else:
                cells.append(normalize_visual_node(cell))
        rows.append(cells)
    return {
        "kind": "table",
        "rows": rows,
        "style": {
            **box,
            "borderColor": _hex_or_none(style.get("borderColor")),
            "borderWidth": style.get("borderWidth"),
            "margin": style.get("margin"),
        },
    }


def _normalize_line(node: Node) -> dict[str, Any]:
    props = node.props
    style = props.get("style") or {}
    return {
        "kind": "line",
        "x1": props.get("x1"),
        "y1": props.get("y1"),
        "x2": props.get("x2"),
        "y2": props.get("y2"),
        "style": {
            "color": _hex_or_none(style.get("color")),
            "width": style.get("width"),
        },
    }


_HANDLERS: dict[NodeType, Callable[[Node, dict[str, Any]], dict[str, Any]]] = {
    NodeType.TEXT: _normalize_text_node,
    NodeType.TABLE_CELL: _normalize_table_cell,
    NodeType.IMAGE: _normalize_image,
    NodeType.SHAPE: _normalize_shape,
    NodeType.TABLE: _normalize_table,
}


def normalize_visual_node(node: Any) -> dict[str, Any] | None:
    """Normalize one slide object (text, image, shape, table, table-cell, line)."""
    if not isinstance(node, Node):
        raise UnknownNodeKindError(type(node).__name__)
    if node.type is NodeType.LINE:
        return _normalize_line(node)

    handler = _HANDLERS.get(node.type)
    if handler is None:
        raise UnknownNodeKindError(node.type.value)
    style = node.props.get("style")
    if style is None:
        raise MissingStyleError(node.type.value)
    return handler(node, normalize_box(style))


__all__ = ["normalize_visual_node"]
