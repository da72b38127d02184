"""Rich text flattening.

`normalize_text` turns text content (strings, numbers, lists, text spans, text-link
and text-bullet nodes, nested arbitrarily) into one flat list of text runs in
reading order:

    {"text": "Hello", "style": {"bold": True},
     "link": {"url": "https://..."}, "bullet": True, "breakLine": False}

Run styles are partial. Fields a run leaves unset are inherited from the
enclosing text box by the backend; the only eager merge happens inside a
bullet, where the bullet's style fills the gaps of each run it wraps.
"""
from __future__ import annotations

from typing import Any

from slidenorm.core.errors import InvalidTextChildError
from slidenorm.core.nodes import Node, NodeType
from slidenorm.core.normalize.color import normalize_hex_color
from slidenorm.core.normalize.style import merge_style_fallback

# Bullet props that are not bullet options.
_BULLET_PASSTHROUGH_PROPS = frozenset({"children", "style", "rtlMode", "lang"})


def _stringify(value: int | float | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_scalar_text(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _run_style(style: dict[str, Any] | None) -> dict[str, Any]:
    """Copy a marker's style with its color canonicalized; unset keys stay out."""
    out = {k: v for k, v in (style or {}).items() if v is not None}
    if out.get("color"):
        out["color"] = normalize_hex_color(out["color"])
    else:
        out.pop("color", None)
    return out


def _link_target(props: dict[str, Any]) -> dict[str, Any] | None:
    # "slide" is accepted as an alias of "slideIndex"
    slide_index = props.get("slideIndex", props.get("slide"))
    if props.get("url") is not None:
        link: dict[str, Any] = {"url": props["url"]}
    elif slide_index is not None:
        link = {"slideIndex": slide_index}
    else:
        return None
    if props.get("tooltip") is not None:
        link["tooltip"] = props["tooltip"]
    return link


def _set_direction(run: dict[str, Any], props: dict[str, Any]) -> None:
    for key in ("rtlMode", "lang"):
        if props.get(key) is not None and run.get(key) is None:
            run[key] = props[key]


def _normalize_span(el: Node) -> dict[str, Any]:
    """One run for a text or text-link node; only links carry a `link` target."""
    props = el.props
    content = props.get("children")
    if not _is_scalar_text(content):
        raise InvalidTextChildError(content)

    run: dict[str, Any] = {"text": _stringify(content), "style": _run_style(props.get("style"))}
    if el.type is NodeType.TEXT_LINK:
        link = _link_target(props)
        if link is not None:
            run["link"] = link
    _set_direction(run, props)
    return run


def _bullet_marker(props: dict[str, Any]) -> bool | dict[str, Any]:
    options = {k: v for k, v in props.items() if k not in _BULLET_PASSTHROUGH_PROPS}
    return options or True


def _normalize_bullet(el: Node) -> list[dict[str, Any]]:
    props = el.props
    nested = normalize_text(props.get("children"))
    marker = _bullet_marker(props)
    bullet_style = _run_style(props.get("style"))

    runs: list[dict[str, Any]] = []
    last = len(nested) - 1
    for i, part in enumerate(nested):
        run = dict(part)
        run["style"] = merge_style_fallback(part.get("style"), bullet_style)
        if i == 0 and run.get("bullet") is None:
            run["bullet"] = marker
        # one paragraph per bullet: only its last run ends the line
        run["breakLine"] = i == last
        _set_direction(run, props)
        runs.append(run)
    return runs


def normalize_text(child: Any) -> list[dict[str, Any]]:
    """Flatten text content into an ordered list of text runs."""
    if isinstance(child, Node):
        if child.type is NodeType.TEXT_BULLET:
            return _normalize_bullet(child)
        if child.type in (NodeType.TEXT, NodeType.TEXT_LINK):
            return [_normalize_span(child)]
        raise InvalidTextChildError(child)

    if isinstance(child, (list, tuple)):
        runs: list[dict[str, Any]] = []
        for c in child:
            runs.extend(normalize_text(c))
        return runs

    if _is_scalar_text(child):
        return [{"text": _stringify(child), "style": {}}]

    raise InvalidTextChildError(child)


__all__ = ["normalize_text"]
