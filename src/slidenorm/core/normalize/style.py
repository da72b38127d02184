from __future__ import annotations

from typing import Any, Mapping

DEFAULT_FONT_FACE = "Arial"
DEFAULT_FONT_SIZE = 18


def merge_style_fallback(child: Mapping[str, Any] | None, parent: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shallow-merge two partial styles; `child` fields win, `parent` fills gaps.

    A child field set to None counts as unset and does not mask the parent.
    """
    out: dict[str, Any] = dict(parent or {})
    for k, v in (child or {}).items():
        if v is not None:
            out[k] = v
    return out


__all__ = ["DEFAULT_FONT_FACE", "DEFAULT_FONT_SIZE", "merge_style_fallback"]
