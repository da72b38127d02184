"""Normalization engine.

Converts a presentation node tree into the canonical representation consumed
by the presentation-file backend. Everything here is pure; nothing reads
files except the `*_from_paths` convenience wrapper.

Public API:
- `normalize_presentation(root)` / `normalize_presentation_json(tree)`
- `normalize_slide(node)`, `normalize_master_slide(node)`
- `normalize_visual_node(node)`
- `normalize_text(child)`
- `normalize_color(value)`, `normalize_hex_color(value)`
- `normalize_coordinate(value, default)`
- `merge_style_fallback(child, parent)`
"""

from __future__ import annotations

from .color import normalize_color, normalize_hex_color
from .coordinate import normalize_box, normalize_coordinate
from .presentation import (
    normalize_presentation,
    normalize_presentation_from_paths,
    normalize_presentation_json,
)
from .slide import normalize_master_slide, normalize_slide
from .style import merge_style_fallback
from .text import normalize_text
from .visual import normalize_visual_node

__all__ = [
    "normalize_color",
    "normalize_hex_color",
    "normalize_coordinate",
    "normalize_box",
    "normalize_text",
    "merge_style_fallback",
    "normalize_visual_node",
    "normalize_slide",
    "normalize_master_slide",
    "normalize_presentation",
    "normalize_presentation_json",
    "normalize_presentation_from_paths",
]
