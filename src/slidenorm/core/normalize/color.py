"""Color canonicalization.

Canonical colors are what the presentation backend ingests:

- a 6-character uppercase hex string without the leading '#', or
- {"kind": "solid", "color": <hex>, "alpha": <0..100>} when the color is not
  fully opaque. `alpha` is transparency (0 = opaque, 100 = invisible), the
  inverse of the CSS opacity the input uses.
"""
from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic_core import PydanticCustomError
from pydantic_extra_types.color import Color

from slidenorm.core.errors import InvalidColorError


def _parse(value: Any) -> Color:
    try:
        return Color(value)
    except PydanticCustomError as e:
        raise InvalidColorError(value) from e


def _hex(clr: Color) -> str:
    r, g, b = clr.as_rgb_tuple(alpha=False)
    return f"{r:02X}{g:02X}{b:02X}"


def _transparency_percent(alpha01: float) -> int:
    # half-up, so 0.125 opacity gives 87 rather than banker's 88
    return 100 - int(math.floor(alpha01 * 100 + 0.5))


def _normalize_solid_record(rec: Mapping[str, Any]) -> str | dict[str, Any]:
    hex_color = normalize_hex_color(rec.get("color"))
    alpha = rec.get("alpha")
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float)) or not 0 <= alpha <= 100:
        raise InvalidColorError(dict(rec))
    alpha = int(math.floor(alpha + 0.5))
    if alpha == 0:
        return hex_color
    return {"kind": "solid", "color": hex_color, "alpha": alpha}


def normalize_hex_color(value: Any) -> str:
    """Return the opaque 'RRGGBB' form of `value`; any alpha is dropped."""
    return _hex(_parse(value))


def normalize_color(value: Any) -> str | dict[str, Any]:
    """Return 'RRGGBB' for opaque colors, a solid-fill record otherwise.

    Accepts anything the color parser understands (names, hex with or
    without '#', rgb()/rgba(), hsl()/hsla(), 'transparent') and also an
    already-canonical solid record, which is re-checked and returned in
    canonical form.
    """
    if isinstance(value, Mapping):
        if value.get("kind") != "solid":
            raise InvalidColorError(dict(value))
        return _normalize_solid_record(value)

    clr = _parse(value)
    hex_color = _hex(clr)
    r, g, b, alpha01 = clr.as_rgb_tuple(alpha=True)
    if alpha01 == 1:
        return hex_color
    return {
        "kind": "solid",
        "color": hex_color,
        "alpha": _transparency_percent(alpha01),
    }


__all__ = ["normalize_color", "normalize_hex_color"]
