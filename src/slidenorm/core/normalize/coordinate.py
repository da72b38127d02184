from __future__ import annotations

import re
from typing import Any

from slidenorm.core.errors import InvalidPositionError

PERCENTAGE_RE = re.compile(r"^[0-9]+%$")

# Box defaults: origin, and w/h of 1 ("natural size" for the backend).
BOX_DEFAULTS: dict[str, int] = {"x": 0, "y": 0, "w": 1, "h": 1}


def normalize_coordinate(value: Any, default: int | float) -> int | float | str:
    """Return `value` as a canonical position, or `default` when it is absent.

    Numbers pass through untouched and strings must be '<digits>%'. Percentages
    are resolved against the slide size by the backend, never here.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        raise InvalidPositionError(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and PERCENTAGE_RE.fullmatch(value):
        return value
    raise InvalidPositionError(value)


def normalize_box(style: dict[str, Any]) -> dict[str, int | float | str]:
    return {k: normalize_coordinate(style.get(k), d) for k, d in BOX_DEFAULTS.items()}


__all__ = ["PERCENTAGE_RE", "BOX_DEFAULTS", "normalize_coordinate", "normalize_box"]
