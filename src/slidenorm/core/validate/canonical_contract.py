"""
canonical_contract.py — Contract checks for canonical presentation output.

Contract:
  Top-level:
    slides: array, masterSlides: object keyed by each master's name, layout present

  Colors (every backgroundColor / borderColor / color field):
    hex    str  matching ^[0-9A-F]{6}$
    solid  {"kind": "solid", "color": <hex>, "alpha": int in [0, 100]}

  Visual nodes:
    kind in {text, image, shape, table, line}
    non-line nodes carry style.x/y/w/h, each a number or '<digits>%'
    line nodes carry numeric x1, y1, x2, y2
    text runs carry a str `text` and a dict `style`

Import:
    from slidenorm.core.validate.canonical_contract import run_contract_check
    errors = run_contract_check(canonical_dict)  # [] == PASS
"""
from __future__ import annotations

import re
from typing import Any

from slidenorm.core.normalize.coordinate import PERCENTAGE_RE

VALID_KINDS: frozenset[str] = frozenset({"text", "image", "shape", "table", "line"})
BOX_KEYS = ("x", "y", "w", "h")
COLOR_KEYS = ("color", "backgroundColor", "borderColor")
_HEX_RE = re.compile(r"^[0-9A-F]{6}$")

# ---------------------------------------------------------------------------
# Internal checkers
# ---------------------------------------------------------------------------


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _check_color(where: str, value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        if not _HEX_RE.match(value):
            return [f"{where}: hex color must be 6 uppercase hex chars, got {value!r}"]
        return []
    if isinstance(value, dict):
        errs: list[str] = []
        if value.get("kind") != "solid":
            errs.append(f"{where}: complex color kind must be 'solid', got {value.get('kind')!r}")
        errs.extend(_check_color(f"{where}.color", value.get("color")))
        alpha = value.get("alpha")
        if not isinstance(alpha, int) or isinstance(alpha, bool) or not 0 <= alpha <= 100:
            errs.append(f"{where}.alpha: must be an int in [0, 100], got {alpha!r}")
        return errs
    return [f"{where}: color must be a str or solid record, got {type(value).__name__}"]


def _check_position(where: str, value: Any) -> list[str]:
    if _is_number(value):
        return []
    if isinstance(value, str) and PERCENTAGE_RE.fullmatch(value):
        return []
    return [f"{where}: position must be a number or '<digits>%', got {value!r}"]


def _check_runs(where: str, runs: Any) -> list[str]:
    if not isinstance(runs, list):
        return [f"{where}: text runs must be an array"]
    errs: list[str] = []
    for i, run in enumerate(runs):
        w = f"{where}[{i}]"
        if not isinstance(run, dict):
            errs.append(f"{w}: run must be an object")
            continue
        if not isinstance(run.get("text"), str):
            errs.append(f"{w}.text: must be a str")
        style = run.get("style")
        if not isinstance(style, dict):
            errs.append(f"{w}.style: must be an object")
        else:
            errs.extend(_check_color(f"{w}.style.color", style.get("color")))
    return errs


def _check_object(where: str, obj: Any) -> list[str]:
    if not isinstance(obj, dict):
        return [f"{where}: must be an object"]
    kind = obj.get("kind")
    if kind not in VALID_KINDS:
        return [f"{where}.kind: must be one of {sorted(VALID_KINDS)}, got {kind!r}"]

    style = obj.get("style")
    if not isinstance(style, dict):
        return [f"{where}.style: must be an object"]

    errs: list[str] = []
    for k in COLOR_KEYS:
        errs.extend(_check_color(f"{where}.style.{k}", style.get(k)))

    if kind == "line":
        for k in ("x1", "y1", "x2", "y2"):
            if not _is_number(obj.get(k)):
                errs.append(f"{where}.{k}: must be a number, got {obj.get(k)!r}")
        return errs

    for k in BOX_KEYS:
        if k not in style:
            errs.append(f"{where}.style.{k}: missing")
        else:
            errs.extend(_check_position(f"{where}.style.{k}", style[k]))

    if kind == "text":
        errs.extend(_check_runs(f"{where}.text", obj.get("text")))
    elif kind == "shape" and obj.get("text") is not None:
        errs.extend(_check_runs(f"{where}.text", obj.get("text")))
    elif kind == "table":
        rows = obj.get("rows")
        if not isinstance(rows, list):
            errs.append(f"{where}.rows: must be an array")
        else:
            for r, row in enumerate(rows):
                if not isinstance(row, list):
                    errs.append(f"{where}.rows[{r}]: must be an array")
                    continue
                for c, cell in enumerate(row):
                    errs.extend(_check_object(f"{where}.rows[{r}][{c}]", cell))
    return errs


def _check_slide(where: str, slide: Any) -> list[str]:
    if not isinstance(slide, dict):
        return [f"{where}: must be an object"]
    errs = _check_color(f"{where}.backgroundColor", slide.get("backgroundColor"))
    objects = slide.get("objects")
    if not isinstance(objects, list):
        errs.append(f"{where}.objects: must be an array")
        return errs
    for i, obj in enumerate(objects):
        errs.extend(_check_object(f"{where}.objects[{i}]", obj))
    return errs


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def run_contract_check(canonical: dict[str, Any]) -> list[str]:
    """Validate a canonical presentation dict against the output contract.

    Returns:
        List of error strings. Empty list == PASS.
    """
    if not isinstance(canonical, dict):
        return ["root: must be an object"]

    errors: list[str] = []
    if canonical.get("layout") is None:
        errors.append("layout: missing")

    slides = canonical.get("slides")
    if not isinstance(slides, list):
        errors.append("slides: must be an array")
    else:
        for i, slide in enumerate(slides):
            errors.extend(_check_slide(f"slides[{i}]", slide))
            if isinstance(slide, dict) and not isinstance(slide.get("hidden"), bool):
                errors.append(f"slides[{i}].hidden: must be a bool")

    masters = canonical.get("masterSlides")
    if not isinstance(masters, dict):
        errors.append("masterSlides: must be an object")
    else:
        for name, master in masters.items():
            where = f"masterSlides[{name!r}]"
            errors.extend(_check_slide(where, master))
            if isinstance(master, dict) and master.get("name") != name:
                errors.append(f"{where}.name: must equal its key, got {master.get('name')!r}")

    return errors


__all__ = ["run_contract_check"]
