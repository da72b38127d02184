from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson

from slidenorm.core.children import flatten_elements
from slidenorm.core.errors import UnknownNodeKindError
from slidenorm.core.nodes import Node, NodeType, build_tree
from slidenorm.core.normalize.slide import normalize_master_slide, normalize_slide

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "16x9"
METADATA_FIELDS = ("author", "company", "revision", "subject", "title")


def load_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())


def dump_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))


def normalize_presentation(root: Node) -> dict[str, Any]:
    """Normalize a presentation tree into the canonical presentation record.

    Contract:
    - Slides keep their declaration order.
    - Master slides are keyed by name; a later master slide with the same name
      replaces the earlier one.
    - Top-level children that are neither slides nor master slides are ignored.
    """
    if not isinstance(root, Node) or root.type is not NodeType.PRESENTATION:
        tag = root.type.value if isinstance(root, Node) else type(root).__name__
        raise UnknownNodeKindError(tag, where="presentation root")

    props = root.props
    pres: dict[str, Any] = {
        "layout": props.get("layout") or DEFAULT_LAYOUT,
        "masterSlides": {},
        "slides": [],
    }
    for key in METADATA_FIELDS:
        if props.get(key) is not None:
            pres[key] = props[key]

    for child in flatten_elements(props.get("children")):
        if child.type is NodeType.SLIDE:
            pres["slides"].append(normalize_slide(child))
        elif child.type is NodeType.MASTER_SLIDE:
            master = normalize_master_slide(child)
            if master["name"] in pres["masterSlides"]:
                logger.warning("master slide %r declared more than once; keeping the last one", master["name"])
            pres["masterSlides"][master["name"]] = master
        else:
            logger.warning("ignoring %s node at presentation level", child.type.value)

    logger.debug(
        "normalized presentation: %d slides, %d master slides",
        len(pres["slides"]),
        len(pres["masterSlides"]),
    )
    return pres


def normalize_presentation_json(tree: Any) -> dict[str, Any]:
    """Build the node tree from parsed JSON and normalize it."""
    return normalize_presentation(build_tree(tree))


def normalize_presentation_from_paths(tree_path: str | Path, out_path: str | Path) -> Path:
    """Read a JSON presentation tree from `tree_path`, write the canonical JSON to `out_path`.

    Returns the written output path.
    """
    tree_path = Path(tree_path)
    if not tree_path.exists():
        raise FileNotFoundError(f"tree not found: {tree_path}")

    canonical = normalize_presentation_json(load_json(tree_path))

    out_path = Path(out_path)
    dump_json(out_path, canonical)
    return out_path


__all__ = [
    "DEFAULT_LAYOUT",
    "normalize_presentation",
    "normalize_presentation_json",
    "normalize_presentation_from_paths",
    "load_json",
    "dump_json",
]
