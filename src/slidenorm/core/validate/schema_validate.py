from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from slidenorm.core.normalize.presentation import load_json

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"
PRESENTATION_SCHEMA = SCHEMA_DIR / "presentation.schema.json"


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> Draft202012Validator:
    return Draft202012Validator(load_json(schema_path))


def _json_path(path: Any) -> str:
    out = "$"
    for p in path:
        out += f"[{p!r}]" if isinstance(p, str) else f"[{p}]"
    return out


def validate_tree(instance: Any, schema_path: Path = PRESENTATION_SCHEMA) -> list[str]:
    """Validate a parsed presentation tree against the bundled schema.

    Returns "- <jsonpath>: <message>" strings sorted by path; [] == valid.
    """
    errors = sorted(_validator(schema_path).iter_errors(instance), key=lambda e: list(e.path))
    return [f"- {_json_path(e.path)}: {e.message}" for e in errors]


__all__ = ["PRESENTATION_SCHEMA", "validate_tree"]
