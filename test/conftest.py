"""
Shared pytest fixtures: sample presentation trees in their JSON form.
"""

import copy
from pathlib import Path

import orjson
import pytest

SAMPLE_TREE = {
    "type": "presentation",
    "props": {
        "title": "Quarterly review",
        "author": "Ops",
        "layout": "4x3",
        "children": [
            {
                "type": "master-slide",
                "props": {
                    "name": "base",
                    "style": {"backgroundColor": "#ffffff"},
                    "children": [
                        {
                            "type": "text",
                            "props": {"style": {"x": 0.5, "y": 0.2, "w": "90%", "h": 1}, "children": "Header"},
                        }
                    ],
                },
            },
            {
                "type": "slide",
                "props": {
                    "masterName": "base",
                    "notes": "remember the numbers",
                    "style": {"backgroundColor": "rgba(0, 0, 0, 0.5)"},
                    "children": [
                        {
                            "type": "text",
                            "props": {
                                "style": {"x": 1, "y": 1, "w": 8, "h": 3, "color": "navy"},
                                "children": [
                                    {
                                        "type": "text-bullet",
                                        "props": {
                                            "children": [
                                                "First ",
                                                {
                                                    "type": "text-link",
                                                    "props": {"url": "https://example.com", "children": "link"},
                                                },
                                            ]
                                        },
                                    },
                                    {"type": "text-bullet", "props": {"indent": 20, "children": "Second"}},
                                ],
                            },
                        },
                        {
                            "type": "image",
                            "props": {
                                "src": "logo.png",
                                "style": {"x": "80%", "y": "5%", "w": 1, "h": 1, "sizing": {"fit": "contain"}},
                            },
                        },
                        {
                            "type": "shape",
                            "props": {
                                "type": "rect",
                                "style": {"x": 0, "y": "90%", "w": "100%", "h": "10%", "backgroundColor": "teal"},
                            },
                        },
                        {
                            "type": "line",
                            "props": {"x1": 0, "y1": 5, "x2": 10, "y2": 5, "style": {"color": "gray", "width": 2}},
                        },
                        {
                            "type": "table",
                            "props": {
                                "style": {"x": 1, "y": 4, "w": 8, "h": 2, "borderColor": "#333", "borderWidth": 1},
                                "rows": [
                                    ["Name", "Value"],
                                    [
                                        {
                                            "type": "table-cell",
                                            "props": {"style": {"bold": True}, "colSpan": 2, "children": "Total"},
                                        }
                                    ],
                                ],
                            },
                        },
                    ],
                },
            },
        ],
    },
}


@pytest.fixture
def sample_tree() -> dict:
    return copy.deepcopy(SAMPLE_TREE)


@pytest.fixture
def sample_tree_path(tmp_path: Path, sample_tree: dict) -> Path:
    path = tmp_path / "tree.json"
    path.write_bytes(orjson.dumps(sample_tree))
    return path
