import pytest

from slidenorm.core.errors import InvalidPositionError, InvalidSizingError, MissingStyleError, UnknownNodeKindError
from slidenorm.core.nodes import NodeType, node
from slidenorm.core.normalize.visual import normalize_visual_node


@pytest.mark.parametrize(
    "node_type",
    [NodeType.TEXT, NodeType.IMAGE, NodeType.SHAPE, NodeType.TABLE, NodeType.TABLE_CELL],
)
def test_missing_style_raises_with_type_name(node_type):
    with pytest.raises(MissingStyleError) as exc:
        normalize_visual_node(node(node_type))
    assert exc.value.node_type == node_type.value
    assert node_type.value in str(exc.value)


def test_empty_style_is_not_missing():
    out = normalize_visual_node(node(NodeType.IMAGE, src="a.png", style={}))
    assert out["style"] == {"x": 0, "y": 0, "w": 1, "h": 1, "sizing": None}


def test_text_defaults():
    out = normalize_visual_node(node(NodeType.TEXT, style={}, children="hi"))
    assert out == {
        "kind": "text",
        "text": [{"text": "hi", "style": {}}],
        "style": {"x": 0, "y": 0, "w": 1, "h": 1, "color": None, "fontFace": "Arial", "fontSize": 18},
    }


def test_text_without_children_has_no_runs():
    assert normalize_visual_node(node(NodeType.TEXT, style={}))["text"] == []


def test_text_style_is_merged_with_box_and_color():
    out = normalize_visual_node(
        node(
            NodeType.TEXT,
            style={"x": "10%", "y": 1, "color": "#00ff00", "bold": True, "fontSize": 24, "align": "center"},
            children=["a", "b"],
        )
    )
    assert out["style"] == {
        "x": "10%",
        "y": 1,
        "w": 1,
        "h": 1,
        "color": "00FF00",
        "bold": True,
        "fontSize": 24,
        "fontFace": "Arial",
        "align": "center",
    }


def test_invalid_box_position_raises():
    with pytest.raises(InvalidPositionError):
        normalize_visual_node(node(NodeType.TEXT, style={"w": "12px"}))


def test_table_cell_carries_spans():
    out = normalize_visual_node(node(NodeType.TABLE_CELL, style={}, children="c", colSpan=2, rowSpan=3))
    assert out["kind"] == "text"
    assert out["colSpan"] == 2
    assert out["rowSpan"] == 3
    assert out["text"] == [{"text": "c", "style": {}}]


def test_table_cell_without_spans_omits_them():
    out = normalize_visual_node(node(NodeType.TABLE_CELL, style={}, children="c"))
    assert "colSpan" not in out and "rowSpan" not in out


def test_image_path_source_and_sizing():
    out = normalize_visual_node(
        node(
            NodeType.IMAGE,
            src="img/logo.png",
            style={"x": 1, "y": 2, "w": 3, "h": 4, "sizing": {"fit": "cover", "imageWidth": 640, "imageHeight": 480}},
        )
    )
    assert out == {
        "kind": "image",
        "src": {"kind": "path", "path": "img/logo.png"},
        "style": {
            "x": 1,
            "y": 2,
            "w": 3,
            "h": 4,
            "sizing": {"fit": "cover", "imageWidth": 640, "imageHeight": 480},
        },
    }


def test_image_structured_source_passes_through():
    src = {"kind": "data", "data": "image/png;base64,iVBORw0KGgo="}
    out = normalize_visual_node(node(NodeType.IMAGE, src=src, style={"sizing": {"fit": "crop"}}))
    assert out["src"] == src
    assert out["style"]["sizing"] == {"fit": "crop"}


@pytest.mark.parametrize("sizing", [{"fit": "stretch"}, {"imageWidth": 100}, "contain", ["cover"]])
def test_invalid_image_sizing_raises(sizing):
    with pytest.raises(InvalidSizingError):
        normalize_visual_node(node(NodeType.IMAGE, src="a.png", style={"sizing": sizing}))


def test_shape_without_children_has_no_text_region():
    out = normalize_visual_node(node(NodeType.SHAPE, type="ellipse", style={}))
    assert out == {
        "kind": "shape",
        "type": "ellipse",
        "text": None,
        "style": {"x": 0, "y": 0, "w": 1, "h": 1, "backgroundColor": None, "borderColor": None, "borderWidth": None},
    }


def test_shape_with_empty_children_has_empty_text_region():
    out = normalize_visual_node(node(NodeType.SHAPE, type="rect", style={}, children=[]))
    assert out["text"] == []


def test_shape_colors():
    out = normalize_visual_node(
        node(
            NodeType.SHAPE,
            type="rect",
            style={"backgroundColor": "rgba(255, 0, 0, 0.5)", "borderColor": "rgba(0, 0, 255, 0.5)", "borderWidth": 2},
            children="label",
        )
    )
    assert out["style"]["backgroundColor"] == {"kind": "solid", "color": "FF0000", "alpha": 50}
    assert out["style"]["borderColor"] == "0000FF"
    assert out["style"]["borderWidth"] == 2
    assert out["text"] == [{"text": "label", "style": {}}]


def test_table_rows_and_cells_keep_order():
    out = normalize_visual_node(
        node(
            NodeType.TABLE,
            style={"x": 1, "borderColor": "black", "borderWidth": 1, "margin": 0.1},
            rows=[
                ["a", "b"],
                [node(NodeType.TABLE_CELL, style={"color": "red"}, children="c", colSpan=2)],
            ],
        )
    )
    assert out["kind"] == "table"
    assert out["style"] == {"x": 1, "y": 0, "w": 1, "h": 1, "borderColor": "000000", "borderWidth": 1, "margin": 0.1}
    assert [len(r) for r in out["rows"]] == [2, 1]
    assert [c["text"][0]["text"] for c in out["rows"][0]] == ["a", "b"]
    cell = out["rows"][1][0]
    assert cell["style"]["color"] == "FF0000"
    assert cell["colSpan"] == 2


def test_string_table_cell_shorthand():
    out = normalize_visual_node(node(NodeType.TABLE, style={}, rows=[["plain"]]))
    assert out["rows"] == [
        [
            {
                "kind": "text",
                "text": [{"text": "plain", "style": {}}],
                "style": {"x": 0, "y": 0, "w": 0, "h": 0, "color": None},
            }
        ]
    ]


def test_table_cell_missing_style_raises():
    with pytest.raises(MissingStyleError):
        normalize_visual_node(node(NodeType.TABLE, style={}, rows=[[node(NodeType.TABLE_CELL, children="x")]]))


def test_line_uses_raw_endpoints():
    out = normalize_visual_node(node(NodeType.LINE, x1=0, y1=1.5, x2=10, y2=1.5, style={"color": "gray", "width": 3}))
    assert out == {
        "kind": "line",
        "x1": 0,
        "y1": 1.5,
        "x2": 10,
        "y2": 1.5,
        "style": {"color": "808080", "width": 3},
    }


def test_line_without_style():
    out = normalize_visual_node(node(NodeType.LINE, x1=0, y1=0, x2=1, y2=1))
    assert out["style"] == {"color": None, "width": None}


@pytest.mark.parametrize(
    "value",
    [node(NodeType.SLIDE), node(NodeType.TEXT_LINK, children="x", style={}), "bare text", 42],
)
def test_unknown_kinds_raise(value):
    with pytest.raises(UnknownNodeKindError):
        normalize_visual_node(value)
