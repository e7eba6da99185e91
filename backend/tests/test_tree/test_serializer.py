"""Tests for the output snapshot."""

from flexsight.engine.enums import Role, SizeSpec
from flexsight.engine.tokens import StyleToken
from flexsight.tree.serializer import tree_to_dict
from tests.conftest import make_node


def test_snapshot_fields():
    child = make_node(10, 10, 20, 20, 1, width_spec=SizeSpec.FIXED, height_spec=SizeSpec.FIXED)
    child.class_list.append(StyleToken("m", "l", 10))
    root = make_node(0, 0, 100, 50, 0, roles={Role.PAGE, Role.LIST_X, Role.BTN}, children=[child])

    data = tree_to_dict(root)

    assert data["roles"] == ["btn", "list-x", "page"]
    assert data["bounds"] == {"left": 0, "top": 0, "right": 100, "bottom": 50, "width": 100, "height": 50}
    assert data["width_spec"] == ""
    kid = data["children"][0]
    assert kid["width_spec"] == "Fixed"
    assert kid["class_names"] == ["ml-10"]
    assert kid["class_list"] == [{"property": "m", "axis": "l", "value": 10.0}]


def test_text_runs_are_serialized():
    root = make_node(0, 0, 100, 20, text=[make_node(0, 0, 50, 20, 1, text="Hi")])
    data = tree_to_dict(root)
    assert data["text"][0]["text"] == "Hi"
