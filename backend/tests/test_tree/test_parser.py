"""Tests for design-tree parsing."""

import pytest
from pydantic import ValidationError

from flexsight.engine.config import LayoutConfig
from flexsight.engine.enums import Role, SizeSpec
from flexsight.models.layout import NodeInput
from flexsight.tree.parser import parse_tree
from tests.conftest import box


def test_indexes_follow_document_order():
    tree = box(
        0, 0, 100, 100,
        children=[box(0, 0, 50, 50, children=[box(0, 0, 10, 10)]), box(50, 0, 50, 50)],
        attachNodes=[box(90, 90, 20, 20)],
    )
    ctx = parse_tree(tree)
    root = ctx.root
    assert root.index == 0
    assert root.children[0].index == 1
    assert root.children[0].children[0].index == 2
    assert root.children[1].index == 3
    assert root.attach_nodes[0].index == 4
    assert ctx.counter.peek == 5


def test_right_bottom_bounds():
    ctx = parse_tree({"left": 10, "top": 20, "right": 110, "bottom": 70})
    b = ctx.root.bounds
    assert (b.width, b.height) == (100, 50)


def test_camel_and_snake_case_keys():
    ctx = parse_tree(box(0, 0, 10, 10, widthSpec="Auto", height_spec="Constrained", roles=["btn"], tagName="button"))
    root = ctx.root
    assert root.width_spec == SizeSpec.AUTO
    assert root.height_spec == SizeSpec.CONSTRAINED
    assert root.roles == {Role.BTN}
    assert root.tag_name == "button"


def test_text_runs_become_nodes():
    tree = box(0, 0, 100, 20, text=[box(0, 0, 50, 20, text="Hello"), box(50, 0, 50, 20, text="world")])
    root = parse_tree(tree).root
    assert [run.text for run in root.text] == ["Hello", "world"]


def test_config_is_attached():
    config = LayoutConfig(tolerance=3)
    assert parse_tree(box(0, 0, 10, 10), config).config is config


def test_missing_extent_is_rejected():
    with pytest.raises(ValidationError):
        NodeInput.model_validate({"left": 0, "top": 0, "height": 10})


def test_negative_size_is_rejected():
    with pytest.raises(ValidationError):
        NodeInput.model_validate(box(0, 0, -5, 10))


def test_inconsistent_bounds_are_rejected():
    with pytest.raises(ValidationError):
        NodeInput.model_validate({"left": 0, "top": 0, "width": 10, "right": 20, "height": 10})


def test_unknown_role_is_rejected():
    with pytest.raises(ValidationError):
        NodeInput.model_validate(box(0, 0, 10, 10, roles=["carousel"]))
