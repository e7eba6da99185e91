"""Tests for structured style tokens."""

from flexsight.engine.tokens import (
    StyleToken,
    add_keyword,
    add_size,
    add_spacing,
    class_names,
    has_keyword,
)
from tests.conftest import make_node


def test_token_spelling():
    assert str(StyleToken("m", "t", 10)) == "mt-10"
    assert str(StyleToken("p", "x", 4.5)) == "px-4.5"
    assert str(StyleToken("space", "x", 10)) == "space-x-10"
    assert str(StyleToken("w", None, 100)) == "w-100"
    assert str(StyleToken("left", None, -4)) == "left--4"
    assert str(StyleToken("items-center")) == "items-center"


def test_keyword_has_no_value():
    token = StyleToken("flex")
    assert token.is_keyword
    assert token.to_dict() == {"property": "flex", "axis": None, "value": None}


def test_zero_spacing_is_dropped():
    node = make_node(0, 0, 10, 10)
    add_spacing(node, "m", "t", 0)
    add_spacing(node, "p", "x", 0.001)
    add_spacing(node, "space", "y", 0)
    assert node.class_list == []


def test_zero_size_and_offset_are_kept():
    node = make_node(0, 0, 10, 10)
    add_size(node, "h", 0)
    add_size(node, "left", 0)
    assert class_names(node) == ["h-0", "left-0"]


def test_has_keyword():
    node = make_node(0, 0, 10, 10)
    add_keyword(node, "relative")
    add_spacing(node, "m", "l", 5)
    assert has_keyword(node, "absolute", "relative")
    assert not has_keyword(node, "m")
