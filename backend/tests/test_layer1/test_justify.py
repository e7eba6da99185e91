"""Tests for main-axis justification."""

from flexsight.engine.enums import Role, SizeSpec
from flexsight.engine.tokens import class_names
from flexsight.layout.justify import build_flex_justify, build_flex_wrap
from tests.conftest import fixed, make_ctx, make_node, row


def test_equal_gaps_in_auto_row_use_space_utility():
    tiles = [fixed(x, 0, 100, 50, i + 1) for i, x in enumerate([0, 110, 220])]
    parent = row((-10, 0, 340, 50), tiles, width=SizeSpec.AUTO)

    assert build_flex_justify(make_ctx(parent), parent) == "center"
    assert class_names(parent) == ["px-10", "space-x-10"]
    assert parent.children == tiles


def test_dominant_gap_gets_a_spacer():
    left = fixed(0, 0, 100, 50, 1)
    right = fixed(250, 0, 100, 50, 2)
    parent = row((0, 0, 400, 50), [left, right], width=SizeSpec.CONSTRAINED)

    assert build_flex_justify(make_ctx(parent), parent) == "spacer"
    assert class_names(parent) == []
    assert len(parent.children) == 3
    spacer = parent.children[1]
    assert spacer.width_spec == SizeSpec.CONSTRAINED
    assert spacer.height_spec == SizeSpec.AUTO
    assert spacer.bounds.left == 100 and spacer.bounds.right == 250
    assert spacer.bounds.height == 0
    assert class_names(left) == []
    assert class_names(right) == ["mr-50"]


def test_spacer_takes_last_of_tied_gaps_when_content_hugs_start():
    items = [fixed(x, 0, 50, 50, i + 1) for i, x in enumerate([0, 150, 300, 370])]
    parent = row((0, 0, 500, 50), list(items))

    build_flex_justify(make_ctx(parent), parent)

    assert parent.children[2].attributes == {"is": "flex1"}
    assert [class_names(c) for c in items] == [[], ["ml-100"], [], ["ml-20", "mr-80"]]


def test_spacer_takes_first_of_tied_gaps_when_content_hugs_end():
    items = [fixed(x, 0, 50, 50, i + 1) for i, x in enumerate([80, 150, 300, 450])]
    parent = row((0, 0, 500, 50), list(items))

    build_flex_justify(make_ctx(parent), parent)

    assert parent.children[2].attributes == {"is": "flex1"}
    assert [class_names(c) for c in items] == [["ml-80"], ["ml-20"], [], ["ml-100"]]


def test_justify_around():
    items = [fixed(x, 0, 100, 50, i + 1) for i, x in enumerate([10, 130, 250])]
    parent = row((0, 0, 360, 50), items)
    assert build_flex_justify(make_ctx(parent), parent) == "around"
    assert class_names(parent) == ["justify-around"]


def test_justify_between():
    items = [fixed(x, 0, 100, 50, i + 1) for i, x in enumerate([0, 120, 240])]
    parent = row((0, 0, 340, 50), items)
    assert build_flex_justify(make_ctx(parent), parent) == "between"
    assert class_names(parent) == ["justify-between"]


def test_constrained_child_gets_literal_margins():
    first = fixed(10, 0, 100, 50, 1)
    stretched = make_node(120, 0, 170, 50, 2, width_spec=SizeSpec.CONSTRAINED, height_spec=SizeSpec.FIXED)
    parent = row((0, 0, 300, 50), [first, stretched])

    assert build_flex_justify(make_ctx(parent), parent) == "margins"
    assert class_names(parent) == []
    assert class_names(first) == ["ml-10"]
    assert class_names(stretched) == ["ml-10", "mr-10"]


def test_auto_row_hugging_start():
    items = [fixed(10, 0, 50, 50, 1), fixed(80, 0, 50, 50, 2)]
    parent = row((0, 0, 300, 50), items, width=SizeSpec.AUTO)

    assert build_flex_justify(make_ctx(parent), parent) == "start"
    assert class_names(parent) == ["pr-170"]
    assert [class_names(c) for c in items] == [["ml-10"], ["ml-20"]]


def test_fixed_row_hugging_end():
    items = [fixed(150, 0, 50, 50, 1), fixed(220, 0, 50, 50, 2)]
    parent = row((0, 0, 300, 50), items)

    assert build_flex_justify(make_ctx(parent), parent) == "end"
    assert class_names(parent) == ["justify-end"]
    assert [class_names(c) for c in items] == [["mr-20"], ["mr-30"]]


def test_centered_single_child():
    child = fixed(100, 0, 100, 50, 1)
    parent = row((0, 0, 300, 50), [child])
    assert build_flex_justify(make_ctx(parent), parent) == "center"
    assert class_names(parent) == ["justify-center"]
    assert child.class_list == []


def test_two_item_list_uses_space_utility():
    items = [fixed(0, 0, 100, 50, 1), fixed(150, 0, 100, 50, 2)]
    parent = row((0, 0, 400, 50), items, width=SizeSpec.CONSTRAINED)
    parent.roles.add(Role.LIST_X)

    assert build_flex_justify(make_ctx(parent), parent) == "start"
    assert class_names(parent) == ["space-x-50"]
    assert len(parent.children) == 2


def test_flex_wrap_gaps_and_padding():
    tiles = [fixed(x, y, 100, 50) for y in (10, 70) for x in (10, 120, 230)]
    parent = make_node(0, 0, 340, 130, roles={Role.LIST_WRAP}, children=tiles)

    build_flex_wrap(make_ctx(parent), parent)

    assert class_names(parent) == ["flex-wrap", "gap-x-10", "gap-y-10", "pl-10", "pt-10"]
