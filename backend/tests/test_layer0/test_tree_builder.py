"""Tests for containment / overlay reconstruction."""

import pytest

from flexsight.engine.config import LayoutConfig
from flexsight.engine.enums import Role
from flexsight.layout.tree_builder import HostKind, build_tree, find_best_host
from flexsight.tree.parser import parse_tree
from flexsight.utils.geometry import contained, overlapping
from tests.conftest import BADGE_TREE, SAMPLE_TREES, make_node


def _page(*children):
    return make_node(0, 0, 300, 300, 0, children=list(children))


def test_contained_sibling_moves_into_container():
    outer = make_node(10, 10, 100, 100, 1)
    inner = make_node(20, 20, 30, 30, 2)
    page = _page(outer, inner)
    build_tree(page, LayoutConfig())
    assert page.children == [outer]
    assert outer.children == [inner]


def test_smallest_container_wins():
    big = make_node(0, 0, 200, 200, 1)
    mid = make_node(10, 10, 100, 100, 2)
    small = make_node(20, 20, 10, 10, 3)
    page = _page(big, mid, small)
    build_tree(page, LayoutConfig())
    assert page.children == [big]
    assert big.children == [mid]
    assert mid.children == [small]


def test_equal_boxes_nest_later_into_earlier():
    first = make_node(10, 10, 50, 50, 1)
    second = make_node(11, 10, 50, 50, 2)
    page = _page(first, second)
    build_tree(page, LayoutConfig())
    assert page.children == [first]
    assert first.children == [second]


def test_overlapping_smaller_sibling_becomes_overlay():
    card = make_node(10, 10, 100, 100, 1)
    tag = make_node(90, 20, 50, 20, 2)
    assert find_best_host(tag, [card, tag], 2.0) == (card, HostKind.ATTACHED)

    page = _page(card, tag)
    build_tree(page, LayoutConfig())
    assert page.children == [card]
    assert card.attach_nodes == [tag]


def test_node_outside_parent_is_parent_overlay():
    inside = make_node(10, 10, 50, 50, 1)
    outside = make_node(280, 280, 50, 50, 2)
    page = _page(inside, outside)
    build_tree(page, LayoutConfig())
    assert page.children == [inside]
    assert page.attach_nodes == [outside]


def test_flush_hairline_becomes_border():
    content = make_node(10, 10, 50, 50, 1)
    line = make_node(0, 299, 300, 1, 2)
    page = _page(content, line)
    build_tree(page, LayoutConfig())
    assert page.children == [content]
    assert page.attach_nodes == [line]
    assert line.has_role(Role.BORDER)


def test_inner_hairline_is_divider():
    top = make_node(10, 10, 280, 30, 1)
    line = make_node(10, 50, 280, 1, 2)
    page = _page(top, line)
    build_tree(page, LayoutConfig())
    assert page.children == [top, line]
    assert line.has_role(Role.DIVIDER)


def test_children_contained_after_build():
    page = _page(
        make_node(0, 0, 150, 150, 1),
        make_node(10, 10, 40, 40, 2),
        make_node(60, 60, 40, 40, 3),
        make_node(140, 140, 40, 40, 4),
        make_node(200, 10, 80, 80, 5),
        make_node(210, 20, 20, 20, 6),
    )
    config = LayoutConfig()
    build_tree(page, config)

    def check(node):
        for child in node.children:
            assert contained(child, node, config.tolerance)
            check(child)
        for attach in node.attach_nodes:
            check(attach)

    check(page)


def _flow_overlaps(node):
    kids = node.children
    return [(a, b) for i, a in enumerate(kids) for b in kids[i + 1 :] if overlapping(a, b)]


@pytest.mark.parametrize("tree", SAMPLE_TREES)
def test_sample_trees_keep_containment_invariants(tree):
    ctx = parse_tree(tree)
    build_tree(ctx.root, ctx.config)
    tol = ctx.config.tolerance

    for node in ctx.root.walk():
        assert _flow_overlaps(node) == []
        for overlay in node.attach_nodes:
            assert overlapping(overlay, node) or not contained(overlay, node, tol)
            assert not any(contained(overlay, child, tol) for child in node.children)


def test_overlay_hangs_on_the_box_it_overlaps():
    ctx = parse_tree(BADGE_TREE)
    build_tree(ctx.root, ctx.config)
    card = ctx.root.children[0]
    badge = card.attach_nodes[0]
    assert badge.id == "badge"
    assert overlapping(badge, card)
    assert not contained(badge, card, ctx.config.tolerance)
