"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from flexsight.engine.config import LayoutConfig
from flexsight.engine.context import Bounds, IndexCounter, LayoutContext, Node
from flexsight.engine.enums import Direction, SizeSpec


def box(left: float, top: float, width: float, height: float, **extra: Any) -> dict[str, Any]:
    """Design-tree input node."""
    return {"left": left, "top": top, "width": width, "height": height, **extra}


def make_node(left: float, top: float, width: float, height: float, index: int = 0, **kwargs: Any) -> Node:
    return Node(bounds=Bounds.from_xywh(left, top, width, height), index=index, **kwargs)


def make_ctx(root: Node, **config: Any) -> LayoutContext:
    """Context whose counter continues after the highest index in the tree."""
    start = max(n.index for n in root.walk()) + 1
    return LayoutContext(root=root, config=LayoutConfig(**config), counter=IndexCounter(start))


def row(bounds: tuple[float, float, float, float], children: list[Node], width=SizeSpec.FIXED, height=SizeSpec.FIXED) -> Node:
    """Row container over children given as (left, top, width, height)."""
    return make_node(
        *bounds,
        direction=Direction.ROW,
        width_spec=width,
        height_spec=height,
        children=children,
    )


def fixed(left: float, top: float, width: float, height: float, index: int = 0) -> Node:
    return make_node(left, top, width, height, index, width_spec=SizeSpec.FIXED, height_spec=SizeSpec.FIXED)


# Sample design trees

# A wrapper drawn exactly over the page, holding one box
SINGLE_WRAPPER_TREE = box(0, 0, 200, 100, children=[box(0, 0, 200, 100, children=[box(10, 10, 50, 20, id="leaf")])])

# Three equal tiles with 10px gaps everywhere, page width driven by content
TILE_ROW_TREE = box(
    -10,
    0,
    340,
    50,
    children=[box(0, 0, 100, 50, id="a"), box(110, 0, 100, 50, id="b"), box(220, 0, 100, 50, id="c")],
)

# Two different boxes far apart in a stretched row
SPLIT_ROW_TREE = box(
    0,
    0,
    400,
    50,
    widthSpec="Constrained",
    heightSpec="Fixed",
    children=[box(0, 0, 100, 50, id="left"), box(250, 5, 100, 40, id="right")],
)

# A card with a badge hanging over its top-left corner
BADGE_TREE = box(
    0,
    0,
    400,
    400,
    children=[box(50, 50, 300, 300, id="card"), box(40, 40, 60, 40, id="badge")],
)

# Page header above a row of three cards
CARD_PAGE_TREE = box(
    0,
    0,
    400,
    300,
    children=[
        box(0, 0, 400, 60, id="header", style={"background": "#fff"}),
        box(20, 100, 100, 100, id="card-1"),
        box(150, 100, 100, 100, id="card-2"),
        box(280, 100, 100, 100, id="card-3"),
        box(20, 230, 360, 40, id="footer", text="All rights reserved", fontSize=14, lineHeight=20),
    ],
)

# An underline just below a short label, beside a tall image
UNDERLINE_BAND_TREE = box(
    0,
    0,
    400,
    400,
    children=[
        box(0, 0, 50, 100, id="image"),
        box(60, 0, 40, 50, id="label"),
        box(55, 50, 55, 1.5, id="underline"),
    ],
)

# Two rows of tiles where the last tile of the second row is shorter
SHORT_WRAP_TREE = box(
    0,
    0,
    400,
    200,
    children=[
        box(0, 0, 100, 50),
        box(110, 0, 100, 50),
        box(220, 0, 100, 50),
        box(0, 60, 100, 50),
        box(110, 60, 100, 50),
        box(220, 60, 100, 30, id="short"),
    ],
)

SAMPLE_TREES = [
    SINGLE_WRAPPER_TREE,
    TILE_ROW_TREE,
    SPLIT_ROW_TREE,
    BADGE_TREE,
    CARD_PAGE_TREE,
    UNDERLINE_BAND_TREE,
    SHORT_WRAP_TREE,
]


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def card_page_tree() -> dict[str, Any]:
    return CARD_PAGE_TREE
