"""Main-axis justification (justify-content, spacing, flexible spacers).

Gaps are measured along the main axis: the leading gap, the gaps between
consecutive children and the trailing gap. In order of preference:

1. A Constrained child already absorbs free space: literal margins.
2. Equal middle gaps in a sized container: justify-around / justify-between.
3. One dominant middle gap: insert a flex-1 spacer there.
4. Otherwise center / start / end justification with a space utility when
   the middle gaps are equal, literal margins when they are not.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from flexsight.engine.context import Bounds, LayoutContext, Node
from flexsight.engine.enums import SizeSpec
from flexsight.engine.tokens import add_keyword, add_spacing
from flexsight.layout.axes import Axis, cross_axis, main_axis
from flexsight.utils.geometry import item_gaps
from flexsight.utils.math_helpers import (
    all_nums_equal,
    argmax_ties,
    group_by_tolerance,
    num_eq,
    num_gt,
    num_lte,
)

logger = logging.getLogger(__name__)


class Side(enum.Enum):
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass
class MainGaps:
    start: float
    middle: list[float]
    end: float

    @property
    def largest(self) -> float:
        return max(self.middle) if self.middle else 0.0


def measure_gaps(node: Node, axis: Axis) -> MainGaps:
    children = node.children
    start = children[0].bounds.side(axis.start) - node.bounds.side(axis.start)
    end = node.bounds.side(axis.end) - children[-1].bounds.side(axis.end)
    middle = item_gaps(children, axis.horizontal) if len(children) >= 2 else []
    return MainGaps(start, middle, end)


def has_equal_middle(node: Node, gaps: MainGaps, tol: float) -> bool:
    """Uniform spacing needs two gaps to agree, or a single gap inside a list."""
    if len(gaps.middle) >= 2:
        return all_nums_equal(gaps.middle, tol)
    return len(gaps.middle) == 1 and node.is_list_container


def content_side(gaps: MainGaps, tol: float) -> Side:
    if num_eq(gaps.start, gaps.end, tol):
        return Side.CENTER
    return Side.START if gaps.start < gaps.end else Side.END


def build_flex_justify(ctx: LayoutContext, node: Node) -> str:
    """Emit main-axis tokens for a container. Returns the strategy used."""
    if not node.children:
        return "none"
    tol = ctx.tolerance
    axis = main_axis(node.direction)
    gaps = measure_gaps(node, axis)
    equal_middle = has_equal_middle(node, gaps, tol)
    sized = node.spec(axis.dimension) != SizeSpec.AUTO
    constrained = any(c.spec(axis.dimension) == SizeSpec.CONSTRAINED for c in node.children)

    if constrained:
        _literal_margins(node, axis, gaps)
        return "margins"

    if equal_middle and sized and not node.is_list_container:
        gap = gaps.middle[0]
        if (
            num_eq(gaps.start, gaps.end, tol)
            and not num_eq(gaps.start, 0, tol)
            and num_eq(gaps.start * 2, gap, tol)
        ):
            add_keyword(node, "justify-around")
            return "around"
        if num_gt(gap, gaps.start, tol) and num_gt(gap, gaps.end, tol):
            add_keyword(node, "justify-between")
            add_spacing(node, "p", axis.s, gaps.start)
            add_spacing(node, "p", axis.e, gaps.end)
            return "between"

    if (
        sized
        and len(node.children) >= 2
        and not equal_middle
        and num_gt(gaps.largest, gaps.start, tol)
        and num_gt(gaps.largest, gaps.end, tol)
    ):
        insert_flex_spacer(ctx, node, axis, gaps)
        return "spacer"

    _side_justify(node, axis, gaps, equal_middle, tol)
    return content_side(gaps, tol).value


def _literal_margins(node: Node, axis: Axis, gaps: MainGaps) -> None:
    """Reproduce every gap exactly with leading margins plus one trailing margin."""
    leading = [gaps.start, *gaps.middle]
    for child, gap in zip(node.children, leading):
        add_spacing(child, "m", axis.s, gap)
    add_spacing(node.children[-1], "m", axis.e, gaps.end)


def spacer_position(gaps: MainGaps, tol: float) -> int:
    """Index of the middle gap the spacer replaces.

    Content hugging the start (or centered) keeps its trailing group
    together, so the last of several equally large gaps wins; content hugging
    the end takes the first one.
    """
    ties = argmax_ties(gaps.middle, tol)
    if num_lte(gaps.start, gaps.end, tol):
        return ties[-1]
    return ties[0]


def insert_flex_spacer(ctx: LayoutContext, node: Node, axis: Axis, gaps: MainGaps) -> Node:
    """Put an invisible flexible child into the dominant gap."""
    position = spacer_position(gaps, ctx.tolerance)
    before, after = node.children[position], node.children[position + 1]
    cross = cross_axis(node.direction)
    middle = (node.bounds.side(cross.start) + node.bounds.side(cross.end)) / 2

    sides = {
        axis.start: before.bounds.side(axis.end),
        axis.end: after.bounds.side(axis.start),
        cross.start: middle,
        cross.end: middle,
    }
    spacer = ctx.new_node(Bounds(**sides), attributes={"is": "flex1"})
    spacer.set_spec(axis.dimension, SizeSpec.CONSTRAINED)
    # Empty across the row or column: no size token
    spacer.set_spec(cross.dimension, SizeSpec.AUTO)
    logger.debug("Spacer after %r in %r (gap %.1f)", before, node, gaps.middle[position])

    leading = [gaps.start, *gaps.middle]
    leading[position + 1] = 0
    for child, gap in zip(node.children, leading):
        add_spacing(child, "m", axis.s, gap)
    add_spacing(node.children[-1], "m", axis.e, gaps.end)

    node.children.insert(position + 1, spacer)
    return spacer


def _side_justify(node: Node, axis: Axis, gaps: MainGaps, equal_middle: bool, tol: float) -> None:
    side = content_side(gaps, tol)
    auto = node.spec(axis.dimension) == SizeSpec.AUTO
    children = node.children

    if side is Side.CENTER:
        if auto:
            add_spacing(node, "p", axis.name, gaps.start)
        else:
            add_keyword(node, "justify-center")
    elif side is Side.START:
        if auto:
            add_spacing(node, "p", axis.e, gaps.end)
    else:
        add_keyword(node, "justify-end")
        if auto:
            add_spacing(node, "p", axis.s, gaps.start)

    if equal_middle:
        add_spacing(node, "space", axis.name, gaps.middle[0])
        if side is Side.START:
            add_spacing(node, "p", axis.s, gaps.start)
        elif side is Side.END:
            add_spacing(node, "p", axis.e, gaps.end)
        return

    if side is Side.CENTER:
        for child, gap in zip(children[1:], gaps.middle):
            add_spacing(child, "m", axis.s, gap)
    elif side is Side.START:
        for child, gap in zip(children, [gaps.start, *gaps.middle]):
            add_spacing(child, "m", axis.s, gap)
    else:
        for child, gap in zip(children, [*gaps.middle, gaps.end]):
            add_spacing(child, "m", axis.e, gap)


def build_flex_wrap(ctx: LayoutContext, node: Node) -> None:
    """Wrapped lists: flex-wrap with row and column gaps and leading padding."""
    tol = ctx.tolerance
    add_keyword(node, "flex-wrap")
    rows = group_by_tolerance(node.children, lambda n: n.bounds.top, tol)
    first = rows[0]
    if len(first) >= 2:
        add_spacing(node, "gap", "x", item_gaps(first, horizontal=True)[0])
    if len(rows) >= 2:
        row_gap = min(n.bounds.top for n in rows[1]) - max(n.bounds.bottom for n in first)
        add_spacing(node, "gap", "y", row_gap)
    add_spacing(node, "p", "l", min(n.bounds.left for n in node.children) - node.bounds.left)
    add_spacing(node, "p", "t", first[0].bounds.top - node.bounds.top)
