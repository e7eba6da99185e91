"""Cross-axis alignment (align-items / align-self).

Each child's cross-axis margins are measured against the container edges:
start, end and their difference. The three values are grouped with
tolerance and the biggest group picks the strategy, checked in the order
diff (center), start, end. When none applies every child is stretched or
pinned with literal margins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from flexsight.engine.context import LayoutContext, Node
from flexsight.engine.enums import SizeSpec
from flexsight.engine.tokens import add_keyword, add_spacing
from flexsight.layout.axes import Axis, cross_axis
from flexsight.utils.math_helpers import largest_group, num_eq, num_lte

logger = logging.getLogger(__name__)


@dataclass
class CrossMargin:
    start: float
    end: float

    @property
    def diff(self) -> float:
        return self.start - self.end


def measure_margins(node: Node, axis: Axis) -> list[CrossMargin]:
    return [
        CrossMargin(
            start=child.bounds.side(axis.start) - node.bounds.side(axis.start),
            end=node.bounds.side(axis.end) - child.bounds.side(axis.end),
        )
        for child in node.children
    ]


def build_flex_align(ctx: LayoutContext, node: Node) -> str:
    """Emit alignment tokens for a container and its children. Returns the strategy used."""
    if not node.children:
        return "none"
    tol = ctx.tolerance
    axis = cross_axis(node.direction)
    margins = measure_margins(node, axis)

    diff_count, diff = largest_group(margins, lambda m: m.diff, tol)
    start_count, start = largest_group(margins, lambda m: m.start, tol)
    end_count, end = largest_group(margins, lambda m: m.end, tol)
    best = max(diff_count, start_count, end_count)

    if diff_count == best:
        _align_center(node, axis, margins, diff, tol)
        return "center"
    if start_count == best and num_lte(start, min(m.start for m in margins), tol):
        _align_start(node, axis, margins, start, tol)
        return "start"
    if end_count == best and num_lte(end, min(m.end for m in margins), tol):
        _align_end(node, axis, margins, end, tol)
        return "end"

    ctx.diagnose("No common cross-axis alignment in %r; stretching children", node)
    _align_stretch(node, axis, margins, tol)
    return "stretch"


def _pad_auto_parent(node: Node, axis: Axis, margins: list[CrossMargin], tol: float) -> None:
    """Content-sized parents keep their extent through symmetric padding."""
    if node.spec(axis.dimension) != SizeSpec.AUTO:
        return
    residual = min(min(m.start, m.end) for m in margins)
    if residual <= tol:
        return
    add_spacing(node, "p", axis.name, residual)
    for m in margins:
        m.start -= residual
        m.end -= residual


def _stretch_override(child: Node, axis: Axis, margin: CrossMargin) -> bool:
    if child.spec(axis.dimension) != SizeSpec.CONSTRAINED:
        return False
    add_keyword(child, "self-stretch")
    add_spacing(child, "m", axis.s, margin.start)
    add_spacing(child, "m", axis.e, margin.end)
    return True


def _align_center(node: Node, axis: Axis, margins: list[CrossMargin], diff: float, tol: float) -> None:
    add_keyword(node, "items-center")
    if num_eq(diff, 0, tol):
        pass
    elif diff > 0:
        add_spacing(node, "p", axis.s, diff)
        for m in margins:
            m.start -= diff
    else:
        add_spacing(node, "p", axis.e, -diff)
        for m in margins:
            m.end += diff
    _pad_auto_parent(node, axis, margins, tol)

    for child, m in zip(node.children, margins):
        if _stretch_override(child, axis, m) or num_eq(m.diff, 0, tol):
            continue
        if m.diff < 0:
            add_keyword(child, "self-start")
            add_spacing(child, "m", axis.s, m.start)
        else:
            add_keyword(child, "self-end")
            add_spacing(child, "m", axis.e, m.end)


def _align_start(node: Node, axis: Axis, margins: list[CrossMargin], start: float, tol: float) -> None:
    add_keyword(node, "items-start")
    add_spacing(node, "p", axis.s, start)
    for m in margins:
        m.start -= start
    if node.spec(axis.dimension) == SizeSpec.AUTO:
        closing = min(m.end for m in margins)
        if closing > tol:
            add_spacing(node, "p", axis.e, closing)
            for m in margins:
                m.end -= closing

    for child, m in zip(node.children, margins):
        if _stretch_override(child, axis, m) or num_eq(m.start, 0, tol):
            continue
        if num_eq(m.diff, 0, tol):
            add_keyword(child, "self-center")
        elif m.diff < 0:
            add_spacing(child, "m", axis.s, m.start)
        else:
            add_keyword(child, "self-end")
            add_spacing(child, "m", axis.e, m.end)


def _align_end(node: Node, axis: Axis, margins: list[CrossMargin], end: float, tol: float) -> None:
    add_keyword(node, "items-end")
    add_spacing(node, "p", axis.e, end)
    for m in margins:
        m.end -= end
    if node.spec(axis.dimension) == SizeSpec.AUTO:
        opening = min(m.start for m in margins)
        if opening > tol:
            add_spacing(node, "p", axis.s, opening)
            for m in margins:
                m.start -= opening

    for child, m in zip(node.children, margins):
        if _stretch_override(child, axis, m) or num_eq(m.end, 0, tol):
            continue
        if num_eq(m.diff, 0, tol):
            add_keyword(child, "self-center")
        elif m.diff > 0:
            add_spacing(child, "m", axis.e, m.end)
        else:
            add_keyword(child, "self-start")
            add_spacing(child, "m", axis.s, m.start)


def _align_stretch(node: Node, axis: Axis, margins: list[CrossMargin], tol: float) -> None:
    for child, m in zip(node.children, margins):
        if child.spec(axis.dimension) == SizeSpec.FIXED:
            add_spacing(child, "m", axis.s, m.start)
            continue
        # Auto and Constrained children fill the cross axis minus their margins
        child.set_spec(axis.dimension, SizeSpec.CONSTRAINED)
        if num_eq(m.start, m.end, tol):
            add_spacing(child, "m", axis.name, m.start)
        else:
            add_spacing(child, "m", axis.s, m.start)
            add_spacing(child, "m", axis.e, m.end)
