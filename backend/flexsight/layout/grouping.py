"""Direction grouping — recursively cluster flow siblings into Row and Column boxes.

1. Take the tallest node; the nodes lying strictly inside its vertical extent
   form a band.
2. A band of several nodes is split into columns by transitive horizontal
   overlap. Multi-node columns become Column boxes (grouped recursively and
   checked for column lists); all columns go into one Row box.
3. A band of one node passes through unchanged. A band forming a single
   overlap cluster becomes one Column box.
4. Repeat on the leftover nodes.
"""

from __future__ import annotations

import logging

from flexsight.engine.context import Bounds, LayoutContext, Node
from flexsight.engine.enums import Direction
from flexsight.layout.repeats import detect_column_list
from flexsight.utils.geometry import overlapping_x

logger = logging.getLogger(__name__)


def group_nodes_by_overlap_x(nodes: list[Node]) -> list[list[Node]]:
    """Cluster nodes whose horizontal extents overlap, transitively."""
    groups: list[list[Node]] = []
    for node in nodes:
        touching = [g for g in groups if any(overlapping_x(node, member) for member in g)]
        if not touching:
            groups.append([node])
            continue
        # A node bridging several groups merges them into the first one
        merged = touching[0]
        merged.append(node)
        for other in touching[1:]:
            merged.extend(other)
            groups.remove(other)
    return groups


def group_nodes(ctx: LayoutContext, nodes: list[Node]) -> list[Node]:
    """Split nodes into top-level rows; returns them in discovery order."""
    if not nodes:
        return []

    tallest = min(nodes, key=lambda n: (-n.bounds.height, n.bounds.top, n.bounds.left, n.index))
    band = [n for n in nodes if _in_band(n, tallest)]
    leftover = [n for n in nodes if not _in_band(n, tallest)]

    if len(band) <= 1:
        return [tallest, *group_nodes(ctx, leftover)]

    groups = group_nodes_by_overlap_x(band)
    if len(groups) == 1:
        # Nothing splits the band horizontally: stack it as is
        logger.debug("Band of %d nodes under %r has no horizontal split", len(band), tallest)
        return [_column(ctx, band), *group_nodes(ctx, leftover)]

    columns: list[Node] = []
    for group in groups:
        if len(group) == 1:
            columns.append(group[0])
            continue
        group = sorted(group, key=lambda n: (n.bounds.top, n.index))
        column = ctx.new_node(Bounds.union(group), direction=Direction.COLUMN)
        column.children = sorted(group_nodes(ctx, group), key=lambda n: (n.bounds.top, n.index))
        ctx.mark_laid_out(column)
        if len(column.children) >= 2:
            detect_column_list(ctx, column)
        columns.append(column)

    row = ctx.new_node(
        Bounds.union(columns),
        direction=Direction.ROW,
        children=sorted(columns, key=lambda n: (n.bounds.left, n.index)),
    )
    ctx.mark_laid_out(row)
    return [row, *group_nodes(ctx, leftover)]


def _in_band(node: Node, tallest: Node) -> bool:
    return node.bounds.top >= tallest.bounds.top and node.bounds.bottom <= tallest.bounds.bottom


def _column(ctx: LayoutContext, nodes: list[Node]) -> Node:
    children = sorted(nodes, key=lambda n: (n.bounds.top, n.index))
    column = ctx.new_node(Bounds.union(children), direction=Direction.COLUMN, children=children)
    ctx.mark_laid_out(column)
    detect_column_list(ctx, column)
    return column
