"""T0.03 — Flex Boxes.

Per container, top-down: fold redundant wrappers, collapse repeated items
into lists, group the remaining flow children into Row/Column boxes, fold
again and fix the container's direction.

Containers already arranged (lists, synthesized boxes) are skipped, but
their children and overlays are still visited.
"""

from __future__ import annotations

import logging

from flexsight.engine.context import LayoutContext, Node
from flexsight.engine.enums import Direction
from flexsight.engine.registry import Layer, transform
from flexsight.layout.grouping import group_nodes
from flexsight.layout.repeats import detect_column_list, detect_row_lists
from flexsight.layout.simplifier import merge_unnecessary_nodes

logger = logging.getLogger(__name__)


@transform(
    id="T0.03",
    layer=Layer.BUILD,
    dependencies=["T0.02"],
    description="Detect lists and group flow children into Row/Column boxes",
)
def flex_boxes(ctx: LayoutContext) -> None:
    build_flex_box(ctx, ctx.root)
    logger.debug("Flex boxes built: %d nodes, %d diagnostics", ctx.num_nodes, len(ctx.diagnostics))


def build_flex_box(ctx: LayoutContext, node: Node) -> None:
    if not ctx.is_laid_out(node):
        arrange(ctx, node)
    for child in node.children:
        build_flex_box(ctx, child)
    for attach in node.attach_nodes:
        build_flex_box(ctx, attach)


def arrange(ctx: LayoutContext, node: Node) -> None:
    merge_unnecessary_nodes(ctx, node)
    if ctx.is_laid_out(node):
        return

    if len(node.children) >= 2:
        detect_row_lists(ctx, node)
        node.children = group_nodes(ctx, node.children)
        merge_unnecessary_nodes(ctx, node)
        if ctx.is_laid_out(node):
            return

    if node.direction != Direction.UNSET or not node.children:
        ctx.mark_laid_out(node)
        return

    if len(node.children) == 1:
        node.direction = Direction.ROW
    else:
        node.direction = Direction.COLUMN
        node.children.sort(key=lambda n: (n.bounds.top, n.index))
        detect_column_list(ctx, node)
    ctx.mark_laid_out(node)
