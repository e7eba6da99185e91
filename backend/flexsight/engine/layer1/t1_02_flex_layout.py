"""T1.02 — Flex Layout.

Top-down walk emitting the layout tokens of each container: size
promotion for its children, explicit w/h, flex direction, cross-axis
alignment, main-axis justification, flex-1 and overlay positioning.
"""

from __future__ import annotations

import logging

from flexsight.engine.context import LayoutContext, Node
from flexsight.engine.enums import Direction, Role, SizeSpec
from flexsight.engine.registry import Layer, transform
from flexsight.engine.tokens import add_keyword, add_size
from flexsight.layout.alignment import build_flex_align
from flexsight.layout.attach import build_attach_position
from flexsight.layout.axes import main_axis
from flexsight.layout.justify import build_flex_justify, build_flex_wrap
from flexsight.layout.sizing import promote_children

logger = logging.getLogger(__name__)


@transform(
    id="T1.02",
    layer=Layer.MEASURE,
    dependencies=["T1.01"],
    description="Emit flex, alignment, justification and positioning tokens",
)
def flex_layout(ctx: LayoutContext) -> None:
    build_flex_layout(ctx, ctx.root)


def build_flex_layout(ctx: LayoutContext, node: Node) -> None:
    promote_children(node)

    if node.width_spec == SizeSpec.FIXED:
        add_size(node, "w", node.bounds.width)
    if node.height_spec == SizeSpec.FIXED:
        add_size(node, "h", node.bounds.height)

    if node.children and node.direction != Direction.UNSET:
        add_keyword(node, "flex")
        if node.direction == Direction.COLUMN:
            add_keyword(node, "flex-col")
        if node.has_role(Role.LIST_WRAP):
            build_flex_wrap(ctx, node)
        else:
            align = build_flex_align(ctx, node)
            justify = build_flex_justify(ctx, node)
            logger.debug("%r: align=%s justify=%s", node, align, justify)

        dimension = main_axis(node.direction).dimension
        for child in node.children:
            if child.spec(dimension) == SizeSpec.CONSTRAINED:
                add_keyword(child, "flex-1")

    build_attach_position(node)

    for child in node.children:
        build_flex_layout(ctx, child)
    for attach in node.attach_nodes:
        build_flex_layout(ctx, attach)
