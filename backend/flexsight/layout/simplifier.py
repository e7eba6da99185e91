"""Box simplifier — fold redundant single-child wrappers into their container."""

from __future__ import annotations

import logging

from flexsight.engine.context import LayoutContext, Node
from flexsight.engine.enums import Direction, SizeSpec
from flexsight.utils.geometry import is_same_bounds

logger = logging.getLogger(__name__)


def can_fold(parent: Node, child: Node, tol: float) -> bool:
    if is_same_bounds(parent, child, tol):
        return True
    # An unstyled wrapper without size hints only groups its children
    size_locked = SizeSpec.FIXED in (child.width_spec, child.height_spec)
    return child.is_ghost and not size_locked and bool(child.children)


def fold_child(ctx: LayoutContext, parent: Node, child: Node) -> None:
    """Merge child into parent and splice the grandchildren up."""
    if child.tag_name:
        parent.tag_name = child.tag_name
    for token in child.class_list:
        if token not in parent.class_list:
            parent.class_list.append(token)
    parent.roles |= child.roles
    parent.attributes = {**parent.attributes, **child.attributes}
    parent.style = {**parent.style, **child.style}
    if child.width_spec != SizeSpec.UNKNOWN:
        parent.width_spec = child.width_spec
    if child.height_spec != SizeSpec.UNKNOWN:
        parent.height_spec = child.height_spec
    if child.text:
        parent.text = child.text
        parent.text_multi_line = child.text_multi_line
        parent.font_size = child.font_size
        parent.line_height = child.line_height
    if parent.direction == Direction.UNSET:
        parent.direction = child.direction
    if ctx.is_laid_out(child):
        ctx.mark_laid_out(parent)
    parent.attach_nodes = parent.attach_nodes + [a for a in child.attach_nodes if a not in parent.attach_nodes]
    parent.children = list(child.children)


def merge_unnecessary_nodes(ctx: LayoutContext, parent: Node) -> int:
    """Fold single-child wrappers until none is left. Returns the fold count."""
    folds = 0
    while len(parent.children) == 1 and can_fold(parent, parent.children[0], ctx.tolerance):
        child = parent.children[0]
        logger.debug("Folding %r into %r", child, parent)
        fold_child(ctx, parent, child)
        folds += 1
    return folds
