"""Size-spec resolution.

Bottom-up, every node gets a spec on both axes:
- leaves default to Fixed
- a Row is Auto wide unless hinted; it is Auto tall when any child is
  Auto or Constrained tall, else Fixed. Column is the mirror image.

Top-down, a Constrained parent hands Constrained down to its Auto children
(main axis and cross axis alike) so they stretch with it.
"""

from __future__ import annotations

import logging

from flexsight.engine.context import Node
from flexsight.engine.enums import Direction, SizeSpec
from flexsight.engine.errors import InvariantViolation
from flexsight.layout.axes import cross_axis, main_axis

logger = logging.getLogger(__name__)

_FLEXIBLE = (SizeSpec.AUTO, SizeSpec.CONSTRAINED)


def resolve_size_specs(node: Node) -> None:
    """Post-order: children and overlays first, then the node itself."""
    for child in node.children:
        resolve_size_specs(child)
    for attach in node.attach_nodes:
        resolve_size_specs(attach)
    resolve_node_spec(node)


def resolve_node_spec(node: Node) -> None:
    if not node.children or node.direction == Direction.UNSET:
        if node.width_spec == SizeSpec.UNKNOWN:
            node.width_spec = SizeSpec.FIXED
        if node.height_spec == SizeSpec.UNKNOWN:
            node.height_spec = SizeSpec.FIXED
        return

    for child in node.children:
        if SizeSpec.UNKNOWN in (child.width_spec, child.height_spec):
            raise InvariantViolation(f"{child!r} has no size spec before its parent {node!r} is resolved")

    main = main_axis(node.direction)
    cross = cross_axis(node.direction)
    if node.spec(main.dimension) == SizeSpec.UNKNOWN:
        node.set_spec(main.dimension, SizeSpec.AUTO)
    if node.spec(cross.dimension) == SizeSpec.UNKNOWN:
        flexible = any(c.spec(cross.dimension) in _FLEXIBLE for c in node.children)
        node.set_spec(cross.dimension, SizeSpec.AUTO if flexible else SizeSpec.FIXED)


def check_resolved(root: Node) -> None:
    """Every node must carry a concrete spec on both axes."""
    for node in root.walk():
        if SizeSpec.UNKNOWN in (node.width_spec, node.height_spec):
            raise InvariantViolation(f"{node!r} left size resolution with an Unknown spec")


def promote_children(parent: Node) -> None:
    """Hand Constrained down from the parent to its Auto children."""
    if parent.direction == Direction.UNSET:
        return
    main = main_axis(parent.direction)
    cross = cross_axis(parent.direction)
    for child in parent.children:
        for axis in (main, cross):
            if parent.spec(axis.dimension) == SizeSpec.CONSTRAINED and child.spec(axis.dimension) == SizeSpec.AUTO:
                child.set_spec(axis.dimension, SizeSpec.CONSTRAINED)

        # Wrapping content needs a definite width to break lines against
        if (
            parent.direction == Direction.ROW
            and child.is_flex_wrap_like
            and child.width_spec == SizeSpec.AUTO
        ):
            logger.debug("Pinning width of wrapping %r in %r", child, parent)
            child.width_spec = SizeSpec.FIXED
