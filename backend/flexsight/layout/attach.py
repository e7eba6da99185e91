"""Absolute positioning of overlay (attach) nodes inside their container."""

from __future__ import annotations

import logging

from flexsight.engine.context import Node
from flexsight.engine.enums import SizeSpec
from flexsight.engine.tokens import add_keyword, add_size, has_keyword
from flexsight.layout.axes import X_AXIS, Y_AXIS, Axis

logger = logging.getLogger(__name__)

_POSITIONED = ("relative", "absolute", "fixed")


def build_attach_position(node: Node) -> None:
    if not node.attach_nodes:
        return
    if not has_keyword(node, *_POSITIONED):
        add_keyword(node, "relative")
    for overlay in node.attach_nodes:
        add_keyword(overlay, "absolute")
        _anchor(node, overlay, X_AXIS)
        _anchor(node, overlay, Y_AXIS)


def _anchor(node: Node, overlay: Node, axis: Axis) -> None:
    before = overlay.bounds.side(axis.start) - node.bounds.side(axis.start)
    after = node.bounds.side(axis.end) - overlay.bounds.side(axis.end)
    spec = overlay.spec(axis.dimension)
    extent = getattr(overlay.bounds, axis.dimension)

    if spec != SizeSpec.FIXED and extent * 2 > getattr(node.bounds, axis.dimension):
        add_size(overlay, axis.start, before)
        add_size(overlay, axis.end, after)
        overlay.set_spec(axis.dimension, SizeSpec.CONSTRAINED)
        return

    if spec != SizeSpec.FIXED and not overlay.children:
        overlay.set_spec(axis.dimension, SizeSpec.FIXED)
    if abs(before) < abs(after):
        add_size(overlay, axis.start, before)
    else:
        add_size(overlay, axis.end, after)
