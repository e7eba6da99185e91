"""Size hints for text boxes, derived from their metrics before layout."""

from __future__ import annotations

import logging

from flexsight.engine.config import LayoutConfig
from flexsight.engine.context import Node
from flexsight.engine.enums import SizeSpec
from flexsight.engine.spatial_constants import TEXT_EXCESS_EM
from flexsight.utils.math_helpers import num_lt

logger = logging.getLogger(__name__)


def text_content(node: Node) -> str:
    if isinstance(node.text, str):
        return node.text
    if node.text:
        return "".join(text_content(run) for run in node.text)
    return ""


def character_units(text: str) -> float:
    """Estimated width in em: ASCII glyphs count half, everything else one."""
    return sum(0.5 if ord(ch) <= 0x7F else 1.0 for ch in text)


def is_multi_line(node: Node, tol: float) -> bool:
    if node.text_multi_line:
        return True
    return node.line_height is not None and num_lt(node.line_height, node.bounds.height, tol)


def apply_text_hints(node: Node, config: LayoutConfig) -> None:
    """Fill in the Unknown specs of a text node."""
    if not node.is_text:
        return

    if is_multi_line(node, config.tolerance):
        node.text_multi_line = True
        if node.width_spec == SizeSpec.UNKNOWN:
            node.width_spec = SizeSpec.FIXED if config.multi_line_text_fixed_width else SizeSpec.AUTO
        if node.height_spec == SizeSpec.UNKNOWN:
            node.height_spec = SizeSpec.AUTO
        return

    if node.height_spec == SizeSpec.UNKNOWN:
        node.height_spec = SizeSpec.FIXED
    if node.width_spec == SizeSpec.UNKNOWN:
        # Text boxes drawn wider than their glyphs keep the drawn width
        excess = None
        if node.font_size:
            excess = node.bounds.width / node.font_size - character_units(text_content(node))
        if excess is not None and excess > TEXT_EXCESS_EM:
            logger.debug("Text box %r is wider than its content, fixing its width", node)
            node.width_spec = SizeSpec.FIXED
        else:
            node.width_spec = SizeSpec.AUTO


def apply_text_hints_tree(root: Node, config: LayoutConfig) -> int:
    """Hint every text node in the tree. Returns the number of text nodes seen."""
    count = 0
    for node in root.walk():
        if node.is_text:
            apply_text_hints(node, config)
            count += 1
    return count
