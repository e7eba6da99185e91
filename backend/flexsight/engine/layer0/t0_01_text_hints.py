"""T0.01 — Text Size Hints.

Single-line text keeps a fixed height and hugs its glyphs unless the box is
visibly wider; multi-line text grows with its content.
"""

from __future__ import annotations

import logging

from flexsight.engine.context import LayoutContext
from flexsight.engine.registry import Layer, transform
from flexsight.layout.text_hints import apply_text_hints_tree

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.BUILD,
    description="Derive size hints for text boxes from their metrics",
)
def text_hints(ctx: LayoutContext) -> None:
    count = apply_text_hints_tree(ctx.root, ctx.config)
    logger.debug("Hinted %d text nodes", count)
