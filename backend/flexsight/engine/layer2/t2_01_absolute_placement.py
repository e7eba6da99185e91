"""T2.01 — Absolute Placement.

Debug output for the ``pre`` and ``tree`` build stages: every box is placed
absolutely at its drawn bounds so the tree can be inspected before flex
inference.
"""

from __future__ import annotations

from flexsight.engine.context import LayoutContext
from flexsight.engine.registry import Layer, transform
from flexsight.layout.absolute import make_absolute


@transform(
    id="T2.01",
    layer=Layer.DEBUG,
    dependencies=["T0.03"],
    description="Place every box absolutely (debug build stages)",
)
def absolute_placement(ctx: LayoutContext) -> None:
    make_absolute(ctx.root)
