"""T1.01 — Size Specs.

Resolve Fixed / Auto / Constrained on both axes for every node, bottom-up.
"""

from __future__ import annotations

from flexsight.engine.context import LayoutContext
from flexsight.engine.registry import Layer, transform
from flexsight.layout.sizing import check_resolved, resolve_size_specs


@transform(
    id="T1.01",
    layer=Layer.MEASURE,
    dependencies=["T0.03"],
    description="Resolve per-axis size specs bottom-up",
)
def size_specs(ctx: LayoutContext) -> None:
    resolve_size_specs(ctx.root)
    check_resolved(ctx.root)
