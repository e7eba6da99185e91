"""T0.02 — Tree Builder.

Rebuild containment from bounds over the whole tree: contained siblings move
into their container, overlapping ones become overlays, flush hairlines
become borders.
"""

from __future__ import annotations

from flexsight.engine.context import LayoutContext
from flexsight.engine.enums import Role
from flexsight.engine.errors import InvariantViolation
from flexsight.engine.registry import Layer, transform
from flexsight.layout.tree_builder import build_tree


@transform(
    id="T0.02",
    layer=Layer.BUILD,
    dependencies=["T0.01"],
    description="Reconstruct containment and overlays from pixel bounds",
)
def tree_builder(ctx: LayoutContext) -> None:
    root = ctx.root
    if not root.children and not root.has_role(Role.PAGE):
        raise InvariantViolation(f"Root {root!r} is not a container: no children and no page role")
    if not root.roles:
        root.roles.add(Role.PAGE)

    build_tree(root, ctx.config)
