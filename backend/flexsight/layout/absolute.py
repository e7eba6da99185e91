"""Debug placement: every box absolutely positioned at its drawn bounds.

Used by the ``pre`` and ``tree`` build stages to inspect the tree before
flex inference has run.
"""

from __future__ import annotations

from flexsight.engine.context import Node
from flexsight.engine.tokens import add_keyword, add_size


def make_absolute(node: Node, parent: Node | None = None, is_attach: bool = False) -> None:
    if parent is None:
        add_keyword(node, "relative")
    else:
        if is_attach:
            node.attributes = {"is": "attachNode", **node.attributes}
        add_keyword(node, "absolute")
        add_size(node, "left", node.bounds.left - parent.bounds.left)
        add_size(node, "top", node.bounds.top - parent.bounds.top)
    add_size(node, "w", node.bounds.width)
    add_size(node, "h", node.bounds.height)

    for child in node.children:
        make_absolute(child, node)
    for attach in node.attach_nodes:
        make_absolute(attach, node, is_attach=True)
