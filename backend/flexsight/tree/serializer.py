"""Node tree → plain dict snapshot (deterministic, JSON-ready)."""

from __future__ import annotations

from typing import Any

from flexsight.engine.context import Node
from flexsight.models.layout import BoundsOutput, NodeOutput, TokenOutput


def to_output(node: Node) -> NodeOutput:
    b = node.bounds
    if isinstance(node.text, list):
        text: str | list[NodeOutput] | None = [to_output(run) for run in node.text]
    else:
        text = node.text
    return NodeOutput(
        id=node.id,
        index=node.index,
        bounds=BoundsOutput(
            left=b.left, top=b.top, right=b.right, bottom=b.bottom, width=b.width, height=b.height
        ),
        width_spec=node.width_spec,
        height_spec=node.height_spec,
        direction=node.direction,
        roles=sorted(node.roles, key=lambda r: r.value),
        class_list=[TokenOutput(**t.to_dict()) for t in node.class_list],
        class_names=[str(t) for t in node.class_list],
        text=text,
        tag_name=node.tag_name,
        attributes=dict(node.attributes),
        style=dict(node.style),
        children=[to_output(c) for c in node.children],
        attach_nodes=[to_output(a) for a in node.attach_nodes],
    )


def tree_to_dict(node: Node) -> dict[str, Any]:
    return to_output(node).model_dump(mode="json")
