"""Tree parser — design-tree dict (or NodeInput) → LayoutContext.

Input nodes are stamped with creation indexes in pre-order, so index order
is document order and synthesized nodes always sort after real ones.
"""

from __future__ import annotations

import logging
from typing import Any

from flexsight.engine.config import LayoutConfig
from flexsight.engine.context import Bounds, IndexCounter, LayoutContext, Node
from flexsight.engine.tokens import StyleToken
from flexsight.models.layout import NodeInput

logger = logging.getLogger(__name__)


def parse_tree(data: dict[str, Any] | NodeInput, config: LayoutConfig | None = None) -> LayoutContext:
    """Validate the input tree and wrap it in a fresh LayoutContext."""
    model = data if isinstance(data, NodeInput) else NodeInput.model_validate(data)
    counter = IndexCounter()
    root = _build_node(model, counter)
    ctx = LayoutContext(root=root, config=config or LayoutConfig(), counter=counter)
    logger.info("Parsed design tree: %d nodes", counter.peek)
    return ctx


def _build_node(model: NodeInput, counter: IndexCounter) -> Node:
    node = Node(
        bounds=Bounds.from_xywh(model.left, model.top, model.width, model.height),
        index=counter(),
        id=model.id,
        width_spec=model.width_spec,
        height_spec=model.height_spec,
        direction=model.direction,
        roles=set(model.roles),
        class_list=[StyleToken(name) for name in model.class_list],
        text_multi_line=model.text_multi_line,
        font_size=model.font_size,
        line_height=model.line_height,
        tag_name=model.tag_name,
        attributes=dict(model.attributes),
        style=dict(model.style),
    )
    if isinstance(model.text, list):
        node.text = [_build_node(run, counter) for run in model.text]
    else:
        node.text = model.text
    node.children = [_build_node(child, counter) for child in model.children]
    node.attach_nodes = [_build_node(attach, counter) for attach in model.attach_nodes]
    return node
