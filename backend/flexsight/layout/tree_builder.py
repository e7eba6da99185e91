"""Tree builder — reclassify a flat sibling list into contained children,
overlay ("attach") nodes and border nodes.

For each sibling:
1. Contained by other siblings -> child of the smallest container (earliest index on ties).
2. Overlapping a bigger sibling drawn below it -> attach node of the smallest such sibling.
3. Overlapping an unrelated sibling, or not inside the parent -> attach node of the parent.
4. Hairline flush with a parent edge -> border, attach node of the parent.
5. Otherwise it stays a flow sibling.
"""

from __future__ import annotations

import enum
import logging

from flexsight.engine.config import LayoutConfig
from flexsight.engine.context import Node
from flexsight.engine.enums import Role
from flexsight.utils.geometry import contained, is_flush_border, is_hairline, overlapping

logger = logging.getLogger(__name__)


class HostKind(enum.Enum):
    CONTAINED = "contained"
    ATTACHED = "attached"


def build_tree(node: Node, config: LayoutConfig) -> None:
    """Rebuild containment for a node, then for everything beneath it."""
    build_missing_tree(node, config)
    for child in node.children:
        build_tree(child, config)
    for attach in node.attach_nodes:
        build_tree(attach, config)


def build_missing_tree(parent: Node, config: LayoutConfig) -> None:
    """Re-home the parent's children so the remaining flow siblings never overlap."""
    nodes = list(parent.children)
    if not nodes:
        return
    tol = config.tolerance

    hosts: dict[int, tuple[Node, HostKind]] = {}
    for node in nodes:
        found = find_best_host(node, nodes, tol)
        if found is not None and not _creates_cycle(node, found[0], hosts):
            hosts[id(node)] = found

    flow: list[Node] = []
    for node in nodes:
        if id(node) in hosts:
            host, kind = hosts[id(node)]
            if kind is HostKind.CONTAINED:
                host.children.append(node)
            else:
                host.attach_nodes.append(node)
        elif _is_unresolved_overlap(node, parent, nodes, hosts, tol):
            logger.debug("%r overlaps its siblings, positioned absolutely in %r", node, parent)
            parent.attach_nodes.append(node)
        elif is_flush_border(node, parent, config.hairline_thickness, tol):
            node.roles.add(Role.BORDER)
            parent.attach_nodes.append(node)
        else:
            if is_hairline(node, config.hairline_thickness, tol):
                node.roles.add(Role.DIVIDER)
            flow.append(node)

    parent.children = flow


def find_best_host(node: Node, nodes: list[Node], tol: float) -> tuple[Node, HostKind] | None:
    """Smallest sibling containing the node, else the smallest it overlays."""
    containers = [
        cand
        for cand in nodes
        if cand is not node
        and contained(node, cand, tol)
        # Equal boxes: only the later node goes inside the earlier one
        and not (contained(cand, node, tol) and cand.index > node.index)
    ]
    if containers:
        best = min(containers, key=lambda c: (c.area, c.index))
        return best, HostKind.CONTAINED

    underlays = [
        cand
        for cand in nodes
        if cand is not node
        and overlapping(node, cand)
        and cand.area >= node.area
        and cand.index < node.index
        and not contained(cand, node, tol)
    ]
    if underlays:
        best = min(underlays, key=lambda c: (c.area, c.index))
        return best, HostKind.ATTACHED
    return None


def _creates_cycle(node: Node, host: Node, hosts: dict[int, tuple[Node, HostKind]]) -> bool:
    current: Node | None = host
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if current is node:
            return True
        seen.add(id(current))
        entry = hosts.get(id(current))
        current = entry[0] if entry else None
    return False


def _is_unresolved_overlap(
    node: Node,
    parent: Node,
    nodes: list[Node],
    hosts: dict[int, tuple[Node, HostKind]],
    tol: float,
) -> bool:
    if not contained(node, parent, tol):
        return True
    for other in nodes:
        if other is node or not overlapping(node, other):
            continue
        entry = hosts.get(id(other))
        if entry is not None and entry[0] is node:
            continue
        return True
    return False
