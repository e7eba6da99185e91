"""Box relation predicates with tolerance. No engine imports beyond the data types.

Containment is one-directional: a child may poke up to ``tol`` outside its
parent and still count as contained. Overlap is strict interval intersection
on both axes, without tolerance.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from flexsight.engine.errors import InvariantViolation
from flexsight.utils.math_helpers import DEFAULT_TOL, num_eq, num_gte, num_lte

if TYPE_CHECKING:
    from flexsight.engine.context import Node


def area(node: Node) -> float:
    return node.bounds.width * node.bounds.height


def contained_x(child: Node, parent: Node, tol: float = DEFAULT_TOL) -> bool:
    return num_gte(child.bounds.left, parent.bounds.left, tol) and num_lte(
        child.bounds.right, parent.bounds.right, tol
    )


def contained_y(child: Node, parent: Node, tol: float = DEFAULT_TOL) -> bool:
    return num_gte(child.bounds.top, parent.bounds.top, tol) and num_lte(
        child.bounds.bottom, parent.bounds.bottom, tol
    )


def contained(child: Node, parent: Node, tol: float = DEFAULT_TOL) -> bool:
    return contained_x(child, parent, tol) and contained_y(child, parent, tol)


def overlapping_x(a: Node, b: Node) -> bool:
    return a.bounds.left < b.bounds.right and a.bounds.right > b.bounds.left


def overlapping_y(a: Node, b: Node) -> bool:
    return a.bounds.top < b.bounds.bottom and a.bounds.bottom > b.bounds.top


def overlapping(a: Node, b: Node) -> bool:
    return overlapping_x(a, b) and overlapping_y(a, b)


def intersection_area(a: Node, b: Node) -> float:
    x_overlap = max(0.0, min(a.bounds.right, b.bounds.right) - max(a.bounds.left, b.bounds.left))
    y_overlap = max(0.0, min(a.bounds.bottom, b.bounds.bottom) - max(a.bounds.top, b.bounds.top))
    return x_overlap * y_overlap


def is_equal_box(a: Node, b: Node, tol: float = DEFAULT_TOL) -> bool:
    """Same width and height."""
    return num_eq(a.bounds.width, b.bounds.width, tol) and num_eq(a.bounds.height, b.bounds.height, tol)


def is_same_bounds(a: Node, b: Node, tol: float = DEFAULT_TOL) -> bool:
    """Same position and size."""
    return all(
        num_eq(a.bounds.side(s), b.bounds.side(s), tol) for s in ("left", "top", "right", "bottom")
    )


def middle_line(node: Node, horizontal: bool) -> float:
    """Center x when horizontal, else center y."""
    if horizontal:
        return node.bounds.left + node.bounds.width / 2
    return node.bounds.top + node.bounds.height / 2


def item_gaps(nodes: Sequence[Node], horizontal: bool) -> list[float]:
    """Gaps between consecutive nodes along one axis."""
    if len(nodes) < 2:
        raise InvariantViolation("At least two nodes are needed to measure gaps")
    if horizontal:
        starts = np.array([n.bounds.left for n in nodes[1:]], dtype=np.float64)
        ends = np.array([n.bounds.right for n in nodes[:-1]], dtype=np.float64)
    else:
        starts = np.array([n.bounds.top for n in nodes[1:]], dtype=np.float64)
        ends = np.array([n.bounds.bottom for n in nodes[:-1]], dtype=np.float64)
    return (starts - ends).tolist()


def middle_line_gaps(nodes: Sequence[Node], horizontal: bool) -> list[float]:
    """Distances between consecutive center lines."""
    if len(nodes) < 2:
        raise InvariantViolation("At least two nodes are needed to measure gaps")
    centers = np.array([middle_line(n, horizontal) for n in nodes], dtype=np.float64)
    return np.diff(centers).tolist()


def is_hairline(node: Node, thickness: float, tol: float = DEFAULT_TOL) -> bool:
    return num_eq(node.bounds.width, thickness, tol) or num_eq(node.bounds.height, thickness, tol)


def is_flush_border(child: Node, parent: Node, thickness: float, tol: float = DEFAULT_TOL) -> bool:
    """A hairline lying on one of the parent's edges."""
    cb, pb = child.bounds, parent.bounds
    if num_eq(cb.width, thickness, tol):
        return num_eq(cb.left, pb.left, tol) or num_eq(cb.right, pb.right, tol)
    if num_eq(cb.height, thickness, tol):
        return num_eq(cb.top, pb.top, tol) or num_eq(cb.bottom, pb.bottom, tol)
    return False
