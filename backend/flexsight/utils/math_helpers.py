"""Tolerance numerics and tolerant grouping. No engine imports."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

import numpy as np

T = TypeVar("T")

DEFAULT_TOL = 2.0


def num_eq(a: float, b: float, tol: float = DEFAULT_TOL) -> bool:
    return abs(a - b) <= tol


# Kept under both names: "same" reads better for positions, "eq" for sizes.
num_same = num_eq


def num_gt(a: float, b: float, tol: float = DEFAULT_TOL) -> bool:
    """a is greater than b by more than the tolerance."""
    return a - b > tol


def num_gte(a: float, b: float, tol: float = DEFAULT_TOL) -> bool:
    return a - b >= -tol


def num_lt(a: float, b: float, tol: float = DEFAULT_TOL) -> bool:
    return b - a > tol


def num_lte(a: float, b: float, tol: float = DEFAULT_TOL) -> bool:
    return b - a >= -tol


def all_nums_equal(values: Sequence[float], tol: float = DEFAULT_TOL) -> bool:
    """True if every value is within tol of every other value."""
    if len(values) < 2:
        return True
    return float(np.ptp(np.asarray(values, dtype=np.float64))) <= tol


def group_by_tolerance(
    items: Iterable[T],
    key: Callable[[T], float],
    tol: float = DEFAULT_TOL,
) -> list[list[T]]:
    """Group items whose keys are within tol of a group's first key.

    First match wins and groups keep insertion order, so the result is
    deterministic for a given input order.
    """
    groups: list[tuple[float, list[T]]] = []
    for item in items:
        value = key(item)
        for anchor, members in groups:
            if num_eq(anchor, value, tol):
                members.append(item)
                break
        else:
            groups.append((value, [item]))
    return [members for _, members in groups]


def largest_group(
    items: Sequence[T],
    key: Callable[[T], float],
    tol: float = DEFAULT_TOL,
) -> tuple[int, float]:
    """Size and anchor value of the biggest tolerance group (earliest on ties)."""
    groups = group_by_tolerance(items, key, tol)
    best = max(groups, key=len)
    return len(best), key(best[0])


def argmax_ties(values: Sequence[float], tol: float = DEFAULT_TOL) -> list[int]:
    """Indexes of every value within tol of the maximum, ascending."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return []
    top = float(arr.max())
    return [int(i) for i in np.flatnonzero(arr >= top - tol)]
