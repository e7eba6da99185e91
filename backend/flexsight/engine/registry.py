"""Transform registry — every pipeline stage is a standalone function registered via decorator.

Usage:
    @transform(id="T1.01", layer=Layer.MEASURE, dependencies=["T0.03"])
    def size_specs(ctx: LayoutContext) -> None:
        resolve_size_specs(ctx.root)

Adding a stage = creating one module under ``layerN/`` with the decorator.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from flexsight.engine.errors import InvariantViolation

if TYPE_CHECKING:
    from flexsight.engine.context import LayoutContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    BUILD = 0
    MEASURE = 1
    DEBUG = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["LayoutContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Stage functions keyed by transform id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered %s in %s: %s", spec.id, spec.layer.name, spec.description or spec.fn.__name__)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def __contains__(self, transform_id: str) -> bool:
        return transform_id in self._transforms

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted((s for s in self._transforms.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Dependency order, lowest id first among ready stages. None requests everything.

        Dependencies outside the requested set are not pulled in: a skipped
        stage stays skipped, and its dependents are dropped by the pipeline.
        """
        if requested_ids is None:
            pool = dict(self._transforms)
        else:
            pool = {tid: s for tid, s in self._transforms.items() if tid in requested_ids}

        waiting: dict[str, int] = {}
        dependents: dict[str, list[str]] = {tid: [] for tid in pool}
        for tid, spec in pool.items():
            unknown = [d for d in spec.dependencies if d not in self._transforms]
            if unknown:
                raise InvariantViolation(f"Transform {tid} depends on unknown {unknown[0]}")
            inside = [d for d in spec.dependencies if d in pool]
            waiting[tid] = len(inside)
            for dep in inside:
                dependents[dep].append(tid)

        ready = [tid for tid, n in waiting.items() if n == 0]
        heapq.heapify(ready)
        ordered: list[TransformSpec] = []
        while ready:
            tid = heapq.heappop(ready)
            ordered.append(pool[tid])
            for other in dependents[tid]:
                waiting[other] -= 1
                if waiting[other] == 0:
                    heapq.heappush(ready, other)

        if len(ordered) != len(pool):
            stuck = sorted(set(pool) - {s.id for s in ordered})
            raise InvariantViolation(f"Circular dependency among transforms: {', '.join(stuck)}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level table of stage functions. Holds code, never per-run state.
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register a stage function under ``id``."""

    def decorator(fn: Callable[["LayoutContext"], None]):
        _registry.register(
            TransformSpec(id=id, layer=layer, fn=fn, dependencies=dependencies or [], description=description)
        )
        return fn

    return decorator
