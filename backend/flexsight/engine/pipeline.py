"""Pipeline orchestrator — runs transforms in dependency order with build-stage gating."""

from __future__ import annotations

import logging
import time

from flexsight.engine.config import LayoutConfig
from flexsight.engine.context import LayoutContext
from flexsight.engine.enums import BuildStage
from flexsight.engine.registry import Layer, TransformRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config

    def run(self, ctx: LayoutContext) -> LayoutContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        if self.config is not None:
            ctx.config = self.config

        # Determine which layers to skip based on the requested build stage
        skip_ids = self._stage_gate(ctx)

        all_specs = self.registry.all()
        requested = {s.id for s in all_specs} - skip_ids
        ordered = self.registry.resolve_order(requested)

        logger.info(
            "Pipeline: %d transforms queued (%d skipped)",
            len(ordered),
            len(skip_ids),
        )

        blocked: set[str] = set()
        for spec in ordered:
            failed_deps = [d for d in spec.dependencies if d in ctx.errors or d in blocked]
            if failed_deps:
                blocked.add(spec.id)
                logger.warning("  %s SKIPPED: dependency %s did not complete", spec.id, failed_deps[0])
                continue

            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: LayoutContext, layer: Layer) -> LayoutContext:
        """Run only transforms in a specific layer."""
        specs = self.registry.get_layer(layer)
        for spec in specs:
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
        return ctx

    def _stage_gate(self, ctx: LayoutContext) -> set[str]:
        """Determine which transforms to skip for the configured build stage.

        - FULL runs the build and measure phases
        - TREE stops after the build phase and places the tree absolutely
        - PRE places the raw input tree absolutely without rebuilding it
        """
        stage = ctx.config.build_stage
        if stage == BuildStage.FULL:
            skipped_layers = {Layer.DEBUG}
        elif stage == BuildStage.TREE:
            skipped_layers = {Layer.MEASURE}
        else:
            skipped_layers = {Layer.BUILD, Layer.MEASURE}
        return {s.id for s in self.registry.all() if s.layer in skipped_layers}
