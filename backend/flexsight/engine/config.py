"""Layout configuration — explicit, per-run parameters."""

from __future__ import annotations

from dataclasses import dataclass

from flexsight.engine.enums import BuildStage
from flexsight.engine.spatial_constants import (
    DEFAULT_TOLERANCE,
    HAIRLINE_THICKNESS,
    MIN_REPEAT_COUNT,
)


@dataclass
class LayoutConfig:
    """Controls tolerances, sizing policy and how far the pipeline runs."""

    # Numeric slack for every "equal enough" comparison (pixels)
    tolerance: float = DEFAULT_TOLERANCE

    # Border / divider detection
    hairline_thickness: float = HAIRLINE_THICKNESS

    # Multi-line text gets a fixed width instead of growing with content
    multi_line_text_fixed_width: bool = False

    # Repeated-pattern detection
    min_repeat_count: int = MIN_REPEAT_COUNT

    # PRE: debug placement only, TREE: build + debug placement, FULL: build + measure
    build_stage: BuildStage = BuildStage.FULL

    # Raise ConversionError from convert() when any transform failed
    strict: bool = True
