"""flexsight layout inference engine."""

from flexsight.engine.registry import transform, Layer, get_registry
from flexsight.engine.context import Bounds, IndexCounter, LayoutContext, Node
from flexsight.engine.config import LayoutConfig
from flexsight.engine.enums import BuildStage, Direction, Role, SizeSpec
from flexsight.engine.errors import ConversionError, InvariantViolation, LayoutError
from flexsight.engine.pipeline import Pipeline
from flexsight.engine.tokens import StyleToken

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "Bounds",
    "IndexCounter",
    "LayoutContext",
    "Node",
    "LayoutConfig",
    "BuildStage",
    "Direction",
    "Role",
    "SizeSpec",
    "ConversionError",
    "InvariantViolation",
    "LayoutError",
    "Pipeline",
    "StyleToken",
]
