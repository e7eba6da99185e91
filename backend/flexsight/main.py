"""Conversion entry point: design tree in, flex layout tree out."""

from __future__ import annotations

import logging
from typing import Any

from flexsight.config import Settings, settings
from flexsight.engine.config import LayoutConfig
from flexsight.engine.context import LayoutContext
from flexsight.engine.errors import ConversionError
from flexsight.engine.pipeline import Pipeline
from flexsight.models.layout import NodeInput
from flexsight.tree.parser import parse_tree
from flexsight.tree.serializer import tree_to_dict

logger = logging.getLogger(__name__)


def configure_logging(config: Settings | None = None) -> None:
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    import importlib
    import pkgutil

    for layer_name in ["layer0", "layer1", "layer2"]:
        package_name = f"flexsight.engine.{layer_name}"
        try:
            package = importlib.import_module(package_name)
            for _, module_name, _ in pkgutil.iter_modules(package.__path__):
                importlib.import_module(f"{package_name}.{module_name}")
        except ModuleNotFoundError:
            logger.warning("Transform package %s not found", package_name)


def convert(data: dict[str, Any] | NodeInput, config: LayoutConfig | None = None) -> LayoutContext:
    """Run the layout pipeline on one design tree.

    The tree is rebuilt in place on the returned context's ``root``. With
    ``config.strict`` set, any failed transform raises ConversionError.
    """
    _register_transforms()
    config = config or settings.layout_config()
    ctx = parse_tree(data, config)
    Pipeline().run(ctx)
    if ctx.errors and config.strict:
        raise ConversionError(ctx.errors)
    return ctx


def convert_to_dict(data: dict[str, Any] | NodeInput, config: LayoutConfig | None = None) -> dict[str, Any]:
    return tree_to_dict(convert(data, config).root)
