"""Tests for the transform registry."""

import pytest

from flexsight.engine.context import LayoutContext
from flexsight.engine.errors import InvariantViolation
from flexsight.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry
from flexsight.main import _register_transforms


def _noop(ctx: LayoutContext) -> None:
    pass


def test_register_and_get():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", layer=Layer.BUILD, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert "T0.01" in reg
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.BUILD, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(TransformSpec(id="T0.01", layer=Layer.BUILD, fn=_noop))


def test_get_layer():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.BUILD, fn=_noop))
    reg.register(TransformSpec(id="T1.01", layer=Layer.MEASURE, fn=_noop))
    layer0 = reg.get_layer(Layer.BUILD)
    assert len(layer0) == 1
    assert layer0[0].id == "T0.01"


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.02", layer=Layer.MEASURE, fn=_noop, dependencies=["T0.03"]))
    reg.register(TransformSpec(id="T0.03", layer=Layer.BUILD, fn=_noop))
    ids = [s.id for s in reg.resolve_order(None)]
    assert ids.index("T0.03") < ids.index("T1.02")


def test_resolve_order_does_not_pull_in_unrequested():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.BUILD, fn=_noop))
    reg.register(TransformSpec(id="T2.01", layer=Layer.DEBUG, fn=_noop, dependencies=["T0.01"]))
    assert [s.id for s in reg.resolve_order({"T2.01"})] == ["T2.01"]


def test_unknown_dependency_is_fatal():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.02", layer=Layer.BUILD, fn=_noop, dependencies=["T9.99"]))
    with pytest.raises(InvariantViolation):
        reg.resolve_order(None)


def test_builtin_transforms_registered():
    _register_transforms()
    reg = get_registry()
    ids = {s.id for s in reg.all()}
    assert {"T0.01", "T0.02", "T0.03", "T1.01", "T1.02", "T2.01"} <= ids
    assert {s.id for s in reg.get_layer(Layer.MEASURE)} == {"T1.01", "T1.02"}


def test_circular_dependency_is_fatal():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.02", layer=Layer.BUILD, fn=_noop, dependencies=["T0.03"]))
    reg.register(TransformSpec(id="T0.03", layer=Layer.BUILD, fn=_noop, dependencies=["T0.02"]))
    with pytest.raises(InvariantViolation, match="T0.02, T0.03"):
        reg.resolve_order(None)
