"""Exception hierarchy for the layout engine."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for every error raised by flexsight."""


class InvariantViolation(LayoutError):
    """Upstream data broke an invariant a stage relies on. Not recoverable."""


class ConversionError(LayoutError):
    """A conversion run finished with failed transforms."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        detail = "; ".join(f"{tid}: {msg}" for tid, msg in sorted(self.errors.items()))
        super().__init__(f"Conversion failed: {detail}")
