"""Input and output schema of a conversion run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from flexsight.engine.enums import Direction, Role, SizeSpec


class _Schema(BaseModel):
    # Accept both design-tool camelCase and snake_case keys
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NodeInput(_Schema):
    """One box of the design tree, in absolute page pixels."""

    id: str | None = None
    left: float
    top: float
    width: float | None = None
    height: float | None = None
    right: float | None = None
    bottom: float | None = None

    width_spec: SizeSpec = SizeSpec.UNKNOWN
    height_spec: SizeSpec = SizeSpec.UNKNOWN
    direction: Direction = Direction.UNSET
    roles: list[Role] = Field(default_factory=list)

    children: list[NodeInput] = Field(default_factory=list)
    attach_nodes: list[NodeInput] = Field(default_factory=list)

    # Plain text, or styled runs (each run is a node of its own)
    text: str | list[NodeInput] | None = None
    text_multi_line: bool = False
    font_size: float | None = Field(default=None, gt=0)
    line_height: float | None = Field(default=None, gt=0)

    tag_name: str | None = None
    class_list: list[str] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)
    style: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _complete_bounds(self) -> NodeInput:
        if self.width is None and self.right is None:
            raise ValueError("either width or right is required")
        if self.height is None and self.bottom is None:
            raise ValueError("either height or bottom is required")
        if self.width is None:
            self.width = self.right - self.left
        if self.height is None:
            self.height = self.bottom - self.top
        if self.right is not None and abs(self.right - self.left - self.width) > 1e-6:
            raise ValueError("right does not match left + width")
        if self.bottom is not None and abs(self.bottom - self.top - self.height) > 1e-6:
            raise ValueError("bottom does not match top + height")
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must not be negative")
        return self


class BoundsOutput(BaseModel):
    left: float
    top: float
    right: float
    bottom: float
    width: float
    height: float


class TokenOutput(BaseModel):
    property: str
    axis: str | None = None
    value: float | None = None


class NodeOutput(BaseModel):
    """Snapshot of a laid-out node. Roles are sorted, tokens keep emission order."""

    id: str | None = None
    index: int
    bounds: BoundsOutput
    width_spec: SizeSpec
    height_spec: SizeSpec
    direction: Direction
    roles: list[Role] = Field(default_factory=list)
    class_list: list[TokenOutput] = Field(default_factory=list)
    class_names: list[str] = Field(default_factory=list)
    text: str | list[NodeOutput] | None = None
    tag_name: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    style: dict[str, str] = Field(default_factory=dict)
    children: list[NodeOutput] = Field(default_factory=list)
    attach_nodes: list[NodeOutput] = Field(default_factory=list)
