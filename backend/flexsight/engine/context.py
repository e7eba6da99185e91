"""LayoutContext — the single mutable state object flowing through all transforms.

Per-node results -> Node fields (specs, direction, roles, class_list)
Per-run state    -> LayoutContext.* (counter, laid_out, errors, diagnostics)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from flexsight.engine.config import LayoutConfig
from flexsight.engine.enums import LIST_ROLES, Direction, Role, SizeSpec
from flexsight.engine.tokens import StyleToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Absolute pixel box. Width and height are derived, never stored."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xywh(cls, left: float, top: float, width: float, height: float) -> Bounds:
        return cls(left, top, left + width, top + height)

    @classmethod
    def union(cls, nodes: Iterable[Node]) -> Bounds:
        boxes = [n.bounds for n in nodes]
        if not boxes:
            raise ValueError("Cannot compute bounds of an empty node list")
        return cls(
            min(b.left for b in boxes),
            min(b.top for b in boxes),
            max(b.right for b in boxes),
            max(b.bottom for b in boxes),
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def area(self) -> float:
        return self.width * self.height

    def side(self, name: str) -> float:
        return getattr(self, name)


class IndexCounter:
    """Monotonic creation-order stamp, one per conversion run."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def __call__(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def peek(self) -> int:
        return self._next


@dataclass(eq=False)
class Node:
    """A box in the design tree. Identity equality: a node is owned by one parent."""

    bounds: Bounds
    index: int = 0
    id: str | None = None
    width_spec: SizeSpec = SizeSpec.UNKNOWN
    height_spec: SizeSpec = SizeSpec.UNKNOWN
    direction: Direction = Direction.UNSET
    roles: set[Role] = field(default_factory=set)
    children: list[Node] = field(default_factory=list)
    attach_nodes: list[Node] = field(default_factory=list)
    class_list: list[StyleToken] = field(default_factory=list)
    # Literal text, or styled runs produced by the text stylizer
    text: str | list[Node] | None = None
    text_multi_line: bool = False
    font_size: float | None = None
    line_height: float | None = None
    tag_name: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    style: dict[str, str] = field(default_factory=dict)

    @property
    def area(self) -> float:
        return self.bounds.area

    @property
    def is_text(self) -> bool:
        return bool(self.text)

    @property
    def is_multi_line_text(self) -> bool:
        return self.is_text and self.text_multi_line

    @property
    def is_single_line_text(self) -> bool:
        return self.is_text and not self.text_multi_line

    @property
    def is_ghost(self) -> bool:
        """No visual styling of its own: a pure grouping wrapper."""
        return not self.class_list and not self.is_text and not self.style

    @property
    def is_list_container(self) -> bool:
        return bool(self.roles & LIST_ROLES)

    @property
    def is_flex_wrap_like(self) -> bool:
        return Role.LIST_WRAP in self.roles or self.is_multi_line_text

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def spec(self, dimension: str) -> SizeSpec:
        return self.width_spec if dimension == "width" else self.height_spec

    def set_spec(self, dimension: str, value: SizeSpec) -> None:
        if dimension == "width":
            self.width_spec = value
        else:
            self.height_spec = value

    def walk(self) -> Iterator[Node]:
        """Pre-order over the node, its children and its attach nodes."""
        yield self
        for child in self.children:
            yield from child.walk()
        for attach in self.attach_nodes:
            yield from attach.walk()

    def __repr__(self) -> str:
        b = self.bounds
        label = self.id or f"#{self.index}"
        return f"Node({label}, [{b.left},{b.top},{b.right},{b.bottom}])"


@dataclass
class LayoutContext:
    """Shared state flowing through the entire pipeline."""

    root: Node
    config: LayoutConfig = field(default_factory=LayoutConfig)
    counter: IndexCounter = field(default_factory=IndexCounter)

    # Indexes of nodes whose flow children are already arranged
    laid_out: set[int] = field(default_factory=set)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    diagnostics: list[str] = field(default_factory=list)

    @property
    def tolerance(self) -> float:
        return self.config.tolerance

    @property
    def num_nodes(self) -> int:
        return sum(1 for _ in self.root.walk())

    def new_node(self, bounds: Bounds, **kwargs) -> Node:
        """Synthesize a node stamped with the next creation index."""
        return Node(bounds=bounds, index=self.counter(), **kwargs)

    def mark_laid_out(self, node: Node) -> None:
        self.laid_out.add(node.index)

    def is_laid_out(self, node: Node) -> bool:
        return node.index in self.laid_out

    def diagnose(self, message: str, *args: object) -> None:
        """Record a soft heuristic failure."""
        text = message % args if args else message
        self.diagnostics.append(text)
        logger.info(text)
