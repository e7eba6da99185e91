"""Repeated-pattern detection — fold runs of similar siblings into list containers.

Row lists: siblings are bucketed into rows by top edge and scanned left to
right for the shortest unit that repeats. A run that keeps consistent spacing
becomes a ``list-x`` container, or ``list-wrap`` when later rows continue it at
the same x positions. Parallel ``list-x`` rows with matching items merge into
one ``list-x`` of columns. Column lists fold a run of identical boxes stacked
with a uniform gap into ``list-y``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from flexsight.engine.context import Bounds, LayoutContext, Node
from flexsight.engine.enums import Direction, Role
from flexsight.engine.errors import InvariantViolation
from flexsight.utils.geometry import (
    item_gaps,
    middle_line_gaps,
    overlapping,
    overlapping_x,
)
from flexsight.utils.math_helpers import all_nums_equal, group_by_tolerance, num_eq

logger = logging.getLogger(__name__)


def _require_candidates(nodes: Sequence[Node], minimum: int = 2) -> None:
    if len(nodes) < minimum:
        raise InvariantViolation(
            f"List detection needs at least {minimum} candidates, got {len(nodes)}"
        )


def is_similar_size(a: Node, b: Node, tol: float) -> bool:
    if a.is_text and b.is_text:
        return num_eq(a.bounds.height, b.bounds.height, tol)
    if not a.is_text and not b.is_text:
        return num_eq(a.bounds.width, b.bounds.width, tol) and num_eq(
            a.bounds.height, b.bounds.height, tol
        )
    return False


def is_similar_box(a: Node, b: Node, tol: float) -> bool:
    """Same top, and the same text height or the same box size."""
    return num_eq(a.bounds.top, b.bounds.top, tol) and is_similar_size(a, b, tol)


def find_repeat(seq: Sequence[Node], tol: float) -> tuple[int, int] | None:
    """Shortest unit repeated from the start of seq, as (unit length, instance count)."""
    _require_candidates(seq)
    n = len(seq)
    for unit in range(1, n // 2 + 1):
        if not all(is_similar_box(seq[k], seq[unit + k], tol) for k in range(unit)):
            continue
        count = 2
        while (count + 1) * unit <= n and all(
            is_similar_box(seq[k], seq[count * unit + k], tol) for k in range(unit)
        ):
            count += 1
        return unit, count
    return None


def _has_partial_tail(seq: Sequence[Node], unit: int, count: int, tol: float) -> bool:
    tail = seq[unit * count : unit * (count + 1)]
    return 0 < len(tail) < unit and all(is_similar_box(seq[k], tail[k], tol) for k in range(len(tail)))


def spacing_consistent(instances: list[list[Node]], tol: float) -> bool:
    """Uniform item gaps for single-field runs, matching inner gaps for composite ones."""
    if len(instances[0]) == 1:
        items = [inst[0] for inst in instances]
        if all(item.is_text for item in items):
            # Text widths vary with content; compare center lines instead
            return all_nums_equal(middle_line_gaps(items, horizontal=True), tol)
        return all_nums_equal(item_gaps(items, horizontal=True), tol)

    inner = [item_gaps(inst, horizontal=True) for inst in instances]
    return all(all_nums_equal(column, tol) for column in zip(*inner))


def _rows_of(nodes: list[Node], tol: float) -> list[list[Node]]:
    ordered = sorted(nodes, key=lambda n: (n.bounds.top, n.bounds.left, n.index))
    rows = group_by_tolerance(ordered, key=lambda n: n.bounds.top, tol=tol)
    return [sorted(row, key=lambda n: (n.bounds.left, n.index)) for row in rows]


def _match_wrapped_row(
    first_row: list[list[Node]],
    candidates: list[Node],
    tol: float,
) -> list[list[Node]]:
    """Leading units of a later row that line up with the first row's units."""
    template = first_row[0]
    unit = len(template)
    offsets = [m.bounds.left - template[0].bounds.left for m in template]
    taken: list[list[Node]] = []
    for k, instance in enumerate(first_row):
        group = candidates[k * unit : (k + 1) * unit]
        if len(group) < unit:
            break
        if not num_eq(group[0].bounds.left, instance[0].bounds.left, tol):
            break
        if not all(is_similar_size(template[m], group[m], tol) for m in range(unit)):
            break
        if not all(
            num_eq(group[m].bounds.left - group[0].bounds.left, offsets[m], tol) for m in range(unit)
        ):
            break
        taken.append(group)
    return taken


def _extend_wrap(
    instances: list[list[Node]],
    later_rows: list[list[Node]],
    tol: float,
) -> list[list[list[Node]]]:
    """Continue a row run into following rows (flex-wrap). Returns the matched rows."""
    rows = [instances]
    pitch: float | None = None
    for later in later_rows:
        if len(rows[-1]) != len(instances):
            # Only the last wrapped row may be short
            break
        taken = _match_wrapped_row(instances, later, tol)
        if not taken:
            break
        prev_top = rows[-1][0][0].bounds.top
        prev_bottom = max(n.bounds.bottom for inst in rows[-1] for n in inst)
        top = taken[0][0].bounds.top
        if top < prev_bottom - tol:
            break
        step = top - prev_top
        if pitch is None:
            pitch = step
        elif not num_eq(pitch, step, tol):
            break
        rows.append(taken)
    return rows


def _covers_other(wrapped: list[list[list[Node]]], siblings: list[Node]) -> bool:
    members = [n for wrapped_row in wrapped for inst in wrapped_row for n in inst]
    probe = Node(bounds=Bounds.union(members))
    ids = {id(n) for n in members}
    return any(id(n) not in ids and overlapping(n, probe) for n in siblings)


def _make_items(ctx: LayoutContext, instances: list[list[Node]]) -> list[Node]:
    items: list[Node] = []
    for inst in instances:
        if len(inst) == 1:
            item = inst[0]
        else:
            item = ctx.new_node(Bounds.union(inst), children=list(inst))
        item.roles.add(Role.LIST_ITEM)
        items.append(item)
    return items


def detect_row_lists(ctx: LayoutContext, parent: Node) -> list[Node]:
    """Fold horizontal runs of similar siblings. Returns the new list containers."""
    config = ctx.config
    tol = config.tolerance
    if len(parent.children) < config.min_repeat_count:
        return []

    current = list(parent.children)
    rows = _rows_of(current, tol)
    created: list[Node] = []

    for r, row in enumerate(rows):
        i = 0
        while i < len(row) - 1:
            seq = row[i:]
            found = find_repeat(seq, tol)
            if found is None:
                i += 1
                continue
            unit, count = found
            if count < config.min_repeat_count:
                i += 1
                continue
            if _has_partial_tail(seq, unit, count, tol):
                ctx.diagnose("Dropped a trailing partial repeat after %d instances in %r", count, parent)

            instances = [list(seq[k * unit : (k + 1) * unit]) for k in range(count)]
            if not spacing_consistent(instances, tol):
                ctx.diagnose("Repeat of %d x %d in %r has uneven spacing; kept as flow", count, unit, parent)
                i += 1
                continue

            if _covers_other([instances], current):
                ctx.diagnose("Repeat in %r would overlap other siblings; kept as flow", parent)
                i += 1
                continue

            wrapped = _extend_wrap(instances, rows[r + 1 :], tol) if i == 0 else [instances]
            while len(wrapped) > 1 and _covers_other(wrapped, current):
                ctx.diagnose("Wrapped row %d in %r would cover other siblings; dropped", len(wrapped), parent)
                wrapped.pop()
            all_instances = [inst for wrapped_row in wrapped for inst in wrapped_row]
            items = _make_items(ctx, all_instances)
            role = Role.LIST_WRAP if len(wrapped) > 1 else Role.LIST_X
            container = ctx.new_node(
                Bounds.union(items),
                direction=Direction.ROW,
                roles={role},
                children=items,
            )
            ctx.mark_laid_out(container)
            logger.debug("%s with %d items (unit %d) in %r", role.value, len(items), unit, parent)

            consumed = {id(n) for inst in all_instances for n in inst}
            for later in rows[r + 1 :]:
                later[:] = [n for n in later if id(n) not in consumed]
            position = min(k for k, n in enumerate(current) if id(n) in consumed)
            current = [n for n in current if id(n) not in consumed]
            current.insert(min(position, len(current)), container)
            created.append(container)
            i += unit * count

    parent.children = current
    merge_parallel_lists(ctx, parent, [c for c in created if c.roles == {Role.LIST_X}])
    return created


def _list_gap(node: Node, tol: float) -> float | None:
    gaps = item_gaps(node.children, horizontal=True)
    return gaps[0] if all_nums_equal(gaps, tol) else None


def _can_merge(a: Node, b: Node, others: list[Node], tol: float) -> bool:
    if len(a.children) != len(b.children) or len(a.children) < 2:
        return False
    gap_a, gap_b = _list_gap(a, tol), _list_gap(b, tol)
    if gap_a is None or gap_b is None or not num_eq(gap_a, gap_b, tol):
        return False
    if not all(overlapping_x(x, y) for x, y in zip(a.children, b.children)):
        return False
    if a.bounds.bottom < b.bounds.top:
        between = Node(
            bounds=Bounds(
                min(a.bounds.left, b.bounds.left),
                a.bounds.bottom,
                max(a.bounds.right, b.bounds.right),
                b.bounds.top,
            )
        )
        if any(overlapping(o, between) for o in others if o is not a and o is not b):
            return False
    return True


def merge_parallel_lists(ctx: LayoutContext, parent: Node, candidates: list[Node]) -> None:
    """Transpose adjacent, matching list-x rows into one list-x of columns (a grid)."""
    tol = ctx.tolerance
    lists = sorted(candidates, key=lambda n: (n.bounds.top, n.index))
    if len(lists) < 2:
        return

    chains: list[list[Node]] = [[lists[0]]]
    for node in lists[1:]:
        if _can_merge(chains[-1][-1], node, parent.children, tol):
            chains[-1].append(node)
        else:
            chains.append([node])

    for chain in chains:
        if len(chain) < 2:
            continue
        columns: list[Node] = []
        for column_items in zip(*(lst.children for lst in chain)):
            for item in column_items:
                item.roles.discard(Role.LIST_ITEM)
            column = ctx.new_node(
                Bounds.union(column_items),
                children=list(column_items),
                roles={Role.LIST_ITEM},
            )
            columns.append(column)
        merged = ctx.new_node(
            Bounds.union(columns),
            direction=Direction.ROW,
            roles={Role.LIST_X},
            children=columns,
        )
        ctx.mark_laid_out(merged)
        logger.debug("Merged %d parallel lists into a %d-column grid", len(chain), len(columns))

        chain_ids = {id(n) for n in chain}
        position = min(k for k, n in enumerate(parent.children) if id(n) in chain_ids)
        remaining = [n for n in parent.children if id(n) not in chain_ids]
        remaining.insert(min(position, len(remaining)), merged)
        parent.children = remaining


def _is_column_similar(a: Node, b: Node, tol: float) -> bool:
    return (
        num_eq(a.bounds.left, b.bounds.left, tol)
        and num_eq(a.bounds.width, b.bounds.width, tol)
        and num_eq(a.bounds.height, b.bounds.height, tol)
    )


def _longest_column_run(children: list[Node], tol: float) -> tuple[int, int]:
    """Start and end (exclusive) of the longest uniform run, earliest on ties."""
    best = (0, 1)
    start = 0
    while start < len(children) - 1:
        end = start + 1
        gap: float | None = None
        while end < len(children) and _is_column_similar(children[end - 1], children[end], tol):
            step = children[end].bounds.top - children[end - 1].bounds.bottom
            if gap is None:
                gap = step
            elif not num_eq(gap, step, tol):
                break
            end += 1
        if end - start > best[1] - best[0]:
            best = (start, end)
        start = max(end - 1, start + 1)
    return best


def detect_column_list(ctx: LayoutContext, parent: Node) -> Node | None:
    """Fold one uniform vertical run of a Column box into list-y.

    Returns the list-y node: a new child, or the parent itself when the run
    covers every child.
    """
    _require_candidates(parent.children)
    tol = ctx.tolerance
    children = parent.children
    start, end = _longest_column_run(children, tol)
    if end - start < ctx.config.min_repeat_count:
        return None

    run = children[start:end]
    for item in run:
        item.roles.add(Role.LIST_ITEM)
    if end - start == len(children):
        parent.roles.add(Role.LIST_Y)
        return parent

    container = ctx.new_node(
        Bounds.union(run),
        direction=Direction.COLUMN,
        roles={Role.LIST_Y},
        children=list(run),
    )
    ctx.mark_laid_out(container)
    parent.children = children[:start] + [container] + children[end:]
    return container
