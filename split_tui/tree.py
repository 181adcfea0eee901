"""The binary split tree that arranges panes on screen."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterator

from split_tui.geometry import (
    RATIO_HALF,
    DebugContainer,
    DebugPlacement,
    ExposedSides,
    Placement,
    ResizeBoundary,
    debug_first_area,
    debug_second_area,
    inset_rect,
    normalize_ratio,
    ratio_for_first_rendered_size,
    split_area_by_ratio,
    split_debug_container_with_divider,
    split_inner_with_divider,
)
from split_tui.utils import Direction, Rect, SplitSide, contains

_U8_MAX = 0xFF
_USIZE_MAX = 2**64 - 1
_ASCII_WHITESPACE = b" \t\n\x0c\r"


def _next_depth(depth: int) -> int:
    return min(depth + 1, _U8_MAX)


def _child_exposed(
    direction: Direction, exposed: ExposedSides
) -> tuple[ExposedSides, ExposedSides]:
    if direction is Direction.VERTICAL:
        return dataclasses.replace(exposed, bottom=False), dataclasses.replace(exposed, top=False)
    return dataclasses.replace(exposed, right=False), dataclasses.replace(exposed, left=False)


def _signed_amount(side: SplitSide, amount: int) -> int:
    return -amount if side in (SplitSide.LEFT, SplitSide.TOP) else amount


def _side_matches(direction: Direction, side: SplitSide) -> bool:
    if direction is Direction.HORIZONTAL:
        return side in (SplitSide.LEFT, SplitSide.RIGHT)
    return side in (SplitSide.TOP, SplitSide.BOTTOM)


@dataclass
class Node:
    """A leaf holding one pane, or a split dividing its area between two subtrees."""

    pane_id: int | None = None
    direction: Direction | None = None
    ratio: int = 0
    first: Node | None = None
    second: Node | None = None

    @classmethod
    def leaf(cls, pane_id: int) -> Node:
        """A node showing a single pane."""
        return cls(pane_id=pane_id)

    @classmethod
    def split(cls, direction: Direction, ratio: int, first: Node, second: Node) -> Node:
        """A node dividing its area between first and second."""
        return cls(direction=direction, ratio=ratio, first=first, second=second)

    def is_leaf(self) -> bool:
        """True for a single-pane node."""
        return self.first is None

    def _become(self, other: Node) -> None:
        self.pane_id = other.pane_id
        self.direction = other.direction
        self.ratio = other.ratio
        self.first = other.first
        self.second = other.second

    def _parts(self) -> tuple[Direction, Node, Node]:
        assert self.direction is not None and self.first is not None and self.second is not None
        return self.direction, self.first, self.second

    def _chunks(self, area: Rect):
        return split_area_by_ratio(area, self.direction, normalize_ratio(self.ratio))

    def collect(self, area: Rect, exposed: ExposedSides) -> list[Placement]:
        """Placements of every pane in the tree, in leaf order."""
        return list(self._iter_placements(area, exposed))

    def _iter_placements(self, area: Rect, exposed: ExposedSides) -> Iterator[Placement]:
        if self.is_leaf():
            yield Placement(self.pane_id, area, exposed)
            return
        direction, first, second = self._parts()
        chunks = self._chunks(area)
        first_exposed, second_exposed = _child_exposed(direction, exposed)
        yield from first._iter_placements(chunks.first, first_exposed)
        yield from second._iter_placements(chunks.second, second_exposed)

    def placement_at(
        self, area: Rect, exposed: ExposedSides, x: int, y: int
    ) -> Placement | None:
        """The placement of the pane under (x, y), if any."""
        if not contains(area, x, y):
            return None
        if self.is_leaf():
            return Placement(self.pane_id, area, exposed)
        direction, first, second = self._parts()
        chunks = self._chunks(area)
        first_exposed, second_exposed = _child_exposed(direction, exposed)
        if contains(chunks.first, x, y):
            return first.placement_at(chunks.first, first_exposed, x, y)
        if contains(chunks.second, x, y):
            return second.placement_at(chunks.second, second_exposed, x, y)
        return None

    def collect_debug_areas(
        self, area: Rect
    ) -> tuple[list[DebugContainer], list[DebugPlacement]]:
        """Container boxes and pane areas of the debug container view."""
        containers: list[DebugContainer] = []
        placements: list[DebugPlacement] = []
        self._fill_debug_areas(area, containers, placements)
        return containers, placements

    def _fill_debug_areas(
        self,
        area: Rect,
        containers: list[DebugContainer],
        placements: list[DebugPlacement],
    ) -> None:
        if self.is_leaf():
            placements.append(DebugPlacement(self.pane_id, area, area))
            return
        direction, first, second = self._parts()
        chunks = split_debug_container_with_divider(area, direction, normalize_ratio(self.ratio))
        if chunks is None:
            return
        containers.append(DebugContainer(area, chunks.divider))
        first._fill_debug_areas(chunks.first, containers, placements)
        second._fill_debug_areas(chunks.second, containers, placements)

    def collect_debug_resize_boundaries(self, area: Rect, depth: int) -> list[ResizeBoundary]:
        """Draggable dividers of the debug container view, outermost first."""
        if self.is_leaf():
            return []
        direction, first, second = self._parts()
        chunks = split_debug_container_with_divider(area, direction, normalize_ratio(self.ratio))
        if chunks is None:
            return []
        boundaries = [
            ResizeBoundary(
                direction=direction,
                first_area=chunks.first,
                second_area=chunks.second,
                divider_area=chunks.divider,
                first_pane_ids=first.leaf_ids(),
                second_pane_ids=second.leaf_ids(),
                depth=depth,
            )
        ]
        boundaries += first.collect_debug_resize_boundaries(chunks.first, _next_depth(depth))
        boundaries += second.collect_debug_resize_boundaries(chunks.second, _next_depth(depth))
        return boundaries

    def collect_resize_boundaries(self, area: Rect, depth: int) -> list[ResizeBoundary]:
        """Draggable dividers between subtrees, outermost first."""
        if self.is_leaf():
            return []
        direction, first, second = self._parts()
        chunks = self._chunks(area)
        boundaries = [
            ResizeBoundary(
                direction=direction,
                first_area=chunks.first,
                second_area=chunks.second,
                divider_area=chunks.divider,
                first_pane_ids=first.leaf_ids(),
                second_pane_ids=second.leaf_ids(),
                depth=depth,
            )
        ]
        boundaries += first.collect_resize_boundaries(chunks.first, _next_depth(depth))
        boundaries += second.collect_resize_boundaries(chunks.second, _next_depth(depth))
        return boundaries

    def split_leaf(self, target_id: int, side: SplitSide, new_id: int) -> bool:
        """Split the target pane, placing the new pane on the given side."""
        if self.is_leaf():
            if self.pane_id != target_id:
                return False
            old, new = Node.leaf(target_id), Node.leaf(new_id)
            if side is SplitSide.TOP:
                replacement = Node.split(Direction.VERTICAL, RATIO_HALF, new, old)
            elif side is SplitSide.BOTTOM:
                replacement = Node.split(Direction.VERTICAL, RATIO_HALF, old, new)
            elif side is SplitSide.LEFT:
                replacement = Node.split(Direction.HORIZONTAL, RATIO_HALF, new, old)
            else:
                replacement = Node.split(Direction.HORIZONTAL, RATIO_HALF, old, new)
            self._become(replacement)
            return True
        _, first, second = self._parts()
        return first.split_leaf(target_id, side, new_id) or second.split_leaf(
            target_id, side, new_id
        )

    def resize_leaf_edge(
        self,
        target_id: int,
        side: SplitSide,
        amount: int,
        area: Rect,
        exposed: ExposedSides,
    ) -> bool:
        """Move the given edge of the target pane by amount cells."""
        if self.is_leaf():
            return False
        direction, first, second = self._parts()
        first_has = first.contains_pane_id(target_id)
        second_has = second.contains_pane_id(target_id)
        chunks = self._chunks(area)
        first_exposed, second_exposed = _child_exposed(direction, exposed)

        if first_has and first.resize_leaf_edge(
            target_id, side, amount, chunks.first, first_exposed
        ):
            return True
        if second_has and second.resize_leaf_edge(
            target_id, side, amount, chunks.second, second_exposed
        ):
            return True

        if direction is Direction.HORIZONTAL and area.width > 1:
            current, total = chunks.first.width, area.width
        elif direction is Direction.VERTICAL and area.height > 1:
            current, total = chunks.first.height, area.height
        else:
            return False

        if not (first_has or second_has) or not _side_matches(direction, side):
            return False
        following = current + _signed_amount(side, amount)
        following = max(1, min(following, total - 1))
        self.ratio = ratio_for_first_rendered_size(following, total)
        return True

    def _locate(self, pane_a: int, pane_b: int) -> tuple[bool, bool, bool]:
        _, first, second = self._parts()
        a_first, b_first = first.contains_pane_id(pane_a), first.contains_pane_id(pane_b)
        a_second, b_second = second.contains_pane_id(pane_a), second.contains_pane_id(pane_b)
        opposite = (a_first and b_second) or (a_second and b_first)
        return a_first and b_first, a_second and b_second, opposite

    def resize_between(
        self, pane_a: int, pane_b: int, side: SplitSide, amount: int, area: Rect
    ) -> bool:
        """Move the divider separating two panes by amount cells toward side."""
        if self.is_leaf():
            return False
        direction, first, second = self._parts()
        chunks = self._chunks(area)
        both_first, both_second, opposite = self._locate(pane_a, pane_b)

        if both_first and first.resize_between(pane_a, pane_b, side, amount, chunks.first):
            return True
        if both_second and second.resize_between(pane_a, pane_b, side, amount, chunks.second):
            return True
        if not opposite or not _side_matches(direction, side):
            return False

        if direction is Direction.HORIZONTAL and area.width > 1:
            current, total = chunks.first.width, area.width
        elif direction is Direction.VERTICAL and area.height > 1:
            current, total = chunks.first.height, area.height
        else:
            return False

        following = max(1, min(current + _signed_amount(side, amount), total - 1))
        self.ratio = ratio_for_first_rendered_size(following, total)
        return True

    def resize_between_debug(
        self, pane_a: int, pane_b: int, side: SplitSide, amount: int, area: Rect
    ) -> bool:
        """Like resize_between, measured in the debug container view."""
        if self.is_leaf():
            return False
        direction, first, second = self._parts()
        inner = inset_rect(area, 1)
        if inner.width == 0 or inner.height == 0:
            return False
        chunks = split_inner_with_divider(inner, direction, normalize_ratio(self.ratio))
        both_first, both_second, opposite = self._locate(pane_a, pane_b)

        if both_first and first.resize_between_debug(
            pane_a, pane_b, side, amount, debug_first_area(area, chunks.divider, direction)
        ):
            return True
        if both_second and second.resize_between_debug(
            pane_a, pane_b, side, amount, debug_second_area(area, chunks.divider, direction)
        ):
            return True
        if not opposite or not _side_matches(direction, side):
            return False

        if direction is Direction.HORIZONTAL and inner.width > 1:
            extent, current = inner.width, chunks.first.width
        elif direction is Direction.VERTICAL and inner.height > 1:
            extent, current = inner.height, chunks.first.height
        else:
            return False
        available = max(extent - int(extent >= 3), 0)
        if available <= 1:
            return False

        following = max(1, min(current + _signed_amount(side, amount), available - 1))
        self.ratio = ratio_for_first_rendered_size(following, available)
        return True

    def delete_leaf(self, target_id: int) -> int | None:
        """Remove a pane, letting its sibling take its place; return the pane to focus next."""
        if self.is_leaf():
            return None
        _, first, second = self._parts()
        if first.is_leaf() and first.pane_id == target_id:
            self._become(second)
            return self.first_leaf_id()
        if second.is_leaf() and second.pane_id == target_id:
            self._become(first)
            return self.first_leaf_id()
        result = first.delete_leaf(target_id)
        if result is None:
            result = second.delete_leaf(target_id)
        return result

    def first_leaf_id(self) -> int:
        """The pane in the top-left-most leaf."""
        node = self
        while not node.is_leaf():
            node = node.first
        return node.pane_id

    def max_leaf_id(self) -> int:
        """The largest pane id in the tree."""
        return max(self.leaf_ids())

    def leaf_ids(self) -> list[int]:
        """All pane ids in leaf order."""
        return [placement_id for placement_id in self._iter_ids()]

    def _iter_ids(self) -> Iterator[int]:
        if self.is_leaf():
            yield self.pane_id
            return
        _, first, second = self._parts()
        yield from first._iter_ids()
        yield from second._iter_ids()

    def contains_pane_id(self, pane_id: int) -> bool:
        """True if the pane appears anywhere in the tree."""
        return any(existing == pane_id for existing in self._iter_ids())

    def has_vertical_split(self) -> bool:
        """True if any split divides rows; purely horizontal layouts only apportion width."""
        if self.is_leaf():
            return False
        direction, first, second = self._parts()
        if direction is Direction.VERTICAL:
            return True
        return first.has_vertical_split() or second.has_vertical_split()

    def serialize(self) -> str:
        """Compact text form, such as S(H,5000,L(0),L(1))."""
        if self.is_leaf():
            return f"L({self.pane_id})"
        direction, first, second = self._parts()
        return f"S({direction.value},{self.ratio},{first.serialize()},{second.serialize()})"

    @classmethod
    def deserialize(cls, text: str) -> Node:
        """Parse the text form; raises ValueError if it is malformed."""
        parser = _Parser(text.encode("utf-8"))
        node = parser.parse_node()
        parser.skip_ws()
        if not parser.at_end():
            raise ValueError(f"trailing data in layout at offset {parser.pos}")
        return node


class _Parser:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def skip_ws(self) -> None:
        while not self.at_end() and self.data[self.pos] in _ASCII_WHITESPACE:
            self.pos += 1

    def bump(self) -> int:
        if self.at_end():
            raise ValueError("unexpected end of layout")
        byte = self.data[self.pos]
        self.pos += 1
        return byte

    def expect(self, expected: bytes) -> None:
        byte = self.bump()
        if byte != expected[0]:
            raise ValueError(f"expected {expected!r} at offset {self.pos - 1}")

    def parse_number(self) -> int:
        self.skip_ws()
        start = self.pos
        while not self.at_end() and 0x30 <= self.data[self.pos] <= 0x39:
            self.pos += 1
        if self.pos == start:
            raise ValueError(f"expected a number at offset {start}")
        value = int(self.data[start : self.pos])
        if value > _USIZE_MAX:
            raise ValueError(f"number too large at offset {start}")
        return value

    def parse_node(self) -> Node:
        self.skip_ws()
        tag = self.bump()
        if tag == ord("L"):
            self.expect(b"(")
            pane_id = self.parse_number()
            self.skip_ws()
            self.expect(b")")
            return Node.leaf(pane_id)
        if tag == ord("S"):
            self.expect(b"(")
            self.skip_ws()
            marker = self.bump()
            if marker == ord("V"):
                direction = Direction.VERTICAL
            elif marker == ord("H"):
                direction = Direction.HORIZONTAL
            else:
                raise ValueError(f"unknown split direction at offset {self.pos - 1}")
            self.skip_ws()
            self.expect(b",")
            ratio = normalize_ratio(self.parse_number() & 0xFFFF)
            self.skip_ws()
            self.expect(b",")
            first = self.parse_node()
            self.skip_ws()
            self.expect(b",")
            second = self.parse_node()
            self.skip_ws()
            self.expect(b")")
            return Node.split(direction, ratio, first, second)
        raise ValueError(f"unknown node tag at offset {self.pos - 1}")