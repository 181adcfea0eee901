"""Pane geometry: split arithmetic, pane chrome areas and adjacency."""

from __future__ import annotations

from dataclasses import dataclass, field

from split_tui.utils import Direction, Rect, SplitSide, contains

_U16_MAX = 0xFFFF
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

RATIO_SCALE = 10_000
RATIO_HALF = RATIO_SCALE // 2

PANE_INNER_MARGIN = 1
# One row of title text directly under the top border.
PANE_TITLE_BAR_HEIGHT = 1


def _sat_add(a: int, b: int) -> int:
    return min(a + b, _U16_MAX)


def _sat_sub(a: int, b: int) -> int:
    return max(a - b, 0)


def _sat_mul(a: int, b: int) -> int:
    return min(a * b, _U16_MAX)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class ExposedSides:
    """Which sides of a pane lie on the outer edge of the layout."""

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False


ALL_EXPOSED = ExposedSides(top=True, bottom=True, left=True, right=True)


def pane_title_y(area: Rect) -> int:
    """Row of the title text, just under the top border."""
    return _sat_add(area.y, 1)


def pane_title_bar_area(area: Rect) -> Rect:
    """The title bar between the borders, under the top edge."""
    return Rect(
        x=_sat_add(area.x, 1),
        y=_sat_add(area.y, 1),
        width=_sat_sub(area.width, 2),
        height=min(PANE_TITLE_BAR_HEIGHT, _sat_sub(area.height, 2)),
    )


def pane_inner_area(area: Rect, exposed: ExposedSides) -> Rect:
    """The terminal content area inside a pane's border, title bar and margin."""
    inset = 1 + PANE_INNER_MARGIN
    top_chrome = 1 + PANE_TITLE_BAR_HEIGHT + PANE_INNER_MARGIN
    return Rect(
        x=_sat_add(area.x, inset),
        y=_sat_add(area.y, top_chrome),
        width=_sat_sub(area.width, _sat_mul(inset, 2)),
        height=_sat_sub(area.height, top_chrome + 1 + PANE_INNER_MARGIN),
    )


def pane_title_hit_area(area: Rect, title: str) -> Rect | None:
    """The cells covered by the centred title text, or None if there is no room."""
    if area.width <= 2 or area.height <= PANE_TITLE_BAR_HEIGHT:
        return None
    bar_width = _sat_sub(area.width, 2)
    if bar_width == 0:
        return None
    text_width = min(len(title), bar_width)
    offset = _sat_sub(bar_width, text_width) // 2
    return Rect(
        x=_sat_add(_sat_add(area.x, 1), offset),
        y=pane_title_y(area),
        width=text_width,
        height=1,
    )


@dataclass(frozen=True)
class Placement:
    """A pane and the screen area it occupies."""

    pane_id: int
    area: Rect
    exposed: ExposedSides = ALL_EXPOSED

    def title_hit(self, title: str, focused: bool, x: int, y: int) -> bool:
        """True if (x, y) falls on the pane's title text."""
        hit = pane_title_hit_area(self.area, title)
        return hit is not None and contains(hit, x, y)

    def maximize_hit(self, x: int, y: int) -> bool:
        """True if (x, y) falls on the maximize control."""
        if self.area.width < 9 or self.area.height <= PANE_TITLE_BAR_HEIGHT:
            return False
        button = Rect(
            x=_sat_sub(self.area.right(), 8), y=pane_title_y(self.area), width=3, height=1
        )
        return contains(button, x, y)

    def close_hit(self, x: int, y: int) -> bool:
        """True if (x, y) falls on the close control."""
        if self.area.width < 6 or self.area.height <= PANE_TITLE_BAR_HEIGHT:
            return False
        button = Rect(
            x=_sat_sub(self.area.right(), 4), y=pane_title_y(self.area), width=3, height=1
        )
        return contains(button, x, y)


@dataclass(frozen=True)
class DebugPlacement:
    """A pane's container and pane areas in the debug container view."""

    pane_id: int
    container_area: Rect
    pane_area: Rect


@dataclass(frozen=True)
class DebugContainer:
    """A split's container box and divider in the debug container view."""

    area: Rect
    divider_area: Rect


@dataclass
class ResizeBoundary:
    """A divider between two subtrees that can be dragged."""

    direction: Direction
    first_area: Rect
    second_area: Rect
    divider_area: Rect | None
    first_pane_ids: list[int] = field(default_factory=list)
    second_pane_ids: list[int] = field(default_factory=list)
    depth: int = 0


@dataclass(frozen=True)
class SplitChunks:
    """The two halves of a split area and the divider between them."""

    first: Rect
    divider: Rect
    second: Rect


def inset_rect(area: Rect, amount: int) -> Rect:
    """Shrink area by amount on every side, never beyond half its size."""
    inset = min(amount, area.width // 2, area.height // 2)
    return Rect(
        x=_sat_add(area.x, inset),
        y=_sat_add(area.y, inset),
        width=_sat_sub(area.width, _sat_mul(inset, 2)),
        height=_sat_sub(area.height, _sat_mul(inset, 2)),
    )


def split_area_by_ratio(area: Rect, direction: Direction, ratio: int) -> SplitChunks:
    """Split area in two; the divider overlaps the first cell of the second half."""
    ratio = normalize_ratio(ratio)
    if direction is Direction.HORIZONTAL:
        first_width = proportional_first_size(area.width, ratio)
        second_x = _sat_add(area.x, first_width)
        return SplitChunks(
            first=Rect(area.x, area.y, first_width, area.height),
            divider=Rect(second_x, area.y, int(area.width > 1), area.height),
            second=Rect(second_x, area.y, _sat_sub(area.width, first_width), area.height),
        )
    first_height = proportional_first_size(area.height, ratio)
    second_y = _sat_add(area.y, first_height)
    return SplitChunks(
        first=Rect(area.x, area.y, area.width, first_height),
        divider=Rect(area.x, second_y, area.width, int(area.height > 1)),
        second=Rect(area.x, second_y, area.width, _sat_sub(area.height, first_height)),
    )


def split_inner_with_divider(area: Rect, direction: Direction, ratio: int) -> SplitChunks:
    """Split area in two with a one-cell divider between, when there is room for it."""
    ratio = normalize_ratio(ratio)
    if direction is Direction.HORIZONTAL:
        divider_width = int(area.width >= 3)
        available = _sat_sub(area.width, divider_width)
        first_width = proportional_first_size(available, ratio)
        second_width = _sat_sub(available, first_width)
        divider_x = _sat_add(area.x, first_width)
        return SplitChunks(
            first=Rect(area.x, area.y, first_width, area.height),
            divider=Rect(divider_x, area.y, divider_width, area.height),
            second=Rect(_sat_add(divider_x, divider_width), area.y, second_width, area.height),
        )
    divider_height = int(area.height >= 3)
    available = _sat_sub(area.height, divider_height)
    first_height = proportional_first_size(available, ratio)
    second_height = _sat_sub(available, first_height)
    divider_y = _sat_add(area.y, first_height)
    return SplitChunks(
        first=Rect(area.x, area.y, area.width, first_height),
        divider=Rect(area.x, divider_y, area.width, divider_height),
        second=Rect(area.x, _sat_add(divider_y, divider_height), area.width, second_height),
    )


def split_debug_container_with_divider(
    area: Rect, direction: Direction, ratio: int
) -> SplitChunks | None:
    """Split a debug container box; None if nothing is left inside its border."""
    inner = inset_rect(area, 1)
    if inner.width == 0 or inner.height == 0:
        return None
    chunks = split_inner_with_divider(inner, direction, ratio)
    divider = debug_divider_area(area, chunks.divider, direction)
    return SplitChunks(
        first=debug_first_area(area, divider, direction),
        divider=divider,
        second=debug_second_area(area, divider, direction),
    )


def debug_divider_area(area: Rect, divider: Rect, direction: Direction) -> Rect:
    """Stretch an inner divider across the whole container."""
    if direction is Direction.HORIZONTAL:
        return Rect(divider.x, area.y, divider.width, area.height)
    return Rect(area.x, divider.y, area.width, divider.height)


def debug_first_area(area: Rect, divider: Rect, direction: Direction) -> Rect:
    """The part of the container before the divider."""
    if direction is Direction.HORIZONTAL:
        return Rect(area.x, area.y, _sat_sub(divider.x, area.x), area.height)
    return Rect(area.x, area.y, area.width, _sat_sub(divider.y, area.y))


def debug_second_area(area: Rect, divider: Rect, direction: Direction) -> Rect:
    """The part of the container after the divider."""
    if direction is Direction.HORIZONTAL:
        x = divider.right()
        return Rect(x, area.y, _sat_sub(area.right(), x), area.height)
    y = divider.bottom()
    return Rect(area.x, y, area.width, _sat_sub(area.bottom(), y))


def proportional_first_size(total: int, ratio: int) -> int:
    """Size of the first half, leaving at least one cell on each side."""
    if total <= 1:
        return total
    return _clamp((total * ratio) // RATIO_SCALE, 1, total - 1)


def normalize_ratio(ratio: int) -> int:
    """Bring a ratio to basis points; values up to 100 are read as percentages."""
    if ratio <= 100:
        value = min(ratio * (RATIO_SCALE // 100), _U16_MAX)
    else:
        value = min(ratio, RATIO_SCALE - 1)
    return max(value, 1)


def ratio_for_first_rendered_size(size: int, total: int) -> int:
    """The smallest ratio whose first half renders at least size cells of total."""
    if total <= 0:
        return 1
    numerator = _clamp(_clamp(size * RATIO_SCALE, _I32_MIN, _I32_MAX) + (total - 1), _I32_MIN, _I32_MAX)
    quotient = abs(numerator) // total
    if numerator < 0:
        quotient = -quotient
    return _clamp(quotient, 1, RATIO_SCALE - 1)


def placement_is_adjacent(current: Rect, candidate: Rect, side: SplitSide) -> bool:
    """True if candidate touches current along the given side."""
    return adjacent_overlap(current, candidate, side) > 0


def adjacent_overlap(current: Rect, candidate: Rect, side: SplitSide) -> int:
    """Length of the shared edge between current and candidate on the given side."""
    if side is SplitSide.TOP:
        if candidate.bottom() != current.y:
            return 0
        return overlap(candidate.x, candidate.right(), current.x, current.right())
    if side is SplitSide.BOTTOM:
        if current.bottom() != candidate.y:
            return 0
        return overlap(candidate.x, candidate.right(), current.x, current.right())
    if side is SplitSide.LEFT:
        if candidate.right() != current.x:
            return 0
        return overlap(candidate.y, candidate.bottom(), current.y, current.bottom())
    if current.right() != candidate.x:
        return 0
    return overlap(candidate.y, candidate.bottom(), current.y, current.bottom())


def overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> int:
    """Length of the intersection of two half-open ranges."""
    return _sat_sub(min(end_a, end_b), max(start_a, start_b))