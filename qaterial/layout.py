"""Material responsive grid: resize items to a number of columns by breakpoint."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Callable, Iterable

from .elements import Signal, _Element, _Property

__all__ = [
    "EXTRA_LARGE_BREAKPOINT",
    "LARGE_BREAKPOINT",
    "MEDIUM_BREAKPOINT",
    "SMALL_BREAKPOINT",
    "LayoutBreakpoint",
    "LayoutFill",
    "Flow",
    "LayoutDirection",
    "LayoutItem",
    "LayoutAttached",
    "Layout",
    "size_to_type",
    "default_preferred_fill",
]

EXTRA_LARGE_BREAKPOINT = 1280.0
LARGE_BREAKPOINT = 960.0
MEDIUM_BREAKPOINT = 600.0
SMALL_BREAKPOINT = 360.0


class LayoutBreakpoint(IntEnum):
    EXTRA_LARGE = 0
    LARGE = 1
    MEDIUM = 2
    SMALL = 3
    EXTRA_SMALL = 4


class LayoutFill(IntEnum):
    """How many twelfths of a row an item fills."""

    FILL_PARENT = 12
    FILL_HALF = 6
    FILL_THIRD = 4
    FILL_QUARTER = 3
    FILL_SIXTH = 2
    FILL_TWELFTH = 1


class Flow(IntEnum):
    LEFT_TO_RIGHT = 0
    TOP_TO_BOTTOM = 1


class LayoutDirection(IntEnum):
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


def size_to_type(size: float) -> LayoutBreakpoint:
    """The breakpoint a container of *size* falls into."""
    if size >= EXTRA_LARGE_BREAKPOINT:
        return LayoutBreakpoint.EXTRA_LARGE
    if size >= LARGE_BREAKPOINT:
        return LayoutBreakpoint.LARGE
    if size >= MEDIUM_BREAKPOINT:
        return LayoutBreakpoint.MEDIUM
    if size >= SMALL_BREAKPOINT:
        return LayoutBreakpoint.SMALL
    return LayoutBreakpoint.EXTRA_SMALL


_DEFAULT_FILLS = {
    LayoutBreakpoint.EXTRA_LARGE: LayoutFill.FILL_TWELFTH,
    LayoutBreakpoint.LARGE: LayoutFill.FILL_SIXTH,
    LayoutBreakpoint.MEDIUM: LayoutFill.FILL_QUARTER,
    LayoutBreakpoint.SMALL: LayoutFill.FILL_HALF,
    LayoutBreakpoint.EXTRA_SMALL: LayoutFill.FILL_PARENT,
}

_COLUMNS = {
    LayoutBreakpoint.EXTRA_LARGE: 12,
    LayoutBreakpoint.LARGE: 12,
    LayoutBreakpoint.MEDIUM: 8,
    LayoutBreakpoint.SMALL: 4,
    LayoutBreakpoint.EXTRA_SMALL: 4,
}


def default_preferred_fill(breakpoint: int) -> LayoutFill:
    """Fill used for items without attached settings at *breakpoint*."""
    return _DEFAULT_FILLS.get(breakpoint, LayoutFill.FILL_PARENT)


class LayoutItem:
    """A resizable item: explicit width/height override the implicit ones until reset."""

    def __init__(self, implicit_width: float = 0.0, implicit_height: float = 0.0) -> None:
        self.implicit_width = float(implicit_width)
        self.implicit_height = float(implicit_height)
        self._width: float | None = None
        self._height: float | None = None
        self.layout_attached: LayoutAttached | None = None
        self.width_changed = Signal()
        self.height_changed = Signal()

    @property
    def width(self) -> float:
        return self.implicit_width if self._width is None else self._width

    @width.setter
    def width(self, value: float) -> None:
        old = self.width
        self._width = float(value)
        if self.width != old:
            self.width_changed.emit(self.width)

    @property
    def height(self) -> float:
        return self.implicit_height if self._height is None else self._height

    @height.setter
    def height(self, value: float) -> None:
        old = self.height
        self._height = float(value)
        if self.height != old:
            self.height_changed.emit(self.height)

    def reset_width(self) -> None:
        """Go back to the implicit width."""
        old = self.width
        self._width = None
        if self.width != old:
            self.width_changed.emit(self.width)

    def reset_height(self) -> None:
        """Go back to the implicit height."""
        old = self.height
        self._height = None
        if self.height != old:
            self.height_changed.emit(self.height)

    def __repr__(self) -> str:
        return f"LayoutItem(width={self.width!r}, height={self.height!r})"


class LayoutAttached(_Element):
    """Per-item fill, in twelfths, for each breakpoint."""

    extra_large = _Property(default_preferred_fill(LayoutBreakpoint.EXTRA_LARGE))
    large = _Property(default_preferred_fill(LayoutBreakpoint.LARGE))
    medium = _Property(default_preferred_fill(LayoutBreakpoint.MEDIUM))
    small = _Property(default_preferred_fill(LayoutBreakpoint.SMALL))
    extra_small = _Property(default_preferred_fill(LayoutBreakpoint.EXTRA_SMALL))

    def _fill_for(self, breakpoint: int) -> int:
        fills = {
            LayoutBreakpoint.EXTRA_LARGE: self.extra_large,
            LayoutBreakpoint.LARGE: self.large,
            LayoutBreakpoint.MEDIUM: self.medium,
            LayoutBreakpoint.SMALL: self.small,
            LayoutBreakpoint.EXTRA_SMALL: self.extra_small,
        }
        return int(fills.get(breakpoint, LayoutFill.FILL_PARENT))


class Layout(_Element):
    """Resizes its items along the flow so they follow the Material grid."""

    extra_large_breakpoint = EXTRA_LARGE_BREAKPOINT
    large_breakpoint = LARGE_BREAKPOINT
    medium_breakpoint = MEDIUM_BREAKPOINT
    small_breakpoint = SMALL_BREAKPOINT

    width = _Property(0.0)
    height = _Property(0.0)
    spacing = _Property(0.0)
    left_padding = _Property(0.0)
    right_padding = _Property(0.0)
    top_padding = _Property(0.0)
    bottom_padding = _Property(0.0)
    layout_direction = _Property(LayoutDirection.LEFT_TO_RIGHT)
    flow = _Property(Flow.LEFT_TO_RIGHT)

    def __init__(self, **values: Any) -> None:
        self._item_list: list[Any] = []
        self._items: list[LayoutItem] = []
        self._width_forced_once = False
        self._height_forced_once = False
        self._type = LayoutBreakpoint.EXTRA_LARGE
        self._columns = 0
        self._user_set_columns = False
        self._flow_changed = False

        self.type_changed = Signal()
        self.items_changed = Signal()
        self.columns_changed = Signal()

        recompute = lambda *_: self._compute_child_items_size()  # noqa: E731
        horizontal = lambda *_: self._trigger_horizontal_reevaluate()  # noqa: E731
        vertical = lambda *_: self._trigger_vertical_reevaluate()  # noqa: E731

        self.items_changed.connect(recompute)
        self.spacing_changed.connect(recompute)
        self.layout_direction_changed.connect(recompute)
        self.flow_changed.connect(self._on_flow_changed)

        self.width_changed.connect(horizontal)
        self.left_padding_changed.connect(horizontal)
        self.right_padding_changed.connect(horizontal)

        self.height_changed.connect(vertical)
        self.top_padding_changed.connect(vertical)
        self.bottom_padding_changed.connect(vertical)

        super().__init__(**values)

    # ──── properties ────

    @property
    def type(self) -> LayoutBreakpoint:
        """Breakpoint of the current width or height, depending on the flow."""
        return self._type

    def _set_type(self, value: LayoutBreakpoint) -> None:
        if value != self._type:
            self._type = value
            self.type_changed.emit(value)

    @property
    def items(self) -> list[Any]:
        return list(self._item_list)

    @items.setter
    def items(self, value: Iterable[Any]) -> None:
        self.set_items(value)

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, value: int) -> None:
        if self._set_columns(value):
            self._user_set_columns = True

    # ──── API ────

    def set_items(self, items: Iterable[Any]) -> None:
        """Lay out *items*; anything that is not a LayoutItem is ignored."""
        self._reset_items_width()
        self._reset_items_height()
        self._item_list = list(items)
        self._items = [item for item in self._item_list if isinstance(item, LayoutItem)]
        self.items_changed.emit()

    @staticmethod
    def attach(item: LayoutItem) -> LayoutAttached:
        """The per-breakpoint fill settings of *item*, created on first use."""
        if item.layout_attached is None:
            item.layout_attached = LayoutAttached()
        return item.layout_attached

    def reset_user_columns(self) -> None:
        """Forget the user's column count and derive it from the breakpoint again."""
        self._user_set_columns = False
        self._compute_columns_from_type()

    def force_update(self) -> None:
        """Recompute every item's size now."""
        self._compute_child_items_size()

    # ──── internals ────

    def _set_columns(self, value: int) -> bool:
        if value <= 0 or value == self._columns:
            return False
        self._columns = value
        self.columns_changed.emit()
        return True

    def _flow_is_left_to_right(self) -> bool:
        return self.flow == Flow.LEFT_TO_RIGHT

    def _flow_is_top_to_bottom(self) -> bool:
        return self.flow == Flow.TOP_TO_BOTTOM

    def _on_flow_changed(self, *_: Any) -> None:
        self._flow_changed = True
        self._compute_child_items_size()

    def _trigger_horizontal_reevaluate(self) -> None:
        if self._flow_is_left_to_right():
            self._compute_child_items_size()

    def _trigger_vertical_reevaluate(self) -> None:
        if self._flow_is_top_to_bottom():
            self._compute_child_items_size()

    def _compute_child_items_size(self) -> None:
        self._reset_items_size()
        self._evaluate_type()
        self._compute_columns_from_type()

        def resize(item: LayoutItem) -> None:
            size = self._preferred_size(item)
            if self._flow_is_left_to_right():
                item.width = size
            else:
                item.height = size

        self._for_each_item(resize)

        if self._flow_is_left_to_right():
            self._width_forced_once = True
        if self._flow_is_top_to_bottom():
            self._height_forced_once = True

    def _reset_items_width(self) -> None:
        if not self._width_forced_once:
            return
        for item in self._items:
            item.reset_width()
        self._width_forced_once = False

    def _reset_items_height(self) -> None:
        if not self._height_forced_once:
            return
        for item in self._items:
            item.reset_height()
        self._height_forced_once = False

    def _reset_items_size(self) -> None:
        if not self._flow_changed:
            return
        self._reset_items_width()
        self._reset_items_height()
        self._flow_changed = False

    def _evaluate_type(self) -> None:
        if self._flow_is_left_to_right():
            self._set_type(size_to_type(self.width))
        elif self._flow_is_top_to_bottom():
            self._set_type(size_to_type(self.height))

    def _padding_less_size(self) -> float:
        if self._flow_is_left_to_right():
            return self.width - self.left_padding - self.right_padding
        return self.height - self.top_padding - self.bottom_padding

    def _for_each_item(self, callback: Callable[[LayoutItem], None]) -> None:
        if self.layout_direction == LayoutDirection.LEFT_TO_RIGHT:
            ordered = self._items
        else:
            ordered = list(reversed(self._items))
        for item in ordered:
            callback(item)

    def _preferred_fill(self, item: LayoutItem) -> int:
        if item.layout_attached is None:
            return int(default_preferred_fill(self._type))
        return item.layout_attached._fill_for(self._type)

    def _fill_to_block_count(self, fill: int) -> int:
        return math.ceil(self._columns * (fill / 12.0))

    def _preferred_size(self, item: LayoutItem) -> float:
        consumed = self._fill_to_block_count(self._preferred_fill(item))
        if consumed <= 0:
            return 0.0
        all_spacing = (self._columns - 1) * self.spacing
        one_block = math.floor(self._padding_less_size() - all_spacing) / self._columns
        block = one_block * consumed
        overlapped_spacing = (consumed - 1) * self.spacing
        return float(math.floor(block + overlapped_spacing))

    def _compute_columns_from_type(self) -> None:
        if self._user_set_columns:
            return
        self._set_columns(_COLUMNS.get(self._type, 12))