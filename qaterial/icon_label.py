"""A visual item that lays out an icon item and a label item with an IconLabelPositioner."""

from __future__ import annotations

from typing import Any, Callable

from .elements import IconDescription, Signal
from .icon_label_positioner import Alignment, Display, IconLabelPositioner, Size

__all__ = ["Item", "IconLabel"]


class Item:
    """A visual item with position, size, implicit size, visibility and a parent item.

    The width and height follow the implicit ones until they are set explicitly.
    """

    def __init__(self, implicit_width: float = 0.0, implicit_height: float = 0.0) -> None:
        self._x = 0.0
        self._y = 0.0
        self._implicit_width = float(implicit_width)
        self._implicit_height = float(implicit_height)
        self._width: float | None = None
        self._height: float | None = None
        self._visible = True
        self._parent_item: Item | None = None
        self._component_complete = False

        self.x_changed = Signal()
        self.y_changed = Signal()
        self.width_changed = Signal()
        self.height_changed = Signal()
        self.implicit_width_changed = Signal()
        self.implicit_height_changed = Signal()
        self.visible_changed = Signal()
        self.parent_item_changed = Signal()

    # ──── position ────

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        value = float(value)
        if value != self._x:
            self._x = value
            self.x_changed.emit(value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        value = float(value)
        if value != self._y:
            self._y = value
            self.y_changed.emit(value)

    def set_position(self, x: float, y: float) -> None:
        """Move the item to (*x*, *y*)."""
        self.x = x
        self.y = y

    # ──── size ────

    @property
    def width(self) -> float:
        return self._implicit_width if self._width is None else self._width

    @width.setter
    def width(self, value: float) -> None:
        old = self.width
        self._width = float(value)
        if self.width != old:
            self.width_changed.emit(self.width)

    @property
    def height(self) -> float:
        return self._implicit_height if self._height is None else self._height

    @height.setter
    def height(self, value: float) -> None:
        old = self.height
        self._height = float(value)
        if self.height != old:
            self.height_changed.emit(self.height)

    def reset_width(self) -> None:
        """Let the width follow the implicit width again."""
        old = self.width
        self._width = None
        if self.width != old:
            self.width_changed.emit(self.width)

    def reset_height(self) -> None:
        """Let the height follow the implicit height again."""
        old = self.height
        self._height = None
        if self.height != old:
            self.height_changed.emit(self.height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def set_size(self, size: Size) -> None:
        """Set the explicit width and height from *size*."""
        self.width = size.width
        self.height = size.height

    @property
    def implicit_width(self) -> float:
        return self._implicit_width

    @implicit_width.setter
    def implicit_width(self, value: float) -> None:
        value = float(value)
        if value == self._implicit_width:
            return
        old_width = self.width
        self._implicit_width = value
        self.implicit_width_changed.emit(value)
        if self.width != old_width:
            self.width_changed.emit(self.width)

    @property
    def implicit_height(self) -> float:
        return self._implicit_height

    @implicit_height.setter
    def implicit_height(self, value: float) -> None:
        value = float(value)
        if value == self._implicit_height:
            return
        old_height = self.height
        self._implicit_height = value
        self.implicit_height_changed.emit(value)
        if self.height != old_height:
            self.height_changed.emit(self.height)

    def set_implicit_size(self, width: float, height: float) -> None:
        """Set both implicit dimensions."""
        self.implicit_width = width
        self.implicit_height = height

    # ──── tree and visibility ────

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        value = bool(value)
        if value != self._visible:
            self._visible = value
            self.visible_changed.emit(value)

    @property
    def parent_item(self) -> Item | None:
        return self._parent_item

    @parent_item.setter
    def parent_item(self, value: Item | None) -> None:
        if value is not self._parent_item:
            self._parent_item = value
            self.parent_item_changed.emit(value)

    # ──── construction ────

    @property
    def is_component_complete(self) -> bool:
        return self._component_complete

    def component_complete(self) -> None:
        """Mark the item as fully constructed."""
        self._component_complete = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, "
            f"width={self.width!r}, height={self.height!r})"
        )


_Connection = tuple[Signal, Callable[..., Any]]


class IconLabel(Item):
    """An item placing its icon item and label item through an IconLabelPositioner."""

    def __init__(self, implicit_width: float = 0.0, implicit_height: float = 0.0) -> None:
        super().__init__(implicit_width, implicit_height)
        self._positioner = IconLabelPositioner()
        self._icon: IconDescription | None = IconDescription()
        self._icon_item: Item | None = None
        self._label_item: Item | None = None
        self._connections: dict[str, list[_Connection]] = {"icon": [], "label_item": []}

        self.horizontal_alignment_changed = Signal()
        self.vertical_alignment_changed = Signal()
        self.display_changed = Signal()
        self.spacing_changed = Signal()
        self.mirrored_changed = Signal()
        self.icon_changed = Signal()
        self.icon_item_changed = Signal()
        self.label_item_changed = Signal()

        positioner = self._positioner
        positioner.set_enabled(False)

        positioner.horizontal_alignment_changed.connect(self.horizontal_alignment_changed.emit)
        positioner.vertical_alignment_changed.connect(self.vertical_alignment_changed.emit)
        positioner.display_changed.connect(self.display_changed.emit)
        positioner.spacing_changed.connect(self.spacing_changed.emit)
        positioner.mirrored_changed.connect(self.mirrored_changed.emit)

        positioner.implicit_size_changed.connect(lambda *_: self._update_implicit_size())
        positioner.icon_rect_changed.connect(lambda *_: self._update_icon_rect())
        positioner.label_rect_changed.connect(lambda *_: self._update_label_rect())

        self.width_changed.connect(lambda *_: self._update_container_size())
        self.height_changed.connect(lambda *_: self._update_container_size())

        positioner.container_size = self.size

    @property
    def positioner(self) -> IconLabelPositioner:
        return self._positioner

    # ──── positioner proxy ────

    @property
    def horizontal_alignment(self) -> Alignment:
        return self._positioner.horizontal_alignment

    @horizontal_alignment.setter
    def horizontal_alignment(self, value: Alignment) -> None:
        self._positioner.horizontal_alignment = value

    @property
    def vertical_alignment(self) -> Alignment:
        return self._positioner.vertical_alignment

    @vertical_alignment.setter
    def vertical_alignment(self, value: Alignment) -> None:
        self._positioner.vertical_alignment = value

    @property
    def display(self) -> Display:
        return self._positioner.display

    @display.setter
    def display(self, value: int) -> None:
        self._positioner.display = Display(value)

    @property
    def spacing(self) -> float:
        return self._positioner.spacing

    @spacing.setter
    def spacing(self, value: float) -> None:
        self._positioner.spacing = value

    @property
    def mirrored(self) -> bool:
        return self._positioner.mirrored

    @mirrored.setter
    def mirrored(self, value: bool) -> None:
        self._positioner.mirrored = value

    def reset_horizontal_alignment(self) -> None:
        """Restore the default horizontal alignment."""
        self._positioner.reset_horizontal_alignment()

    def reset_vertical_alignment(self) -> None:
        """Restore the default vertical alignment."""
        self._positioner.reset_vertical_alignment()

    def reset_display(self) -> None:
        """Restore the default display mode."""
        self._positioner.reset_display()

    def reset_spacing(self) -> None:
        """Restore the default spacing."""
        self._positioner.reset_spacing()

    def reset_mirrored(self) -> None:
        """Restore the default mirroring."""
        self._positioner.reset_mirrored()

    # ──── owned objects ────

    @property
    def icon(self) -> IconDescription | None:
        return self._icon

    @icon.setter
    def icon(self, value: IconDescription | None) -> None:
        if value is self._icon:
            return
        self._disconnect_from_icon()
        self._icon = value
        self._connect_to_icon()
        self.icon_changed.emit(value)

    @property
    def icon_item(self) -> Item | None:
        return self._icon_item

    @icon_item.setter
    def icon_item(self, value: Item | None) -> None:
        if value is self._icon_item:
            return
        self._disconnect_from_icon_item()
        self._icon_item = value
        self._connect_to_icon_item()
        self.icon_item_changed.emit(value)

    @property
    def label_item(self) -> Item | None:
        return self._label_item

    @label_item.setter
    def label_item(self, value: Item | None) -> None:
        if value is self._label_item:
            return
        self._disconnect_from_label_item()
        self._label_item = value
        self._connect_to_label_item()
        self.label_item_changed.emit(value)

    # ──── connections ────

    def _track(self, key: str, signal: Signal, slot: Callable[..., Any]) -> None:
        signal.connect(slot)
        self._connections[key].append((signal, slot))

    def _untrack(self, key: str) -> None:
        for signal, slot in self._connections[key]:
            signal.disconnect(slot)
        self._connections[key].clear()

    def _on_icon_changed(self, *_: Any) -> None:
        self._update_icon_implicit_size()

    def _on_label_implicit_size_changed(self, *_: Any) -> None:
        self._update_label_implicit_size()

    def _connect_to_icon(self) -> None:
        if not self.is_component_complete:
            return
        if self._icon is not None:
            self._track("icon", self._icon.source_changed, self._on_icon_changed)
            self._track("icon", self._icon.height_changed, self._on_icon_changed)
            self._track("icon", self._icon.width_changed, self._on_icon_changed)
        self._update_icon_implicit_size()

    def _disconnect_from_icon(self) -> None:
        if self._icon is None:
            return
        self._untrack("icon")

    def _connect_to_icon_item(self) -> None:
        if self._icon_item is not None:
            self._icon_item.parent_item = self
        if not self.is_component_complete:
            return
        if self._icon_item is not None:
            self._update_icon_item_visible()
        self._update_icon_implicit_size()

    def _disconnect_from_icon_item(self) -> None:
        if self._icon_item is None:
            return
        if self._icon_item.parent_item is self:
            self._icon_item.parent_item = None

    def _connect_to_label_item(self) -> None:
        if self._label_item is not None:
            self._label_item.parent_item = self
        if not self.is_component_complete:
            return
        if self._label_item is not None:
            self._update_label_item_visible()
            self._track(
                "label_item",
                self._label_item.implicit_width_changed,
                self._on_label_implicit_size_changed,
            )
            self._track(
                "label_item",
                self._label_item.implicit_height_changed,
                self._on_label_implicit_size_changed,
            )
        self._update_label_implicit_size()

    def _disconnect_from_label_item(self) -> None:
        if self._label_item is None:
            return
        self._untrack("label_item")
        if self._label_item.parent_item is self:
            self._label_item.parent_item = None

    # ──── updates ────

    def _update_icon_item_visible(self) -> None:
        if self._icon_item is not None:
            self._icon_item.visible = self.display != Display.TEXT_ONLY

    def _update_label_item_visible(self) -> None:
        if self._label_item is not None:
            self._label_item.visible = self.display != Display.ICON_ONLY

    def _update_icon_implicit_size(self) -> None:
        icon = self._icon
        if (
            self.display == Display.TEXT_ONLY
            or self._icon_item is None
            or icon is None
            or not icon.source
        ):
            self._positioner.reset_icon_implicit_size()
        else:
            self._positioner.icon_implicit_size = Size(float(icon.width), float(icon.height))

    def _update_label_implicit_size(self) -> None:
        label = self._label_item
        if (
            self.display == Display.ICON_ONLY
            or label is None
            or not (label.implicit_width > 0 and label.implicit_height > 0)
        ):
            self._positioner.reset_label_implicit_size()
        else:
            self._positioner.label_implicit_size = Size(label.implicit_width, label.implicit_height)

    def _update_container_size(self) -> None:
        self._positioner.container_size = self.size

    def _update_implicit_size(self) -> None:
        if not self.is_component_complete:
            return
        implicit = self._positioner.implicit_size
        self.set_implicit_size(implicit.width, implicit.height)

    def _update_icon_rect(self) -> None:
        if self._icon_item is None or not self.is_component_complete:
            return
        rect = self._positioner.icon_rect
        self._icon_item.set_position(*rect.top_left)
        self._icon_item.set_size(rect.size)

    def _update_label_rect(self) -> None:
        if self._label_item is None or not self.is_component_complete:
            return
        rect = self._positioner.label_rect
        self._label_item.set_position(*rect.top_left)
        self._label_item.width = rect.width

    def _on_display_changed(self, *_: Any) -> None:
        self._update_icon_item_visible()
        self._update_label_item_visible()
        self._update_icon_implicit_size()
        self._update_label_implicit_size()

    def component_complete(self) -> None:
        """Finish construction: wire icon and items and start layouting."""
        super().component_complete()
        self.display_changed.connect(self._on_display_changed)
        self._connect_to_icon()
        self._connect_to_icon_item()
        self._connect_to_label_item()
        self._positioner.set_enabled(True)