"""Places an icon and a label inside a container according to alignment and display mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any

from .elements import Signal, _Element, _Property

__all__ = ["Display", "Alignment", "Size", "Rect", "IconLabelPositioner"]


class Display(IntEnum):
    ICON_ONLY = 0
    TEXT_ONLY = 1
    TEXT_BESIDE_ICON = 2
    TEXT_UNDER_ICON = 3


class Alignment(IntFlag):
    LEFT = 0x0001
    RIGHT = 0x0002
    H_CENTER = 0x0004
    TOP = 0x0020
    BOTTOM = 0x0040
    V_CENTER = 0x0080


@dataclass(frozen=True)
class Size:
    """A width and height; a negative dimension marks the size as unset."""

    width: float = -1.0
    height: float = -1.0

    @property
    def is_valid(self) -> bool:
        return self.width >= 0 and self.height >= 0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def top_left(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


class _SizeProperty(_Property):
    """A notifying size property that also accepts ``(width, height)`` pairs."""

    def __set__(self, obj: Any, value: Any) -> None:
        if not isinstance(value, Size):
            width, height = value
            value = Size(float(width), float(height))
        super().__set__(obj, value)


class _FloatProperty(_Property):
    def __set__(self, obj: Any, value: Any) -> None:
        super().__set__(obj, float(value))


def _horizontal_offset(alignment: int, container: float, content: float) -> float:
    if alignment & Alignment.LEFT:
        return 0.0
    if alignment & Alignment.RIGHT:
        return container - content
    if alignment & Alignment.H_CENTER:
        return (container - content) / 2
    return 0.0


def _vertical_offset(alignment: int, container: float, content: float) -> float:
    if alignment & Alignment.TOP:
        return 0.0
    if alignment & Alignment.BOTTOM:
        return container - content
    if alignment & Alignment.V_CENTER:
        return (container - content) / 2
    return 0.0


_DEFAULTS = {
    "horizontal_alignment": Alignment.H_CENTER,
    "vertical_alignment": Alignment.V_CENTER,
    "display": Display.ICON_ONLY,
    "spacing": 0.0,
    "mirrored": False,
    "icon_implicit_size": Size(),
    "label_implicit_size": Size(),
    "container_size": Size(),
}


class IconLabelPositioner(_Element):
    """Computes the icon and label rectangles and the implicit size of an icon label."""

    horizontal_alignment = _Property(_DEFAULTS["horizontal_alignment"])
    vertical_alignment = _Property(_DEFAULTS["vertical_alignment"])
    display = _Property(_DEFAULTS["display"])
    spacing = _FloatProperty(_DEFAULTS["spacing"])
    mirrored = _Property(_DEFAULTS["mirrored"])
    icon_implicit_size = _SizeProperty(_DEFAULTS["icon_implicit_size"])
    label_implicit_size = _SizeProperty(_DEFAULTS["label_implicit_size"])
    container_size = _SizeProperty(_DEFAULTS["container_size"])
    implicit_size = _SizeProperty(Size(0.0, 0.0))

    def __init__(self, **values: Any) -> None:
        self._enabled = True
        self._icon_rect = Rect()
        self._label_rect = Rect()
        self.icon_rect_changed = Signal()
        self.label_rect_changed = Signal()

        for name in _DEFAULTS:
            getattr(self, f"{name}_changed").connect(lambda *_: self.compute_rects())

        super().__init__(**values)

    # ──── outputs ────

    @property
    def icon_rect(self) -> Rect:
        return self._icon_rect

    @property
    def label_rect(self) -> Rect:
        return self._label_rect

    def _set_icon_rect(self, value: Rect) -> None:
        if value != self._icon_rect:
            self._icon_rect = value
            self.icon_rect_changed.emit(value)

    def _set_label_rect(self, value: Rect) -> None:
        if value != self._label_rect:
            self._label_rect = value
            self.label_rect_changed.emit(value)

    # ──── enabling and resets ────

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, value: bool) -> None:
        """Turn layouting on or off; turning it on recomputes at once."""
        if value != self._enabled:
            self._enabled = value
            if value:
                self.compute_rects()

    def reset_horizontal_alignment(self) -> None:
        self.horizontal_alignment = _DEFAULTS["horizontal_alignment"]

    def reset_vertical_alignment(self) -> None:
        self.vertical_alignment = _DEFAULTS["vertical_alignment"]

    def reset_display(self) -> None:
        self.display = _DEFAULTS["display"]

    def reset_spacing(self) -> None:
        self.spacing = _DEFAULTS["spacing"]

    def reset_mirrored(self) -> None:
        self.mirrored = _DEFAULTS["mirrored"]

    def reset_icon_implicit_size(self) -> None:
        """Mark the icon as having no size."""
        self.icon_implicit_size = _DEFAULTS["icon_implicit_size"]

    def reset_label_implicit_size(self) -> None:
        """Mark the label as having no size."""
        self.label_implicit_size = _DEFAULTS["label_implicit_size"]

    def reset_container_size(self) -> None:
        self.container_size = _DEFAULTS["container_size"]

    # ──── layouting ────

    def compute_rects(self) -> None:
        """Recompute icon rect, label rect and implicit size from the inputs."""
        if not self._enabled or not self.container_size.is_valid:
            return
        compute = {
            Display.ICON_ONLY: self._compute_icon_only,
            Display.TEXT_ONLY: self._compute_text_only,
            Display.TEXT_BESIDE_ICON: self._compute_text_beside_icon,
            Display.TEXT_UNDER_ICON: self._compute_text_under_icon,
        }.get(self.display)
        if compute is not None:
            compute()

    def _compute_icon_only(self) -> None:
        icon = self.icon_implicit_size
        if not icon.is_valid:
            return
        container = self.container_size
        x = _horizontal_offset(self.horizontal_alignment, container.width, icon.width)
        y = _vertical_offset(self.vertical_alignment, container.height, icon.height)
        self._set_icon_rect(Rect(x, y, icon.width, icon.height))
        self._set_label_rect(Rect())
        self.implicit_size = icon

    def _compute_text_only(self) -> None:
        label = self.label_implicit_size
        if not label.is_valid:
            return
        container = self.container_size
        fits = container.width >= label.width
        x = _horizontal_offset(self.horizontal_alignment, container.width, label.width) if fits else 0.0
        y = _vertical_offset(self.vertical_alignment, container.height, label.height)
        width = label.width if fits else container.width
        self._set_icon_rect(Rect())
        self._set_label_rect(Rect(x, y, width, label.height))
        self.implicit_size = label

    def _compute_text_beside_icon(self) -> None:
        icon, label = self.icon_implicit_size, self.label_implicit_size
        if not label.is_valid and not icon.is_valid:
            return
        container = self.container_size
        h_align, v_align = self.horizontal_alignment, self.vertical_alignment

        spacing = self.spacing if icon.width > 0 and label.width > 0 else 0.0
        label_height = label.height if label.width > 0 else 0.0
        implicit_width = label.width + icon.width + spacing
        implicit_height = max(label_height, icon.height)

        fits = container.width >= implicit_width
        x_offset = _horizontal_offset(h_align, container.width, implicit_width) if fits else 0.0

        if self.mirrored:
            icon_x = (implicit_width if fits else container.width) - icon.width + x_offset
            label_x = x_offset
            label_width = min(container.width - icon.width - spacing, label.width)
        else:
            icon_x = x_offset
            label_x = icon.width + spacing + x_offset
            label_width = min(container.width - label_x, label.width)

        def beside_y(content: float) -> float:
            if v_align & Alignment.TOP:
                return (implicit_height - content) / 2
            if v_align & Alignment.BOTTOM:
                return container.height - content - (implicit_height - content) / 2
            if v_align & Alignment.V_CENTER:
                return (container.height - content) / 2
            return 0.0

        self._set_icon_rect(Rect(icon_x, beside_y(icon.height), icon.width, icon.height))
        self._set_label_rect(Rect(label_x, beside_y(label.height), label_width, label.height))
        self.implicit_size = Size(implicit_width, implicit_height)

    def _compute_text_under_icon(self) -> None:
        icon, label = self.icon_implicit_size, self.label_implicit_size
        if not label.is_valid or not icon.is_valid:
            return
        container = self.container_size
        h_align, v_align = self.horizontal_alignment, self.vertical_alignment

        spacing = self.spacing if icon.width > 0 and label.width > 0 else 0.0
        label_height = label.height if label.width > 0 else 0.0
        implicit_width = max(label.width, icon.width)
        implicit_height = label_height + icon.height + spacing
        fits = container.width >= implicit_width

        icon_x = _horizontal_offset(h_align, container.width, icon.width)

        icon_y = 0.0
        if self.mirrored:
            if v_align & Alignment.TOP:
                icon_y = implicit_height - icon.height
            elif v_align & Alignment.BOTTOM:
                icon_y = container.height - icon.height
            elif v_align & Alignment.V_CENTER:
                icon_y = (container.height + implicit_height) / 2 - icon.height
        else:
            if v_align & Alignment.TOP:
                icon_y = 0.0
            elif v_align & Alignment.BOTTOM:
                icon_y = container.height - implicit_height
            elif v_align & Alignment.V_CENTER:
                icon_y = (container.height - implicit_height) / 2

        label_width = label.width if fits else container.width
        label_x = _horizontal_offset(h_align, container.width, label_width)
        if self.mirrored:
            label_y = icon_y - spacing - label.height
        else:
            label_y = icon_y + spacing + icon.height

        self._set_icon_rect(Rect(icon_x, icon_y, icon.width, icon.height))
        self._set_label_rect(Rect(label_x, label_y, label_width, label.height))
        self.implicit_size = Size(implicit_width, implicit_height)