"""Material colors: blending, elevation overlays and a theme of derived colors."""

from __future__ import annotations

import bisect
import string
from dataclasses import dataclass
from typing import Any

from .elements import Signal, _Element, _Property

__all__ = [
    "Color",
    "blended_color",
    "elevated_color",
    "overlay_for_elevation",
    "ColorTheme",
]


def _fuzzy_is_null(value: float) -> bool:
    return abs(value) <= 1e-12


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _lerp(a: float, b: float, f: float) -> float:
    if _fuzzy_compare(a, b):
        return a
    return a + f * (b - a)


@dataclass(frozen=True)
class Color:
    """An RGBA color with channels between 0 and 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue", "alpha"):
            value = getattr(self, channel)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{channel} must be between 0 and 1, got {value!r}")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: int = 255) -> Color:
        """Build a color from 8-bit channels."""
        return cls(red / 255, green / 255, blue / 255, alpha / 255)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#RGB``, ``#RRGGBB``, ``#AARRGGBB`` or a basic color name."""
        value = text.strip()
        if value.startswith("#"):
            digits = value[1:]
            if not digits or any(c not in string.hexdigits for c in digits):
                raise ValueError(f"invalid color {text!r}")
            if len(digits) == 3:
                r, g, b = (int(c * 2, 16) for c in digits)
                return cls.from_rgb(r, g, b)
            if len(digits) == 6:
                r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
                return cls.from_rgb(r, g, b)
            if len(digits) == 8:
                a, r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4, 6))
                return cls.from_rgb(r, g, b, a)
            raise ValueError(f"invalid color {text!r}")
        try:
            return _NAMED_COLORS[value.lower()]
        except KeyError:
            raise ValueError(f"unknown color name {text!r}") from None

    @staticmethod
    def _byte(channel: float) -> int:
        return round(channel * 255)

    @property
    def name(self) -> str:
        """The color as ``#rrggbb``."""
        return "#{:02x}{:02x}{:02x}".format(
            self._byte(self.red), self._byte(self.green), self._byte(self.blue)
        )

    @property
    def argb_name(self) -> str:
        """The color as ``#aarrggbb``."""
        return "#{:02x}".format(self._byte(self.alpha)) + self.name[1:]

    def __str__(self) -> str:
        return self.name


_NAMED_COLORS = {
    "white": Color(1.0, 1.0, 1.0),
    "black": Color(0.0, 0.0, 0.0),
    "transparent": Color(0.0, 0.0, 0.0, 0.0),
    "red": Color(1.0, 0.0, 0.0),
    "lime": Color(0.0, 1.0, 0.0),
    "blue": Color(0.0, 0.0, 1.0),
    "green": Color.from_rgb(0, 128, 0),
    "gray": Color.from_rgb(128, 128, 128),
    "grey": Color.from_rgb(128, 128, 128),
}

_WHITE = _NAMED_COLORS["white"]
_BLACK = _NAMED_COLORS["black"]
# An unset color contributes opaque black when blended.
_UNSET = _BLACK

# Overlay opacity of white over the surface, per elevation in dp.
_ELEVATION_OVERLAYS = (
    (0, 0.0),
    (1, 0.05),
    (2, 0.07),
    (3, 0.08),
    (4, 0.09),
    (6, 0.11),
    (8, 0.12),
    (12, 0.14),
    (16, 0.15),
    (24, 0.16),
)
_ELEVATION_KEYS = [key for key, _ in _ELEVATION_OVERLAYS]

_BRANDING_RATIO = 0.08


def overlay_for_elevation(elevation: int) -> float:
    """White overlay opacity for *elevation*, interpolated between known levels."""
    index = bisect.bisect_left(_ELEVATION_KEYS, elevation)
    if index == len(_ELEVATION_OVERLAYS):
        return _ELEVATION_OVERLAYS[-1][1]
    to_key, to_overlay = _ELEVATION_OVERLAYS[index]
    if index == 0 or to_key == elevation:
        return to_overlay
    from_key, from_overlay = _ELEVATION_OVERLAYS[index - 1]
    ratio = (float(elevation) - from_key) / (to_key - from_key)
    return _lerp(from_overlay, to_overlay, ratio)


def blended_color(color1: Color, color2: Color, alpha: float) -> Color:
    """Mix *color2* over *color1* with weight *alpha* between 0 and 1."""
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be between 0 and 1, got {alpha!r}")
    if _fuzzy_is_null(alpha):
        return color1
    if _fuzzy_compare(alpha, 1.0):
        return color2
    if color1 == color2:
        return color1
    return Color(
        _lerp(color1.red, color2.red, alpha),
        _lerp(color1.green, color2.green, alpha),
        _lerp(color1.blue, color2.blue, alpha),
        _lerp(color1.alpha, color2.alpha, alpha),
    )


def elevated_color(color: Color, elevation: int) -> Color:
    """*color* lightened by the white overlay of *elevation*."""
    return blended_color(color, _WHITE, overlay_for_elevation(elevation))


class _ColorProperty(_Property):
    """A notifying property that also accepts color strings."""

    def __set__(self, obj: Any, value: Any) -> None:
        if isinstance(value, str):
            value = Color.parse(value)
        super().__set__(obj, value)


class _Computed:
    """A read-only color derived by the theme itself."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._computed.get(self.name)

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(f"{self.name} is read-only")


_COMPUTED_NAMES = (
    "primary_text",
    "secondary_text",
    "disabled_text",
    "error_text",
    "primary_light",
    "primary_dark",
    "accent_light",
    "accent_dark",
    "tool_tip_text",
)


class ColorTheme(_Element):
    """Theme colors; text colors follow dark mode, background and primary."""

    dark = _Property(True)
    primary = _ColorProperty(None)
    on_primary_text = _ColorProperty(None)
    accent = _ColorProperty(None)
    on_accent_text = _ColorProperty(None)
    background = _ColorProperty(Color.parse("#121212"))
    tool_tip = _ColorProperty(Color.parse("#F0F0F0"))

    primary_text = _Computed()
    secondary_text = _Computed()
    disabled_text = _Computed()
    error_text = _Computed()
    primary_light = _Computed()
    primary_dark = _Computed()
    accent_light = _Computed()
    accent_dark = _Computed()
    tool_tip_text = _Computed()

    def __init__(self, **values: Any) -> None:
        self._computed: dict[str, Color | None] = {}
        for name in _COMPUTED_NAMES:
            setattr(self, f"{name}_changed", Signal())
        self._compute_colors()

        self.primary_changed.connect(self._on_primary_changed)
        self.dark_changed.connect(lambda *_: self._compute_colors())
        self.primary_changed.connect(lambda *_: self._compute_colors())
        self.background_changed.connect(lambda *_: self._compute_colors())

        super().__init__(**values)

    def _on_primary_changed(self, *_: Any) -> None:
        # In dark mode the background is branded with the primary color.
        if self.dark:
            self.background_changed.emit(self.background)

    def _set_computed(self, name: str, value: Color) -> None:
        if self._computed.get(name) == value:
            return
        self._computed[name] = value
        getattr(self, f"{name}_changed").emit(value)

    def _branded_background(self) -> Color:
        if not self.dark:
            return self.background
        primary = self.primary if self.primary is not None else _UNSET
        return blended_color(self.background, primary, _BRANDING_RATIO)

    def _compute_colors(self) -> None:
        branded = self._branded_background()
        if self.dark:
            text, error, tip_text = _WHITE, Color.parse("#EF5350"), _BLACK
            primary_ratio, secondary_ratio, disabled_ratio = 1.0, 0.70, 0.38
        else:
            text, error, tip_text = _BLACK, Color.parse("#F44336"), _WHITE
            primary_ratio, secondary_ratio, disabled_ratio = 0.87, 0.60, 0.38

        self._set_computed("primary_text", blended_color(branded, text, primary_ratio))
        self._set_computed("secondary_text", blended_color(branded, text, secondary_ratio))
        self._set_computed("disabled_text", blended_color(branded, text, disabled_ratio))
        self._set_computed("error_text", blended_color(branded, error, primary_ratio))
        self._set_computed("tool_tip_text", blended_color(self.tool_tip, tip_text, primary_ratio))

    def background_at(self, elevation: int) -> Color:
        """The (branded) background seen at *elevation*."""
        return elevated_color(self._branded_background(), elevation)

    @property
    def background0(self) -> Color:
        return self.background_at(0)

    @property
    def background1(self) -> Color:
        return self.background_at(1)

    @property
    def background2(self) -> Color:
        return self.background_at(2)

    @property
    def background4(self) -> Color:
        return self.background_at(4)

    @property
    def background6(self) -> Color:
        return self.background_at(6)

    @property
    def background8(self) -> Color:
        return self.background_at(8)

    @property
    def background12(self) -> Color:
        return self.background_at(12)

    @property
    def background16(self) -> Color:
        return self.background_at(16)

    @property
    def background24(self) -> Color:
        return self.background_at(24)

    @property
    def surface(self) -> Color:
        return self.background1

    @property
    def button(self) -> Color:
        return self.background2

    @property
    def app_bar(self) -> Color:
        return self.background4

    @property
    def fab(self) -> Color:
        return self.background6

    @property
    def nav_drawer(self) -> Color:
        return self.background16

    @property
    def dialog(self) -> Color:
        return self.background24