"""Observable signals and the small property objects exposed to views."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["Signal", "IconDescription", "StepperElement"]


class Signal:
    """A list of callables invoked, in connection order, on every emission."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Call *slot* with the emitted arguments from now on."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Stop calling *slot*; raise ValueError if it was never connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError(f"{slot!r} is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with *args*."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class _SignalAttribute:
    """Class attribute that gives each instance its own lazily created Signal."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        signal = Signal()
        obj.__dict__[self._name] = signal
        return signal


class _Property:
    """A value that emits ``<name>_changed`` with the new value when it changes."""

    def __init__(self, default: Any = None) -> None:
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.signal_name = f"{name}_changed"
        signal_attribute = _SignalAttribute()
        setattr(owner, self.signal_name, signal_attribute)
        signal_attribute.__set_name__(owner, self.signal_name)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        if self.__get__(obj) == value:
            return
        obj.__dict__[self.name] = value
        getattr(obj, self.signal_name).emit(value)


class _Element:
    """Base for objects made only of notifying properties."""

    def __init__(self, **values: Any) -> None:
        for name, value in values.items():
            if not isinstance(getattr(type(self), name, None), _Property):
                raise TypeError(f"{type(self).__name__} has no property {name!r}")
            setattr(self, name, value)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name, attribute in vars(type(self)).items()
            if isinstance(attribute, _Property)
        )
        return f"{type(self).__name__}({fields})"


class IconDescription(_Element):
    """Description of an icon: where to load it from, its size, tint and caching."""

    source = _Property("")
    width = _Property(24)
    height = _Property(24)
    color = _Property(None)
    cache = _Property(True)


class StepperElement(_Element):
    """One step of a stepper: its label, state and supporting texts."""

    text = _Property("")
    done = _Property(False)
    optional = _Property(False)
    alert_message = _Property("")
    supporting_text = _Property("")