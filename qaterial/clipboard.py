"""A text clipboard shared by every Clipboard of the process, with ownership."""

from __future__ import annotations

import weakref
from typing import Hashable

from .elements import Signal

__all__ = ["Clipboard"]

_THIS_APPLICATION = "application"


class _SharedClipboard:
    """The one clipboard store every Clipboard reads and writes."""

    def __init__(self) -> None:
        self.text: str | None = None
        self.owner: Hashable | None = None
        self.listeners: weakref.WeakSet[Clipboard] = weakref.WeakSet()

    def set_text(self, text: str, owner: Hashable) -> None:
        self.text = text
        self.owner = owner
        self._notify()

    def clear(self) -> None:
        self.text = None
        self.owner = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self.listeners):
            listener._on_data_changed()


_SHARED = _SharedClipboard()


class Clipboard:
    """Copy and paste text; ``owns`` tells whether this application set the content."""

    def __init__(self, application: Hashable | None = None) -> None:
        self._application = _THIS_APPLICATION if application is None else application
        self.text_changed = Signal()
        self.owns_changed = Signal()
        _SHARED.listeners.add(self)

    def _on_data_changed(self) -> None:
        if _SHARED.text is not None:
            self.text_changed.emit()
        self.owns_changed.emit()

    @property
    def text(self) -> str:
        """The clipboard text, or an empty string when it holds none."""
        return _SHARED.text if _SHARED.text is not None else ""

    @text.setter
    def text(self, value: str) -> None:
        # Don't copy again what this application already put there.
        if self.owns and _SHARED.text is not None and _SHARED.text == value:
            return
        _SHARED.set_text(value, self._application)
        self.owns_changed.emit()

    @property
    def owns(self) -> bool:
        """Whether the current content was set by this application."""
        return _SHARED.owner is not None and _SHARED.owner == self._application

    def clear(self) -> None:
        """Empty the clipboard."""
        _SHARED.clear()