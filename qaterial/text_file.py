"""A text file opened from a URL, read or written as a whole, with atomic saving."""

from __future__ import annotations

import os
import re
import stat
import tempfile
from enum import IntEnum
from pathlib import Path
from typing import IO
from urllib.parse import unquote, urlsplit

from . import logger
from .elements import Signal

__all__ = ["OpenMode", "TextFileError", "TextFile"]

_DEFAULT_FILE_NAME = "untitled.txt"
_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


class OpenMode(IntEnum):
    READ = 0
    WRITE = 1
    READ_WRITE = 2


class TextFileError(OSError):
    """Raised when a text file cannot be opened, read, written or saved."""


def _is_relative(url: str) -> bool:
    scheme = urlsplit(url).scheme
    # A one-letter scheme is a drive letter, not a URL scheme.
    return len(scheme) <= 1


def _to_local_file(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme != "file":
        return ""
    path = unquote(parts.path)
    if parts.netloc:
        return f"//{parts.netloc}{path}"
    if _DRIVE_PATH.match(path):
        return path[1:]
    return path


def _to_local_file_or_qrc(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme == "qrc":
        return ":" + unquote(parts.path)
    return _to_local_file(url)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _default_file_mode() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


class TextFile:
    """A text file bound to a URL; errors are raised and kept in ``error``."""

    def __init__(self) -> None:
        self._file_url = ""
        self._is_open = False
        self._error = ""
        self._handle: IO[str] | None = None
        self._save_target: Path | None = None
        self._temp_path: Path | None = None

        self.file_url_changed = Signal()
        self.open_changed = Signal()
        self.error_changed = Signal()
        self.error_changed.connect(self._log_error)

    # ──── properties ────

    @property
    def file_url(self) -> str:
        return self._file_url

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def error(self) -> str:
        return self._error

    @property
    def file_name(self) -> str:
        """Name of the file without its directory, or ``untitled.txt``."""
        name = os.path.basename(_to_local_file_or_qrc(self._file_url))
        return name or _DEFAULT_FILE_NAME

    @property
    def file_type(self) -> str:
        """Everything after the last dot of the file name."""
        _, dot, suffix = self.file_name.rpartition(".")
        return suffix if dot else ""

    def _set_file_url(self, value: str) -> None:
        if value != self._file_url:
            self._file_url = value
            self.file_url_changed.emit(value)

    def _set_open(self, value: bool) -> None:
        if value != self._is_open:
            self._is_open = value
            self.open_changed.emit(value)

    def _set_error(self, value: str) -> None:
        if value != self._error:
            self._error = value
            self.error_changed.emit(value)

    def _log_error(self, value: str) -> None:
        if value:
            logger.FILE.error("[%#x] File Error : %s", id(self), value)

    def _fail(self, message: str) -> TextFileError:
        self._set_error(message)
        return TextFileError(message)

    # ──── API ────

    def open(self, url: str, mode: int) -> None:
        """Open the file at *url* for reading, writing or both."""
        original = str(url)
        logger.FILE.debug("[%#x] open url : %s", id(self), original)
        url = "file:" + original if _is_relative(original) else original
        self._set_file_url(url)
        self._error = ""

        local_file = _to_local_file(url)
        if not local_file:
            if not original:
                raise self._fail("filename is empty")
            raise self._fail(f"Filename {url} isn't a valid file url")

        try:
            open_mode = OpenMode(mode)
        except ValueError:
            open_mode = OpenMode.READ_WRITE
        self._create_and_open(local_file, open_mode)

    def close(self) -> None:
        """Close the file, committing what was written in write mode."""
        self._error = ""
        if self._handle is None:
            logger.FILE.debug("[%#x] File isn't open.", id(self))
            return

        if self._save_target is not None and self._temp_path is not None:
            try:
                self._handle.close()
                os.replace(self._temp_path, self._save_target)
            except OSError as exc:
                failure = self._fail(_describe(exc))
                self._close_and_discard()
                raise failure from exc
        self._close_and_discard()

    def write(self, text: str) -> None:
        """Write *text* to the open file."""
        self._error = ""
        if not self._is_open or self._handle is None:
            raise self._fail("File is close")
        try:
            self._handle.write(text)
        except OSError as exc:
            failure = self._fail(_describe(exc) if exc.strerror else str(exc))
            self._close_and_discard()
            raise failure from exc

    def read_all(self) -> str:
        """Return everything from the current position to the end of the file."""
        self._error = ""
        if not self._is_open or self._handle is None:
            raise self._fail("File is close")
        try:
            return self._handle.read()
        except OSError as exc:
            failure = self._fail(_describe(exc) if exc.strerror else str(exc))
            self._close_and_discard()
            raise failure from exc

    def __enter__(self) -> TextFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self._close_and_discard()
        elif self._handle is not None:
            self.close()

    # ──── internals ────

    def _create_and_open(self, local_file: str, mode: OpenMode) -> None:
        if self._handle is not None:
            logger.FILE.warning(
                "[%#x] Close file %s before opening %s", id(self), self.file_name, local_file
            )
            self._close_and_discard()

        try:
            if mode is OpenMode.READ:
                self._handle = open(local_file, "r", encoding="utf-8", errors="replace")
            elif mode is OpenMode.READ_WRITE:
                descriptor = os.open(local_file, os.O_RDWR | os.O_CREAT, 0o666)
                self._handle = os.fdopen(descriptor, "r+", encoding="utf-8", errors="replace")
            else:
                self._open_for_saving(Path(local_file))
        except OSError as exc:
            failure = self._fail(_describe(exc))
            self._close_and_discard()
            raise failure from exc

        self._set_open(True)

    def _open_for_saving(self, target: Path) -> None:
        if target.is_dir():
            raise IsADirectoryError(21, "Is a directory", str(target))
        descriptor, temp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        self._temp_path = Path(temp_name)
        self._save_target = target
        try:
            if target.exists():
                os.chmod(descriptor, stat.S_IMODE(target.stat().st_mode))
            else:
                os.chmod(descriptor, _default_file_mode())
        except (OSError, NotImplementedError):
            pass
        self._handle = os.fdopen(descriptor, "w", encoding="utf-8")

    def _close_and_discard(self) -> None:
        self._set_open(False)
        handle, temp_path = self._handle, self._temp_path
        self._handle = None
        self._save_target = None
        self._temp_path = None
        if handle is not None:
            try:
                handle.close()
            except OSError:
                pass
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)