"""A tree model of the local file system: folders list their filtered, sorted entries."""

from __future__ import annotations

import fnmatch
import functools
import os
from dataclasses import dataclass, fields, replace
from datetime import datetime
from enum import IntEnum
from typing import Any, Iterator
from urllib.parse import urlparse
from urllib.request import url2pathname

from .elements import Signal, _Element, _Property
from .logger import FILE as _LOG

__all__ = ["Status", "SortField", "FolderTreeModel"]

_FILE_ATTRIBUTE_HIDDEN = 0x2


class Status(IntEnum):
    NULL = 0  # no folder has been set
    READY = 1  # the folder has been loaded
    LOADING = 2  # the folder is currently being loaded


class SortField(IntEnum):
    UNSORTED = 0
    NAME = 1
    TIME = 2
    SIZE = 3
    TYPE = 4


@dataclass(frozen=True)
class _FileInfo:
    file_name: str
    file_path: str
    file_base_name: str
    file_complete_base_name: str
    file_suffix: str
    file_complete_suffix: str
    file_size: int
    file_modified: datetime | None
    file_accessed: datetime | None
    file_is_dir: bool

    @classmethod
    def load(cls, name: str, absolute_path: str) -> _FileInfo:
        first = name.find(".")
        last = name.rfind(".")
        try:
            st = os.stat(absolute_path)
        except OSError:
            size, modified, accessed, is_dir = 0, None, None, False
        else:
            size = st.st_size
            modified = datetime.fromtimestamp(st.st_mtime)
            accessed = datetime.fromtimestamp(st.st_atime)
            is_dir = os.path.isdir(absolute_path)
        return cls(
            file_name=name,
            file_path=absolute_path,
            file_base_name=name if first == -1 else name[:first],
            file_complete_base_name=name if last == -1 else name[:last],
            file_suffix="" if last == -1 else name[last + 1 :],
            file_complete_suffix="" if first == -1 else name[first + 1 :],
            file_size=size,
            file_modified=modified,
            file_accessed=accessed,
            file_is_dir=is_dir,
        )

    @classmethod
    def for_path(cls, path: str) -> _FileInfo:
        return cls.load(os.path.basename(path), os.path.abspath(path))


def _is_hidden(name: str, path: str) -> bool:
    if name.startswith("."):
        return True
    try:
        attributes = getattr(os.stat(path), "st_file_attributes", 0)
    except OSError:
        return False
    return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)


def _matches(name: str, patterns: tuple[str, ...], case_sensitive: bool) -> bool:
    if case_sensitive:
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)
    lowered = name.lower()
    return any(fnmatch.fnmatchcase(lowered, pattern.lower()) for pattern in patterns)


@dataclass(frozen=True)
class _Query:
    """Which entries of a directory to list."""

    dirs: bool
    files: bool
    hidden: bool
    readable: bool
    dot: bool
    dot_dot: bool
    case_sensitive: bool
    name_filters: tuple[str, ...] = ()

    def entries(self, directory: str) -> list[_FileInfo]:
        try:
            with os.scandir(directory) as scan:
                names = [entry.name for entry in scan]
        except OSError:
            return []
        if self.dirs:
            specials = [name for name, wanted in ((".", self.dot), ("..", self.dot_dot)) if wanted]
            names = specials + names

        absolute_directory = os.path.abspath(directory)
        found = []
        for name in names:
            full = os.path.join(absolute_directory, name)
            is_dir = os.path.isdir(full)
            if not is_dir and not os.path.isfile(full):
                continue
            if (is_dir and not self.dirs) or (not is_dir and not self.files):
                continue
            if not self.hidden and name not in (".", "..") and _is_hidden(name, full):
                continue
            if self.readable and not os.access(full, os.R_OK):
                continue
            if self.name_filters and not _matches(name, self.name_filters, self.case_sensitive):
                continue
            found.append(_FileInfo.load(name, full))
        return found


def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class _Ordering:
    """How listed entries are sorted."""

    field: SortField
    dirs_first: bool
    reversed: bool
    ignore_case: bool

    def _text(self, value: str) -> str:
        return value.lower() if self.ignore_case else value

    def _cmp(self, a: _FileInfo, b: _FileInfo) -> int:
        if self.dirs_first and a.file_is_dir != b.file_is_dir:
            return -1 if a.file_is_dir else 1
        result = 0
        if self.field == SortField.TIME:
            # Newest first.
            result = _compare(b.file_modified or datetime.min, a.file_modified or datetime.min)
        elif self.field == SortField.SIZE:
            # Largest first.
            result = _compare(b.file_size, a.file_size)
        elif self.field == SortField.TYPE:
            result = _compare(self._text(a.file_suffix), self._text(b.file_suffix))
        if result == 0:
            result = _compare(self._text(a.file_name), self._text(b.file_name))
        return -result if self.reversed else result

    def sort(self, infos: list[_FileInfo]) -> list[_FileInfo]:
        return sorted(infos, key=functools.cmp_to_key(self._cmp))


def _to_path_string(value: Any) -> str:
    if value is None:
        return ""
    return os.fspath(value)


def _local_path(raw: str) -> str:
    if raw.startswith("file:"):
        raw = url2pathname(urlparse(raw).path)
    return raw or os.getcwd()


class _ReadOnly(_Property):
    """A notifying property only the model itself can change."""

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(f"{self.name} is read-only")

    def store(self, obj: Any, value: Any) -> None:
        if self.__get__(obj) == value:
            return
        obj.__dict__[self.name] = value
        getattr(obj, self.signal_name).emit(value)


class _NameFilters(_Property):
    def __set__(self, obj: Any, value: Any) -> None:
        super().__set__(obj, tuple(value))


_SPREAD = (
    "case_sensitive",
    "name_filters",
    "show_drives",
    "show_dirs",
    "show_dirs_first",
    "show_dot_and_dot_dot",
    "show_files",
    "show_hidden",
    "show_only_readable",
    "sort_case_sensitive",
    "sort_field",
    "sort_reversed",
)


class FolderTreeModel(_Element):
    """A file or folder; a folder lists its entries as child models once fetched."""

    expanded = _Property(False)

    name_filters = _NameFilters(())
    case_sensitive = _Property(False)
    show_drives = _Property(True)
    show_dirs = _Property(True)
    show_files = _Property(True)
    show_dirs_first = _Property(True)
    show_dot = _Property(False)
    show_dot_dot = _Property(False)
    show_dot_and_dot_dot = _Property(False)
    show_hidden = _Property(False)
    show_only_readable = _Property(False)
    sort_case_sensitive = _Property(True)
    sort_reversed = _Property(False)
    sort_field = _Property(SortField.UNSORTED)

    status = _ReadOnly(Status.NULL)
    file_name = _ReadOnly("")
    file_path = _ReadOnly("")
    file_base_name = _ReadOnly("")
    file_complete_base_name = _ReadOnly("")
    file_suffix = _ReadOnly("")
    file_complete_suffix = _ReadOnly("")
    file_size = _ReadOnly(0)
    file_modified = _ReadOnly(None)
    file_accessed = _ReadOnly(None)
    file_is_dir = _ReadOnly(False)

    def __init__(self, path: Any = None, parent: FolderTreeModel | None = None, **values: Any) -> None:
        raw = os.getcwd() if path is None else _to_path_string(path)
        self._setup(raw, _FileInfo.for_path(_local_path(raw)), parent)
        super().__init__(**values)

    @classmethod
    def _from_entry(cls, raw: str, info: _FileInfo, parent: FolderTreeModel) -> FolderTreeModel:
        folder = cls.__new__(cls)
        folder._setup(raw, info, parent)
        return folder

    def _setup(self, raw: str, info: _FileInfo, parent: FolderTreeModel | None) -> None:
        self._path = raw
        self._parent = parent
        self._children: list[FolderTreeModel] = []
        self._dot_evaluation = False
        self.path_changed = Signal()
        self.inserted = Signal()
        self.removed = Signal()
        for field in fields(info):
            self.__dict__[field.name] = getattr(info, field.name)

        self.show_dot_changed.connect(self._on_single_dot_changed)
        self.show_dot_dot_changed.connect(self._on_single_dot_changed)
        self.show_dot_and_dot_dot_changed.connect(self._on_both_dots_changed)
        self.inserted.connect(self._spread_configuration)

    # ──── bindings ────

    def _on_single_dot_changed(self, *_: Any) -> None:
        if self._dot_evaluation:
            return
        self._dot_evaluation = True
        try:
            self.show_dot_and_dot_dot = self.show_dot_dot and self.show_dot
        finally:
            self._dot_evaluation = False

    def _on_both_dots_changed(self, *_: Any) -> None:
        if self._dot_evaluation:
            return
        self._dot_evaluation = True
        try:
            self.show_dot = self.show_dot_and_dot_dot
            self.show_dot_dot = self.show_dot_and_dot_dot
        finally:
            self._dot_evaluation = False

    def _spread_configuration(self, folder: FolderTreeModel) -> None:
        for name in _SPREAD:
            setattr(folder, name, getattr(self, name))

    # ──── tree ────

    @property
    def parent(self) -> FolderTreeModel | None:
        return self._parent

    @property
    def children(self) -> FolderTreeModel:
        return self

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[FolderTreeModel]:
        return iter(list(self._children))

    def __getitem__(self, index: int) -> FolderTreeModel:
        return self._children[index]

    def _append(self, folders: list[FolderTreeModel]) -> None:
        for folder in folders:
            self._children.append(folder)
            self.inserted.emit(folder)

    def _clear(self) -> None:
        removed, self._children = self._children, []
        for folder in removed:
            self.removed.emit(folder)

    # ──── path ────

    @property
    def path(self) -> str:
        """The location this model describes; a plain path or a ``file:`` URL."""
        return self._path

    @path.setter
    def path(self, value: Any) -> None:
        self._set_path(value)

    def _set_path(self, value: Any) -> bool:
        raw = _to_path_string(value)
        if raw == self._path:
            return False
        self._path = raw
        info = _FileInfo.for_path(_local_path(raw))
        for field in fields(info):
            getattr(type(self), field.name).store(self, getattr(info, field.name))
        self.path_changed.emit(raw)
        return True

    def reset_path(self) -> None:
        """Clear the path; the model then describes the current directory."""
        self._set_path("")

    # ──── aliases ────

    @property
    def last_modified(self) -> datetime | None:
        return self.file_modified

    @property
    def last_read(self) -> datetime | None:
        return self.file_accessed

    @property
    def is_dir(self) -> bool:
        return self.file_is_dir

    # ──── listing ────

    def fetch(self) -> None:
        """Replace the children with the filtered, sorted entries of this folder."""
        if not self.file_is_dir:
            _LOG.warning("[%s] Can't fetch folders of a file %s.", hex(id(self)), self.path)
            return

        # todo : reuse already instantiated folders
        self._clear()

        directory = _local_path(self.path)
        folder_query = _Query(
            dirs=self.show_dirs,
            files=False,
            hidden=self.show_hidden,
            readable=self.show_only_readable,
            dot=self.show_dot,
            dot_dot=self.show_dot_dot,
            case_sensitive=self.case_sensitive,
        )
        query = replace(folder_query, files=self.show_files, name_filters=tuple(self.name_filters))
        ordering = _Ordering(
            field=SortField(self.sort_field),
            dirs_first=self.show_dirs_first,
            reversed=self.sort_reversed,
            ignore_case=not self.sort_case_sensitive,
        )

        # Name filters would hide folders, so folders are listed apart.
        second_fetch_for_folders = bool(self.name_filters) and self.show_dirs

        infos: list[_FileInfo] = []
        if second_fetch_for_folders and self.show_dirs_first:
            infos += ordering.sort(folder_query.entries(directory))
        infos += ordering.sort(query.entries(directory))
        if second_fetch_for_folders and not self.show_dirs_first:
            infos += ordering.sort(folder_query.entries(directory))

        folders = [
            FolderTreeModel._from_entry(f"{self.path}/{info.file_name}", info, self)
            for info in infos
        ]
        if folders:
            self._append(folders)