"""Filesystem paths that were canonical when they were created.

A canonical path is absolute, free of ``.`` and ``..`` components and
free of symlinks. The guarantee holds at creation time only; the
filesystem may change afterwards.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from functools import total_ordering
from pathlib import Path, PurePath
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class NonCanonicalPathError(ValueError):
    """Raised when a path given as canonical is not."""


@total_ordering
class CanonicalPath:
    """An absolute, symlink-free path on the filesystem."""

    __slots__ = ("_path",)

    def __init__(self, path: PathLike) -> None:
        """Accept ``path`` only if it is already canonical.

        Raises OSError if the path cannot be resolved, and
        NonCanonicalPathError if it resolves to something else.
        """
        given = Path(path)
        resolved = given.resolve(strict=True)
        if resolved != given:
            raise NonCanonicalPathError(f"non-canonical input path: {given}")
        self._path = resolved

    @classmethod
    def canonicalize(cls, path: PathLike) -> CanonicalPath:
        """Resolve ``path`` on the filesystem and wrap the result."""
        result = cls.__new__(cls)
        result._path = Path(path).resolve(strict=True)
        return result

    def as_path(self) -> Path:
        """The path as a :class:`pathlib.Path`."""
        return self._path

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"CanonicalPath({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalPath):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CanonicalPath):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def parent(self) -> CanonicalPath:
        """The canonical parent directory; raises at the filesystem root."""
        parent = self._path.parent
        if parent == self._path:
            raise ValueError(f"can't get parent of '{self._path}'")
        return CanonicalPath(parent)

    def name(self) -> str | None:
        """The final component, or None for the root."""
        return self._path.name or None

    def stem(self) -> str | None:
        """The final component without its extension, or None for the root."""
        return self._path.stem or None

    def suffix(self) -> str | None:
        """The extension without its dot, or None if there is none."""
        return self._path.suffix[1:] or None

    def parts(self) -> tuple[str, ...]:
        """The components of the path, root first."""
        return self._path.parts

    def starts_with(self, base: PathLike) -> bool:
        """Whether ``base`` is a whole-component prefix of this path."""
        return self._path.is_relative_to(base)

    def ends_with(self, child: PathLike) -> bool:
        """Whether ``child`` is a whole-component suffix of this path."""
        child_path = PurePath(child)
        if child_path.is_absolute():
            return child_path == self._path
        child_parts = child_path.parts
        if not child_parts:
            return True
        return self._path.parts[-len(child_parts):] == child_parts

    def with_name(self, name: str) -> CanonicalPath:
        """The canonical path of a sibling with the given file name."""
        return CanonicalPath(self._path.with_name(name))

    def with_suffix(self, suffix: str) -> CanonicalPath:
        """The canonical path with its extension replaced; the dot is optional."""
        if suffix and not suffix.startswith("."):
            suffix = "." + suffix
        return CanonicalPath(self._path.with_suffix(suffix))

    def join(self, path: PathLike) -> CanonicalPath:
        """Join ``path`` onto this one; the result must be canonical."""
        return CanonicalPath(self._path / path)

    def metadata(self) -> os.stat_result:
        """File status, without following symlinks."""
        return os.lstat(self._path)

    def iterdir(self) -> Iterator[Path]:
        """The entries of this directory."""
        return self._path.iterdir()

    def exists(self) -> bool:
        """Whether the path exists."""
        return self._path.exists()

    def is_file(self) -> bool:
        """Whether the path is a regular file."""
        return self._path.is_file()

    def is_dir(self) -> bool:
        """Whether the path is a directory."""
        return self._path.is_dir()


def current_exe() -> CanonicalPath:
    """The canonical path of the running interpreter's executable."""
    if not sys.executable:
        raise OSError("cannot determine the current executable")
    return CanonicalPath.canonicalize(sys.executable)