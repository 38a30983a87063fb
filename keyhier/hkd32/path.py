"""Key derivation paths: locations within a hierarchical derivation tree.

A path is a sequence of non-empty byte components, serialized with each
component prefixed by its length minus one. The string form looks like a
Unix path: ``/first/second/third``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator

from keyhier.hkd32.errors import Hkd32Error

DELIMITER = "/"
MAX_COMPONENT_LENGTH = 256


class Component:
    """One non-empty component of a derivation path, at most 256 bytes."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if not 0 < len(data) <= MAX_COMPONENT_LENGTH:
            raise Hkd32Error()
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def stringify(self) -> str:
        """The component as an ASCII string."""
        try:
            return self._data.decode("ascii")
        except UnicodeDecodeError:
            raise Hkd32Error() from None

    def to_bytes(self) -> bytes:
        """The component serialized with its length prefix."""
        return bytes([len(self._data) - 1]) + self._data

    def __repr__(self) -> str:
        try:
            return f"Component({json.dumps(self.stringify())})"
        except Hkd32Error:
            return f"Component({list(self._data)!r})"


def _iter_components(data: bytes) -> Iterator[Component]:
    """Yield components, raising if the serialization is truncated."""
    pos = 0
    while pos < len(data):
        length = data[pos] + 1
        start = pos + 1
        end = start + length
        if end > len(data):
            raise Hkd32Error()
        yield Component(data[start:end])
        pos = end


class Path:
    """An immutable, validated derivation path."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b"") -> None:
        data = bytes(data)
        for _ in _iter_components(data):
            pass
        self._data = data

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def components(self) -> Iterator[Component]:
        """Iterate over the components of this path."""
        return _iter_components(self._data)

    def is_root(self) -> bool:
        """Whether this is the root (empty) path."""
        return not self._data

    def join(self, other: Path) -> PathBuf:
        """A new path with the components of ``other`` after those of this one."""
        result = PathBuf()
        result.extend(self.components())
        result.extend(other.components())
        return result

    def parent(self) -> Path | None:
        """The path without its last component, or None at the root."""
        tail = None
        for tail in self.components():
            pass
        if tail is None:
            return None
        return Path(self._data[: len(self._data) - len(tail) - 1])

    def stringify(self) -> str:
        """The path as ``/x/y/z``; raises unless every component is ASCII."""
        if self.is_root():
            return DELIMITER
        return "".join(DELIMITER + component.stringify() for component in self.components())

    def _debug_components(self) -> str:
        try:
            return json.dumps(self.stringify())
        except Hkd32Error:
            return ", ".join(repr(component) for component in self.components())

    def __repr__(self) -> str:
        return f"Path({self._debug_components()})"


class PathBuf(Path):
    """A derivation path that can be extended in place."""

    __slots__ = ()
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    @classmethod
    def parse(cls, text: str) -> PathBuf:
        """Parse ``/foo/bar``; a leading slash is required and empty components are not allowed."""
        result = cls()
        if text == DELIMITER:
            return result
        head, *parts = text.split(DELIMITER)
        if head != "":
            raise Hkd32Error()
        for part in parts:
            if not part.isascii():
                raise Hkd32Error()
            result.push(Component(part.encode("ascii")))
        return result

    def push(self, component: Component) -> None:
        """Append one component."""
        self._data += component.to_bytes()

    def extend(self, components: Iterable[Component]) -> None:
        """Append several components."""
        for component in components:
            self.push(component)

    def as_path(self) -> Path:
        """An immutable copy of this path."""
        return Path(self._data)

    def __repr__(self) -> str:
        return f"PathBuf({self._debug_components()})"