"""Derivation paths within a hierarchical keyspace."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from keyhier.bip32.child_number import ChildNumber
from keyhier.bip32.errors import Bip32Error, ErrorKind

PREFIX = "m"


class DerivationPath:
    """A sequence of child numbers, written like ``m/0/2147483647'/1``."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, children: Iterable[ChildNumber] = ()) -> None:
        self._path: list[ChildNumber] = list(children)

    @classmethod
    def parse(cls, text: str) -> DerivationPath:
        """Parse a path string beginning with ``m``."""
        head, *rest = text.split("/")
        if head != PREFIX:
            raise Bip32Error(ErrorKind.DECODE)
        return cls(ChildNumber.parse(part) for part in rest)

    def __iter__(self) -> Iterator[ChildNumber]:
        return iter(self._path)

    def __len__(self) -> int:
        return len(self._path)

    def __str__(self) -> str:
        return "".join([PREFIX, *(f"/{child}" for child in self._path)])

    def __repr__(self) -> str:
        return f"DerivationPath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DerivationPath):
            return NotImplemented
        return self._path == other._path

    def parent(self) -> DerivationPath | None:
        """The path without its last element, or None at the root."""
        if not self._path:
            return None
        return DerivationPath(self._path[:-1])

    def push(self, child_number: ChildNumber) -> None:
        """Append one child number."""
        self._path.append(child_number)

    def extend(self, children: Iterable[ChildNumber]) -> None:
        """Append several child numbers."""
        self._path.extend(children)