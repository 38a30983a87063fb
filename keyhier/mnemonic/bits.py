"""Bit packing helpers for mnemonic phrase encoding.

Values are packed most significant bit first. Mnemonic words carry
11 bits each, while entropy and checksums come in 8-bit bytes.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _check_size(size: int) -> None:
    if not isinstance(size, int) or size <= 0:
        raise ValueError(f"bit size must be a positive integer, got {size!r}")


def _check_value(value: int, size: int) -> None:
    if not isinstance(value, int) or not 0 <= value < 1 << size:
        raise ValueError(f"value {value!r} does not fit in {size} bits")


class BitWriter:
    """Accumulates fixed-width values into a bytestring, MSB first."""

    __slots__ = ("_out", "_pending", "_pending_bits")

    def __init__(self) -> None:
        self._out = bytearray()
        self._pending = 0
        self._pending_bits = 0

    def push(self, value: int, size: int) -> None:
        """Append ``value`` as a ``size``-bit unsigned integer."""
        _check_size(size)
        _check_value(value, size)
        self._pending = (self._pending << size) | value
        self._pending_bits += size
        while self._pending_bits >= 8:
            self._pending_bits -= 8
            self._out.append((self._pending >> self._pending_bits) & 0xFF)
            self._pending &= (1 << self._pending_bits) - 1

    def to_bytes(self) -> bytes:
        """The bits written so far, with a final partial byte padded with zeros."""
        if not self._pending_bits:
            return bytes(self._out)
        tail = (self._pending << (8 - self._pending_bits)) & 0xFF
        return bytes(self._out) + bytes([tail])


def iter_bits(values: Iterable[int], in_size: int, out_size: int) -> Iterator[int]:
    """Regroup ``in_size``-bit values into ``out_size``-bit values, MSB first.

    Trailing bits that do not fill a whole output value are dropped.
    """
    _check_size(in_size)
    _check_size(out_size)
    buffer = 0
    buffered = 0
    mask = (1 << out_size) - 1
    for value in values:
        _check_value(value, in_size)
        buffer = (buffer << in_size) | value
        buffered += in_size
        while buffered >= out_size:
            buffered -= out_size
            yield (buffer >> buffered) & mask
            buffer &= (1 << buffered) - 1