"""Error type for symmetric hierarchical key derivation."""

from __future__ import annotations


class Hkd32Error(ValueError):
    """Opaque error raised for malformed paths or key material."""

    def __str__(self) -> str:
        return "Error"