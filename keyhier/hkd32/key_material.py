"""Cryptographic key material for symmetric hierarchical key derivation.

Keys are fixed 256-bit (32-byte) bytestrings. The same type represents
both input key material and keys derived from it.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

from keyhier.hkd32.errors import Hkd32Error
from keyhier.hkd32.path import Path, PathBuf

KEY_SIZE = 32


class KeyMaterial:
    """A 32-byte uniformly random key, either generated or derived."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != KEY_SIZE:
            raise Hkd32Error()
        self._data = data

    @classmethod
    def random(cls) -> KeyMaterial:
        """Generate key material from the operating system's CSPRNG."""
        return cls(secrets.token_bytes(KEY_SIZE))

    @classmethod
    def from_bytes(cls, data: bytes) -> KeyMaterial:
        """Import key material that must be exactly 32 uniformly random bytes."""
        return cls(data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyMaterial):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "KeyMaterial(...)"

    def derive_subkey(self, path: Path | str) -> KeyMaterial:
        """Derive the key found at ``path`` below this one.

        Each component is fed through HMAC-SHA512 keyed by its parent; the
        chain-code half is carried forward for every component but the last,
        whose secret-key half becomes the result. The root path returns
        the input key unchanged.
        """
        if isinstance(path, str):
            path = PathBuf.parse(path)
        components = list(path.components())
        key = self._data
        last = len(components) - 1
        for position, component in enumerate(components):
            digest = hmac.new(key, bytes(component), hashlib.sha512).digest()
            secret_key, chain_code = digest[:KEY_SIZE], digest[KEY_SIZE:]
            key = chain_code if position < last else secret_key
        return KeyMaterial(key)