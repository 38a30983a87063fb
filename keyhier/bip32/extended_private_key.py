"""Extended private keys derived with BIP32."""

from __future__ import annotations

import hashlib
import hmac
from typing import ClassVar

from keyhier.bip32.child_number import ChildNumber
from keyhier.bip32.derivation_path import DerivationPath
from keyhier.bip32.errors import Bip32Error, ErrorKind
from keyhier.bip32.extended_key import KEY_SIZE, MAX_DEPTH, ExtendedKey, ExtendedKeyAttrs
from keyhier.bip32.prefix import Prefix
from keyhier.bip32.secp256k1 import SigningKey

BIP39_DOMAIN_SEPARATOR = b"Bitcoin seed"
SEED_LENGTHS = (16, 32, 64)


class ExtendedPrivateKey:
    """A secp256k1 signing key together with its extended key attributes."""

    MAX_DEPTH: ClassVar[int] = MAX_DEPTH

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, private_key: SigningKey, attrs: ExtendedKeyAttrs) -> None:
        self.private_key = private_key
        self.attrs = attrs

    @classmethod
    def from_seed(cls, seed: bytes) -> ExtendedPrivateKey:
        """Create the root extended key for a 16, 32 or 64 byte seed."""
        seed = bytes(seed)
        if len(seed) not in SEED_LENGTHS:
            raise Bip32Error(ErrorKind.SEED_LENGTH)
        digest = hmac.new(BIP39_DOMAIN_SEPARATOR, seed, hashlib.sha512).digest()
        secret, chain_code = digest[:KEY_SIZE], digest[KEY_SIZE:]
        return cls(SigningKey.from_bytes(secret), ExtendedKeyAttrs(chain_code=chain_code))

    @classmethod
    def derive_from_path(cls, seed: bytes, path: DerivationPath | str) -> ExtendedPrivateKey:
        """Derive the key at ``path`` below the root key for ``seed``."""
        if isinstance(path, str):
            path = DerivationPath.parse(path)
        key = cls.from_seed(seed)
        for child_number in path:
            key = key.derive_child(child_number)
        return key

    def derive_child(self, child_number: ChildNumber) -> ExtendedPrivateKey:
        """Derive the child key for one child number."""
        depth = self.attrs.depth + 1
        if depth > self.MAX_DEPTH:
            raise Bip32Error(ErrorKind.DEPTH)
        tweak, chain_code = self.private_key.derive_tweak(self.attrs.chain_code, child_number)
        # A tweak outside the curve order is vanishingly unlikely; it raises
        # instead of moving on to the next index.
        private_key = self.private_key.derive_child(tweak)
        attrs = ExtendedKeyAttrs(
            depth=depth,
            parent_fingerprint=self.private_key.public_key().fingerprint(),
            child_number=child_number,
            chain_code=chain_code,
        )
        return ExtendedPrivateKey(private_key, attrs)

    def to_bytes(self) -> bytes:
        """The raw 32-byte private key."""
        return self.private_key.to_bytes()

    def to_extended_key(self, prefix: Prefix) -> ExtendedKey:
        """Serialize as an extended key, with a leading zero byte on the key."""
        return ExtendedKey(prefix=prefix, attrs=self.attrs, key_bytes=b"\x00" + self.to_bytes())

    def to_string(self, prefix: Prefix) -> str:
        """Encode as a Base58Check string with the given prefix."""
        return self.to_extended_key(prefix).to_base58()

    @classmethod
    def from_extended_key(cls, extended_key: ExtendedKey) -> ExtendedPrivateKey:
        """Build from an extended key that holds private key material."""
        if not extended_key.prefix.is_private() or extended_key.key_bytes[0] != 0:
            raise Bip32Error(ErrorKind.CRYPTO)
        return cls(SigningKey.from_bytes(extended_key.key_bytes[1:]), extended_key.attrs)

    @classmethod
    def parse(cls, text: str) -> ExtendedPrivateKey:
        """Decode a Base58Check ``xprv``-style string."""
        return cls.from_extended_key(ExtendedKey.parse(text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtendedPrivateKey):
            return NotImplemented
        keys_match = hmac.compare_digest(self.to_bytes(), other.to_bytes())
        fingerprints_match = hmac.compare_digest(
            self.attrs.parent_fingerprint, other.attrs.parent_fingerprint
        )
        chain_codes_match = hmac.compare_digest(self.attrs.chain_code, other.attrs.chain_code)
        return (
            keys_match
            & fingerprints_match
            & chain_codes_match
            & (self.attrs.depth == other.attrs.depth)
            & (self.attrs.child_number == other.attrs.child_number)
        )

    def __repr__(self) -> str:
        return f"ExtendedPrivateKey(private_key=..., attrs={self.attrs!r})"