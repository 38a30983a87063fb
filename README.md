# keyhier

Deterministic key hierarchies in pure Python.

`keyhier` bundles a few closely related tools:

- **BIP32** (`keyhier.bip32`): child numbers, derivation paths such as
  `m/0'/1/2'`, Base58 and Base58Check encoding, extended key prefixes
  (`xprv`, `xpub`, `tprv`, `ypub`, ...), secp256k1 signing and verifying keys,
  and extended private keys that are derived from a seed and serialized to
  and from their Base58 form.
- **HKD32** (`keyhier.hkd32`): a fully symmetric, HMAC-SHA-512 based key
  hierarchy. 32-byte key material is derived along byte-string paths written
  like Unix paths (`/foo/bar/baz`).
- **Mnemonic helpers** (`keyhier.mnemonic`): the bit packing used by BIP39
  phrases and a container for 64-byte BIP39 seeds.
- **Canonical paths** (`keyhier.canonical_path`): filesystem paths that were
  canonical (absolute, symlink-free) when they were created.

The only runtime dependency is `pycryptodome` (used for RIPEMD-160).

## Installation

```
pip install keyhier
```

To run the test suite:

```
pip install "keyhier[test]"
pytest
```

## BIP32 extended private keys

```python
from keyhier.bip32.derivation_path import DerivationPath
from keyhier.bip32.extended_private_key import ExtendedPrivateKey
from keyhier.bip32.prefix import Prefix

seed = bytes.fromhex("000102030405060708090a0b0c0d0e0f")

xprv = ExtendedPrivateKey.derive_from_path(seed, DerivationPath.parse("m/0'/1/2'"))
encoded = xprv.to_string(Prefix.XPRV)     # "xprv..."

same = ExtendedPrivateKey.parse(encoded)
assert same == xprv
```

- `ExtendedPrivateKey.from_seed(seed)` builds the root key; seeds must be 16,
  32 or 64 bytes long.
- `derive_from_path(seed, path)` accepts a `DerivationPath` or a path string.
- `derive_child(child_number)` derives one level; depth is limited to 255.
- `to_bytes()` gives the raw 32-byte private key, `to_extended_key(prefix)`
  an `ExtendedKey`, and `to_string(prefix)` its Base58Check form.
- Equality compares key material and all attributes, using constant-time
  comparisons for the secret parts.

`keyhier.bip32.extended_key` holds `ExtendedKey` (prefix, attributes and 33
bytes of key material) and `ExtendedKeyAttrs` (depth, parent fingerprint,
child number, chain code). `ExtendedKey.parse(text)` decodes any 78-byte
Base58Check extended key, private or public, and `to_base58()` encodes it.

`keyhier.bip32.secp256k1` provides `SigningKey` and `VerifyingKey`. A signing
key gives its `public_key()`; a verifying key can `derive_child(tweak)`,
compute its 4-byte `fingerprint()` and, together with a chain code,
`derive_tweak(chain_code, child_number)` for non-hardened children.

### Errors

BIP32 operations raise `keyhier.bip32.errors.Bip32Error`, a `ValueError`
whose `kind` is an `ErrorKind` member: `BASE58`, `BIP39`, `CHILD_NUMBER`,
`CRYPTO`, `DECODE`, `DEPTH` or `SEED_LENGTH`.

### Child numbers, paths and prefixes

```python
from keyhier.bip32.child_number import ChildNumber
from keyhier.bip32.derivation_path import DerivationPath
from keyhier.bip32.prefix import Prefix

n = ChildNumber.parse("42h")
n.index()        # 42
n.is_hardened()  # True
str(n)           # "42'"
ChildNumber.new(42, hardened=True) == n   # True

path = DerivationPath.parse("m/0/2147483647'")
str(path.parent())   # "m/0"
len(path)            # 2

Prefix.from_version(0x0488B21E)   # Prefix(chars='xpub', version=0x0488b21e)
```

`keyhier.bip32.base58` offers `b58encode`, `b58decode`, `b58encode_check`
and `b58decode_check`.

## HKD32 symmetric key derivation

```python
from keyhier.hkd32.key_material import KeyMaterial
from keyhier.hkd32.path import PathBuf

root = KeyMaterial.random()
subkey = root.derive_subkey(PathBuf.parse("/foo/bar/baz"))
derived = bytes(subkey)   # 32 bytes
```

`derive_subkey` also accepts a path string. Derivation is deterministic, and
the root path `/` returns the input key unchanged. `Path` holds a validated
length-prefixed serialization; `PathBuf` can also be extended with `push`
and `extend`. Components are non-empty and at most 256 bytes. Malformed
paths and key material of the wrong length raise
`keyhier.hkd32.errors.Hkd32Error`.

## Mnemonic helpers

`keyhier.mnemonic.bits` has `BitWriter`, which packs fixed-width values most
significant bit first, and `iter_bits(values, in_size, out_size)`, which
regroups bit widths (for example bytes into 11-bit word indices).
`keyhier.mnemonic.seed.Seed` wraps exactly 64 bytes and raises `Bip32Error`
with `SEED_LENGTH` otherwise.

## Canonical paths

```python
from keyhier.canonical_path import CanonicalPath, current_exe

here = CanonicalPath.canonicalize(".")
print(here, here.is_dir())
print(current_exe())
```

`CanonicalPath(path)` accepts only a path that is already canonical and
raises `NonCanonicalPathError` otherwise, for instance for a relative path
or one that passes through a symbolic link; paths that do not exist raise
`OSError`. `join`, `with_name`, `with_suffix` and `parent` return new
canonical paths under the same rule.

## What is not included

- There is no extended public key type. A public key can still be
  serialized by building an `ExtendedKey` with `Prefix.XPUB`, the private
  key's `attrs` and `private_key.public_key().to_bytes()`, and derived with
  `VerifyingKey.derive_tweak` and `derive_child`.
- There is no BIP39 word list, so mnemonic phrases cannot be generated,
  parsed or turned into seeds; only the bit packing and the seed container
  are provided.
- There is no command-line tool.