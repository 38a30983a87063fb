"""Hierarchical key derivation: BIP32, HKD32, mnemonic bit helpers and canonical paths."""

__version__ = "0.1.0"