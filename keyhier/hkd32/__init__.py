"""HMAC-based hierarchical derivation of symmetric 256-bit keys."""