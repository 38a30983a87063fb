"""BIP32 child numbers, paths, Base58, prefixes and secp256k1 extended private keys."""