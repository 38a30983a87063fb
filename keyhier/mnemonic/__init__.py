"""Bit packing for BIP39 mnemonic phrases and a container for BIP39 seeds."""