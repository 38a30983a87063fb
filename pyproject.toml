[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyhier"
version = "0.1.0"
description = "Hierarchical key derivation: BIP32 extended private keys, HMAC-based symmetric key trees, BIP39 bit helpers and canonical filesystem paths"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = [
    "bip32",
    "bip39",
    "hd-wallet",
    "key-derivation",
    "secp256k1",
    "hmac",
    "base58",
    "xprv",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["keyhier"]

[tool.hatch.build.targets.sdist]
include = [
    "keyhier",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
