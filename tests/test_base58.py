import pytest

from keyhier.bip32.base58 import b58decode, b58decode_check, b58encode, b58encode_check
from keyhier.bip32.errors import Bip32Error, ErrorKind

XPRV = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPP"
    "qjiChkVvvNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00", b"\x00\x00\xff", b"hello world", bytes(range(256))],
)
def test_round_trip(data):
    assert b58decode(b58encode(data)) == data


@pytest.mark.parametrize("data", [b"", b"\x00\x01", b"key material"])
def test_check_round_trip(data):
    assert b58decode_check(b58encode_check(data)) == data


def test_leading_zeros_become_ones():
    encoded = b58encode(b"\x00\x00\x05")
    assert encoded.startswith("11")
    assert not encoded[2:].startswith("1")


def test_decode_extended_key_vector():
    payload = b58decode_check(XPRV)
    assert len(payload) == 78
    assert payload[:4] == (0x0488ADE4).to_bytes(4, "big")
    assert b58encode_check(payload) == XPRV


@pytest.mark.parametrize("text", ["0abc", "Iabc", "abc!"])
def test_invalid_character(text):
    with pytest.raises(Bip32Error) as info:
        b58decode(text)
    assert info.value.kind is ErrorKind.BASE58


def test_bad_checksum():
    tampered = XPRV[:-1] + ("j" if XPRV[-1] != "j" else "k")
    with pytest.raises(Bip32Error) as info:
        b58decode_check(tampered)
    assert info.value.kind is ErrorKind.BASE58


def test_too_short_for_checksum():
    with pytest.raises(Bip32Error) as info:
        b58decode_check(b58encode(b"\x01\x02"))
    assert info.value.kind is ErrorKind.BASE58