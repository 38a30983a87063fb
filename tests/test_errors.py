import pytest

from keyhier.bip32.errors import Bip32Error, ErrorKind


@pytest.mark.parametrize(
    ("kind", "message"),
    [
        (ErrorKind.BASE58, "base58 error"),
        (ErrorKind.BIP39, "bip39 error"),
        (ErrorKind.CHILD_NUMBER, "invalid child number"),
        (ErrorKind.CRYPTO, "cryptographic error"),
        (ErrorKind.DECODE, "decoding error"),
        (ErrorKind.DEPTH, "maximum derivation depth exceeded"),
        (ErrorKind.SEED_LENGTH, "seed length invalid"),
    ],
)
def test_messages(kind, message):
    assert str(Bip32Error(kind)) == message


def test_kind_is_kept():
    err = Bip32Error(ErrorKind.DEPTH)
    assert err.kind is ErrorKind.DEPTH


def test_equality_by_kind():
    assert Bip32Error(ErrorKind.DECODE) == Bip32Error(ErrorKind.DECODE)
    assert not (Bip32Error(ErrorKind.DECODE) == Bip32Error(ErrorKind.CRYPTO))


def test_is_value_error_with_message():
    err = Bip32Error(ErrorKind.SEED_LENGTH)
    assert isinstance(err, ValueError)
    assert str(err) == "seed length invalid"
    assert err.kind is ErrorKind.SEED_LENGTH