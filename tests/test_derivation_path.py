import pytest

from keyhier.bip32.child_number import ChildNumber
from keyhier.bip32.derivation_path import DerivationPath
from keyhier.bip32.errors import Bip32Error, ErrorKind


@pytest.mark.parametrize(
    "text",
    [
        "m",
        "m/0",
        "m/0/2147483647'",
        "m/0/2147483647'/1",
        "m/0/2147483647'/1/2147483646'",
        "m/0/2147483647'/1/2147483646'/2",
    ],
)
def test_round_trip(text):
    assert str(DerivationPath.parse(text)) == text


def test_parent():
    path_m_0_h = DerivationPath.parse("m/0/2147483647'")
    path_m_0 = path_m_0_h.parent()
    assert str(path_m_0) == "m/0"
    path_m = path_m_0.parent()
    assert str(path_m) == "m"
    assert path_m.parent() is None


def test_parent_leaves_original_untouched():
    path = DerivationPath.parse("m/1/2")
    path.parent()
    assert len(path) == 2


def test_h_suffix_normalised():
    assert str(DerivationPath.parse("m/44h/0h")) == "m/44'/0'"


@pytest.mark.parametrize("text", ["", "M/0", "/0", "n"])
def test_bad_prefix(text):
    with pytest.raises(Bip32Error) as info:
        DerivationPath.parse(text)
    assert info.value.kind is ErrorKind.DECODE


@pytest.mark.parametrize("text", ["m/", "m/x", "m/0//1"])
def test_bad_component(text):
    with pytest.raises(Bip32Error) as info:
        DerivationPath.parse(text)
    assert info.value.kind is ErrorKind.CHILD_NUMBER


def test_iter_and_len():
    path = DerivationPath.parse("m/0/1'")
    assert list(path) == [ChildNumber(0), ChildNumber.new(1, True)]
    assert len(path) == 2
    assert len(DerivationPath()) == 0


def test_push_and_extend():
    path = DerivationPath()
    path.push(ChildNumber(0))
    path.extend([ChildNumber.new(5, True), ChildNumber(2)])
    assert path == DerivationPath.parse("m/0/5'/2")


def test_equality():
    assert DerivationPath.parse("m/1") == DerivationPath([ChildNumber(1)])
    assert not DerivationPath.parse("m/1") == DerivationPath.parse("m/1'")