import pytest

from keyhier.hkd32.errors import Hkd32Error
from keyhier.hkd32.key_material import KEY_SIZE, KeyMaterial
from keyhier.hkd32.path import PathBuf


def _test_key() -> KeyMaterial:
    return KeyMaterial(bytes(range(32)))


def _derive(path: str) -> bytes:
    return bytes(_test_key().derive_subkey(PathBuf.parse(path)))


def test_vector_0_empty_path():
    assert _derive("/") == bytes(range(32))


def test_vector_1():
    assert _derive("/1") == bytes(
        [
            132, 75, 58, 18, 91, 107, 10, 110, 128, 162, 98, 177, 192, 212, 50, 101,
            136, 46, 46, 83, 179, 150, 64, 68, 250, 57, 101, 1, 227, 159, 148, 20,
        ]
    )


def test_vector_2():
    assert _derive("/1/2") == bytes(
        [
            110, 41, 196, 37, 188, 239, 92, 14, 14, 8, 176, 199, 3, 232, 46, 214,
            237, 183, 11, 238, 110, 19, 100, 64, 191, 71, 221, 96, 0, 165, 202, 6,
        ]
    )


def test_vector_3():
    assert _derive("/1/2/3") == bytes(
        [
            17, 67, 145, 251, 66, 229, 67, 213, 30, 37, 15, 106, 223, 215, 34, 87,
            221, 46, 192, 225, 50, 153, 127, 65, 168, 152, 14, 237, 100, 231, 142, 3,
        ]
    )


def test_string_path_matches_parsed_path():
    key = _test_key()
    assert key.derive_subkey("/1/2/3") == key.derive_subkey(PathBuf.parse("/1/2/3"))


def test_derivation_leaves_parent_unchanged():
    key = _test_key()
    key.derive_subkey("/1")
    assert bytes(key) == bytes(range(32))


def test_from_bytes_round_trip():
    data = bytes(range(1, 33))
    assert bytes(KeyMaterial.from_bytes(data)) == data


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_from_bytes_rejects_wrong_length(length):
    with pytest.raises(Hkd32Error):
        KeyMaterial.from_bytes(bytes(length))


def test_random_has_key_size_and_varies():
    first, second = KeyMaterial.random(), KeyMaterial.random()
    assert len(bytes(first)) == KEY_SIZE
    assert first != second


def test_equality_by_content():
    assert _test_key() == KeyMaterial(bytes(range(32)))
    assert _test_key() != KeyMaterial(bytes(32))


def test_repr_hides_key():
    assert repr(_test_key()) == "KeyMaterial(...)"


def test_invalid_string_path_raises():
    with pytest.raises(Hkd32Error):
        _test_key().derive_subkey("no-leading-slash")