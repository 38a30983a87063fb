import pytest

from keyhier.mnemonic.bits import BitWriter, iter_bits


def test_single_bit_is_padded_to_high_bit():
    writer = BitWriter()
    writer.push(1, 1)
    assert writer.to_bytes() == b"\x80"


def test_two_full_bytes_make_one_eleven_bit_value():
    assert list(iter_bits([0xFF, 0xFF], 8, 11)) == [0x7FF]


def test_empty_writer_gives_empty_bytes():
    assert BitWriter().to_bytes() == b""


def test_byte_pushes_reproduce_input():
    data = bytes(range(40))
    writer = BitWriter()
    for byte in data:
        writer.push(byte, 8)
    assert writer.to_bytes() == data


def test_identity_regrouping():
    data = bytes(range(0, 250, 7))
    assert bytes(iter_bits(data, 8, 8)) == data


def test_round_trip_through_eleven_bit_words():
    data = bytes((i * 37 + 11) % 256 for i in range(33))
    words = list(iter_bits(data, 8, 11))
    assert len(words) == 24
    assert all(0 <= word < 2048 for word in words)
    writer = BitWriter()
    for word in words:
        writer.push(word, 11)
    assert writer.to_bytes() == data


def test_eleven_to_eight_round_trip():
    words = [0, 2047, 1, 1024, 513, 77, 1999, 300]
    packed = bytes(iter_bits(words, 11, 8))
    assert len(packed) == len(words) * 11 // 8
    assert list(iter_bits(packed, 8, 11)) == words


def test_trailing_bits_are_dropped():
    data = bytes(range(32))
    words = list(iter_bits(data, 8, 11))
    assert len(words) == 32 * 8 // 11


def test_writer_pads_partial_final_byte():
    writer = BitWriter()
    for word in (5, 6, 7):
        writer.push(word, 11)
    packed = writer.to_bytes()
    assert len(packed) == (33 + 7) // 8
    assert list(iter_bits(packed, 8, 11)) == [5, 6, 7]


def test_push_rejects_oversized_value():
    writer = BitWriter()
    with pytest.raises(ValueError):
        writer.push(2048, 11)


def test_push_rejects_negative_value():
    with pytest.raises(ValueError):
        BitWriter().push(-1, 8)


def test_push_rejects_bad_size():
    with pytest.raises(ValueError):
        BitWriter().push(0, 0)


def test_iter_bits_rejects_oversized_input():
    with pytest.raises(ValueError):
        list(iter_bits([256], 8, 11))


def test_iter_bits_rejects_bad_size():
    with pytest.raises(ValueError):
        list(iter_bits([1], 8, 0))