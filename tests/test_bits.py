from pyln.bolt11 import (
    BECH32_ALPHABET,
    CHARSET,
    InvalidPaddingError,
    InvalidWordError,
    SerializationFault,
    bytes_to_u5,
    u5_to_bytes,
)
from pyln.bolt11.bits import bitarray_to_u5, int_to_u5, u5_to_int
import bitstring
import pytest


def test_alphabet():
    assert(len(BECH32_ALPHABET) == 32)
    assert(BECH32_ALPHABET['q'] == 0)
    assert(BECH32_ALPHABET['l'] == 31)
    assert(all(CHARSET[v] == c for c, v in BECH32_ALPHABET.items()))
    with pytest.raises(TypeError):
        BECH32_ALPHABET['b'] = 1


def test_bytes_to_u5():
    assert(bytes_to_u5(b'') == b'')
    # 8 bits -> 2 words, 2 bits of padding
    assert(bytes_to_u5(b'\xff') == bytes([31, 28]))
    # 40 bits fill 8 words exactly
    assert(bytes_to_u5(b'\x00\x01\x02\x03\x04') == bytes([0, 0, 0, 16, 4, 0, 24, 4]))


def test_u5_to_bytes():
    assert(u5_to_bytes([]) == b'')
    assert(u5_to_bytes([31, 28]) == b'\xff')
    assert(u5_to_bytes(bytes([0, 0, 0, 16, 4, 0, 24, 4])) == b'\x00\x01\x02\x03\x04')
    for n in range(0, 70):
        data = bytes(range(n))
        assert(u5_to_bytes(bytes_to_u5(data)) == data)


def test_u5_to_bytes_padding():
    # A single word cannot hold a whole byte
    with pytest.raises(InvalidPaddingError):
        u5_to_bytes([0])
    with pytest.raises(InvalidPaddingError):
        u5_to_bytes([31, 29])
    # 3 words: 15 bits, 7 left over
    with pytest.raises(InvalidPaddingError):
        u5_to_bytes([0, 0, 0])


def test_u5_to_bytes_invalid_word():
    with pytest.raises(InvalidWordError):
        u5_to_bytes([32, 0])
    with pytest.raises(InvalidWordError):
        u5_to_bytes([-1, 0])


def test_int_to_u5():
    assert(int_to_u5(0) == b'')
    assert(int_to_u5(12) == bytes([12]))
    assert(int_to_u5(60) == bytes([1, 28]))
    assert(int_to_u5(1024) == bytes([1, 0, 0]))
    assert(u5_to_int(int_to_u5(604800)) == 604800)
    assert(u5_to_int([]) == 0)
    with pytest.raises(SerializationFault):
        int_to_u5(-1)


def test_bitarray_to_u5():
    assert(bitarray_to_u5(bitstring.BitArray()) == b'')
    assert(bitarray_to_u5(bitstring.BitArray('0b1111100001')) == bytes([31, 1]))
