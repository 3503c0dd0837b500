from pyln.bolt11 import SerializationFault, TruncatedInputError, decode_timestamp, encode_timestamp
import pytest


def test_timestamp():
    data = bytes([1, 12, 18, 31, 28, 25, 2])
    timestamp = 1496314658

    assert(decode_timestamp(data) == timestamp)
    assert(encode_timestamp(timestamp) == data)


def test_timestamp_bounds():
    for t in [0, 1, 31, 32, 2**35 - 1]:
        words = encode_timestamp(t)
        assert(len(words) == 7)
        assert(decode_timestamp(words) == t)

    assert(encode_timestamp(0) == bytes(7))
    assert(encode_timestamp(2**35 - 1) == bytes([31] * 7))


def test_timestamp_only_reads_seven_words():
    data = [0, 0, 0, 0, 0, 0, 5, 13, 1, 2]
    assert(decode_timestamp(data) == 5)


def test_timestamp_errors():
    with pytest.raises(SerializationFault):
        encode_timestamp(2**35)
    with pytest.raises(SerializationFault):
        encode_timestamp(-1)
    with pytest.raises(TruncatedInputError):
        decode_timestamp([1, 2, 3])
