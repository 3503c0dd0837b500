"""Conversions between 8-bit payloads and bech32's 5-bit words.

Bech32 spits out arrays of 5-bit values while most tagged fields carry
bytes, so everything crosses this boundary through bitstring.
"""
from .alphabet import check_u5
from .errors import InvalidPaddingError, SerializationFault
from typing import Sequence
import bitstring  # type: ignore


def u5_to_bitarray(arr: Sequence[int]) -> bitstring.BitArray:
    """Converts a list of uint5 values to a bitarray."""
    ret = bitstring.BitArray()
    for a in check_u5(arr):
        ret += bitstring.pack("uint:5", a)
    return ret


def bitarray_to_u5(barr) -> bytes:
    """Converts a bitarray whose length is a multiple of 5 into words."""
    assert len(barr) % 5 == 0
    return bytes(barr[i:i + 5].uint for i in range(0, len(barr), 5))


def bytes_to_u5(data: bytes) -> bytes:
    """Pack bytes into words, left-aligned and zero-padded at the end.
    """
    barr = bitstring.BitArray(bytes(data))
    # Tagged fields need to be zero-padded to 5 bits.
    padding_len = (5 - len(barr) % 5) % 5
    if padding_len:
        barr.append(bitstring.Bits(length=padding_len))
    return bitarray_to_u5(barr)


def u5_to_bytes(words: Sequence[int]) -> bytes:
    """Exact inverse of `bytes_to_u5`.

    The bits left over once the last full byte has been taken are padding:
    there must be fewer than 5 of them (otherwise a whole word was padding)
    and they must all be zero.
    """
    barr = u5_to_bitarray(words)
    leftover = len(barr) % 8
    if leftover >= 5:
        raise InvalidPaddingError(
            "{} words leave {} padding bits".format(len(words), leftover))
    if leftover and barr[-leftover:].any(True):
        raise InvalidPaddingError("Non-zero padding bits in {} words".format(len(words)))
    return barr[:len(barr) - leftover].bytes


def int_to_u5(value: int) -> bytes:
    """Minimal big-endian base-32 representation, empty for zero.
    """
    if value < 0:
        raise SerializationFault("Cannot encode negative value {}".format(value))
    ret = []
    while value:
        ret.append(value % 32)
        value //= 32
    ret.reverse()
    return bytes(ret)


def u5_to_int(words: Sequence[int]) -> int:
    total = 0
    for w in check_u5(words):
        total = total * 32 + w
    return total
