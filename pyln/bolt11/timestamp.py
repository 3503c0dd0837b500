# BOLT #11:
#
# 1. `timestamp`: seconds-since-1970 (35 bits, big-endian)
from .alphabet import check_u5
from .errors import SerializationFault, TruncatedInputError
from typing import Sequence


TIMESTAMP_WORDS = 7
TIMESTAMP_MAX = (1 << (5 * TIMESTAMP_WORDS)) - 1


def encode_timestamp(timestamp: int) -> bytes:
    if not 0 <= timestamp <= TIMESTAMP_MAX:
        raise SerializationFault(
            "{} exceeds maximum timestamp capacity".format(timestamp))
    ret = []
    while len(ret) < TIMESTAMP_WORDS:
        ret.append(timestamp % 32)
        timestamp //= 32
    ret.reverse()
    return bytes(ret)


def decode_timestamp(data: Sequence[int]) -> int:
    if len(data) < TIMESTAMP_WORDS:
        raise TruncatedInputError("timestamp", TIMESTAMP_WORDS, len(data))
    total = 0
    for w in check_u5(data[:TIMESTAMP_WORDS], "timestamp"):
        total = total * 32 + w
    return total
