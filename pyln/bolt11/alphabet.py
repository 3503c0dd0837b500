"""The bech32 alphabet and the tagged-field type codes derived from it.

Tagged fields identify themselves with a single 5-bit word, which BOLT #11
refers to by its bech32 character ('p' is 1, 'd' is 13, ...).
"""
from .errors import InvalidWordError
from types import MappingProxyType
from typing import Iterable


CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

# char -> 5-bit value, built once and never mutated
BECH32_ALPHABET = MappingProxyType({c: i for i, c in enumerate(CHARSET)})

# BOLT #11:
#
# * `p` (1): `data_length` 52. 256-bit SHA256 payment_hash.
# * `d` (13): `data_length` variable. Short description of purpose of payment (UTF-8).
# * `h` (23): `data_length` 52. 256-bit description of purpose of payment (SHA256).
# * `x` (6): `data_length` variable. `expiry` time in seconds (big-endian).
# * `c` (24): `data_length` variable. `min_final_cltv_expiry` to use for the last HTLC.
# * `f` (9): `data_length` variable, depending on version. Fallback on-chain address.
# * `r` (3): `data_length` variable. One or more entries containing extra
#   routing information for a private route.
TAG_PAYMENT_HASH = BECH32_ALPHABET['p']
TAG_DESCRIPTION = BECH32_ALPHABET['d']
TAG_DESCRIPTION_HASH = BECH32_ALPHABET['h']
TAG_EXPIRY = BECH32_ALPHABET['x']
TAG_MIN_FINAL_CLTV_EXPIRY = BECH32_ALPHABET['c']
TAG_FALLBACK_ADDRESS = BECH32_ALPHABET['f']
TAG_ROUTING_INFO = BECH32_ALPHABET['r']


def is_u5(value) -> bool:
    return isinstance(value, int) and 0 <= value <= 31


def check_u5(words: Iterable[int], what: str = "words") -> bytes:
    """Validate a word sequence and return it as `bytes`.
    """
    words = list(words)
    for w in words:
        if not is_u5(w):
            raise InvalidWordError("{}: {!r} is not a 5-bit value".format(what, w))
    return bytes(words)


def tag_char(tag: int):
    """The bech32 character of a type code, or None if it is not a word.
    """
    if not is_u5(tag):
        return None
    return CHARSET[tag]
