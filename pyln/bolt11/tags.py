"""Tagged fields of a BOLT #11 payment request.

BOLT #11:

Each Tagged Field is of the form:

   1. `type` (5 bits)
   2. `data_length` (10 bits, big-endian)
   3. `data` (`data_length` x 5 bits)

Every field type is a subclass of `Tag`. `to_u5()` gives the 5-bit words of
a field, header included, and `pull_tagged()` reads one field back from a
word stream, returning how many words it used so the caller can carry on
with the next one.
"""
from .alphabet import (
    TAG_DESCRIPTION,
    TAG_DESCRIPTION_HASH,
    TAG_EXPIRY,
    TAG_FALLBACK_ADDRESS,
    TAG_MIN_FINAL_CLTV_EXPIRY,
    TAG_PAYMENT_HASH,
    TAG_ROUTING_INFO,
    check_u5,
    tag_char,
)
from .bits import bytes_to_u5, int_to_u5, u5_to_bytes, u5_to_int
from .errors import (
    InvalidLengthError,
    InvalidUtf8Error,
    SerializationFault,
    TruncatedInputError,
)
from .extrahop import ExtraHop
from typing import Iterable, List, Optional, Sequence, Tuple
import logging


logger = logging.getLogger(__name__)

HEADER_WORDS = 3
# 256 bits, zero-padded to a multiple of 5
PAYMENT_HASH_WORDS = 52
PAYMENT_HASH_LENGTH = 32
# Highest fallback version we interpret: witness versions 0-16, then 17 for
# pubkey hash and 18 for script hash.
MAX_FALLBACK_VERSION = 18


def write_size(size: int) -> bytes:
    """Express a payload length as exactly two words.
    """
    output = int_to_u5(size)
    if len(output) == 0:
        return bytes([0, 0])
    elif len(output) == 1:
        return bytes([0]) + output
    elif len(output) == 2:
        return output
    raise InvalidLengthError(
        "tag data length field must be encoded on 2 5-bit words, {} needs {}".format(
            size, len(output)))


# Tagged field containing words
def tagged(code: int, data: bytes) -> bytes:
    return bytes([code]) + write_size(len(data)) + data


# Tagged field containing bytes
def tagged_bytes(code: int, data: bytes) -> bytes:
    return tagged(code, bytes_to_u5(data))


class Tag(object):
    """One tagged field. Subclasses set `code` to their type word.
    """
    code = None  # type: Optional[int]

    @property
    def char(self) -> Optional[str]:
        return tag_char(self.code)

    def to_u5(self) -> bytes:
        raise NotImplementedError("Tag is an abstract class, use one of its "
                                  "subclasses instead")

    @classmethod
    def from_payload(cls, code: int, data: bytes) -> 'Tag':
        raise NotImplementedError()

    @classmethod
    def parse(cls, words: Sequence[int]) -> 'Tag':
        tag, _ = pull_tagged(words)
        return tag

    from_u5 = parse

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __repr__(self):
        fields = ", ".join("{}={!r}".format(k, v) for k, v in self.__dict__.items())
        return "{}[{}]".format(type(self).__name__, fields)


class PaymentHash(Tag):
    code = TAG_PAYMENT_HASH

    def __init__(self, hash: bytes):
        self.hash = bytes(hash)

    def to_u5(self) -> bytes:
        # The reader takes exactly 52 words, so nothing else can round-trip.
        if len(self.hash) != PAYMENT_HASH_LENGTH:
            raise InvalidLengthError("payment hash must be {} bytes, {} received".format(
                PAYMENT_HASH_LENGTH, len(self.hash)))
        return tagged_bytes(self.code, self.hash)

    @classmethod
    def from_payload(cls, code, data):
        return cls(u5_to_bytes(data))


class Description(Tag):
    code = TAG_DESCRIPTION

    def __init__(self, description: str):
        self.description = description

    def to_u5(self) -> bytes:
        return tagged_bytes(self.code, self.description.encode('utf-8'))

    @classmethod
    def from_payload(cls, code, data):
        try:
            return cls(u5_to_bytes(data).decode('utf-8'))
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error("description is not valid UTF-8: {}".format(e)) from e


class DescriptionHash(Tag):
    code = TAG_DESCRIPTION_HASH

    def __init__(self, hash: bytes):
        self.hash = bytes(hash)

    def to_u5(self) -> bytes:
        return tagged_bytes(self.code, self.hash)

    @classmethod
    def from_payload(cls, code, data):
        return cls(u5_to_bytes(data))


class FallbackAddress(Tag):
    """On-chain address to pay if the lightning payment fails.

    `version` is the witness version (0-16), 17 for a pubkey hash or 18 for
    a script hash; `hash` is the witness program or the hash160. The
    version travels as a single word ahead of the packed hash.
    """
    code = TAG_FALLBACK_ADDRESS

    def __init__(self, version: int, hash: bytes):
        self.version = version
        self.hash = bytes(hash)

    def to_u5(self) -> bytes:
        version = check_u5([self.version], "fallback version")
        # Higher versions would read back as an UnknownTag.
        if self.version > MAX_FALLBACK_VERSION:
            raise SerializationFault("fallback version {} is above {}".format(
                self.version, MAX_FALLBACK_VERSION))
        return tagged(self.code, version + bytes_to_u5(self.hash))

    @classmethod
    def from_payload(cls, code, data):
        if len(data) < 1:
            raise TruncatedInputError("fallback address version", 1, 0)

        version = data[0]
        if version > MAX_FALLBACK_VERSION:
            logger.debug("Keeping fallback address with unknown version %d as unknown tag",
                         version)
            return UnknownTag(code, data)
        return cls(version, u5_to_bytes(data[1:]))


class Expiry(Tag):
    code = TAG_EXPIRY

    def __init__(self, seconds: int):
        self.seconds = seconds

    def to_u5(self) -> bytes:
        return tagged(self.code, int_to_u5(self.seconds))

    @classmethod
    def from_payload(cls, code, data):
        return cls(u5_to_int(data))


class MinFinalCltvExpiry(Tag):
    code = TAG_MIN_FINAL_CLTV_EXPIRY

    def __init__(self, blocks: int):
        self.blocks = blocks

    def to_u5(self) -> bytes:
        return tagged(self.code, int_to_u5(self.blocks))

    @classmethod
    def from_payload(cls, code, data):
        return cls(u5_to_int(data))


class RoutingInfo(Tag):
    """A private route, hops listed in the order they are traversed.
    """
    code = TAG_ROUTING_INFO

    def __init__(self, path: Iterable[ExtraHop]):
        self.path = list(path)

    def to_u5(self) -> bytes:
        return tagged_bytes(self.code, b''.join(hop.pack() for hop in self.path))

    @classmethod
    def from_payload(cls, code, data):
        b = u5_to_bytes(data)
        if len(b) % ExtraHop.CHUNK_LENGTH:
            logger.debug("Dropping %d trailing bytes of route hint",
                         len(b) % ExtraHop.CHUNK_LENGTH)
        return cls(ExtraHop.parse_all(b))


class UnknownTag(Tag):
    """A field we do not interpret, kept verbatim so it can be re-encoded.
    """
    def __init__(self, tag: int, data: Sequence[int]):
        self.tag = tag
        self.data = bytes(data)

    @property
    def code(self):
        return self.tag

    def to_u5(self) -> bytes:
        tag = check_u5([self.tag], "unknown tag type")
        return tagged(tag[0], check_u5(self.data, "unknown tag data"))

    @classmethod
    def from_payload(cls, code, data):
        logger.debug("Keeping unknown tag %d (%d words)", code, len(data))
        return cls(code, data)


_tag_types = {
    cls.code: cls for cls in (
        PaymentHash,
        Description,
        DescriptionHash,
        FallbackAddress,
        Expiry,
        MinFinalCltvExpiry,
        RoutingInfo,
    )
}


def pull_tagged(words: Sequence[int], pos: int = 0) -> Tuple[Tag, int]:
    """Parse the tagged field starting at `words[pos]`.

    Returns the field and the number of words it occupies.
    """
    available = len(words) - pos
    if available < HEADER_WORDS:
        raise TruncatedInputError("tag header", HEADER_WORDS, max(available, 0))

    code, hi, lo = check_u5(words[pos:pos + HEADER_WORDS], "tag header")
    length = hi * 32 + lo

    # The payment hash is always read as 52 words, whatever `data_length` says.
    if code == TAG_PAYMENT_HASH:
        payload = PAYMENT_HASH_WORDS
    else:
        payload = length
    needed = HEADER_WORDS + max(payload, length)
    if available < needed:
        raise TruncatedInputError("tag '{}' data".format(tag_char(code)), needed, available)

    data = check_u5(words[pos + HEADER_WORDS:pos + HEADER_WORDS + payload], "tag data")
    tag = _tag_types.get(code, UnknownTag).from_payload(code, data)
    return tag, HEADER_WORDS + length


def encode_tags(tags: Iterable[Tag]) -> bytes:
    return b''.join(t.to_u5() for t in tags)


def decode_tags(words: Sequence[int]) -> List[Tag]:
    """Parse a run of concatenated tagged fields, up to the end of `words`.
    """
    tags = []
    pos = 0
    while pos < len(words):
        tag, consumed = pull_tagged(words, pos)
        tags.append(tag)
        pos += consumed
    return tags
