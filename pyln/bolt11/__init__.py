from .alphabet import BECH32_ALPHABET, CHARSET
from .amount import Unit, shorten_amount, unshorten_amount
from .bits import bytes_to_u5, u5_to_bytes
from .errors import (
    Bolt11Error,
    InvalidLengthError,
    InvalidPaddingError,
    InvalidUtf8Error,
    InvalidWordError,
    ParseAmountError,
    SerializationFault,
    TruncatedInputError,
)
from .extrahop import ExtraHop
from .primitives import ShortChannelId
from .tags import (
    Description,
    DescriptionHash,
    Expiry,
    FallbackAddress,
    MinFinalCltvExpiry,
    PaymentHash,
    RoutingInfo,
    Tag,
    UnknownTag,
    decode_tags,
    encode_tags,
    pull_tagged,
    write_size,
)
from .timestamp import decode_timestamp, encode_timestamp

__version__ = "24.11.1"

__all__ = [
    "BECH32_ALPHABET",
    "CHARSET",
    "Bolt11Error",
    "Description",
    "DescriptionHash",
    "Expiry",
    "ExtraHop",
    "FallbackAddress",
    "InvalidLengthError",
    "InvalidPaddingError",
    "InvalidUtf8Error",
    "InvalidWordError",
    "MinFinalCltvExpiry",
    "ParseAmountError",
    "PaymentHash",
    "RoutingInfo",
    "SerializationFault",
    "ShortChannelId",
    "Tag",
    "TruncatedInputError",
    "Unit",
    "UnknownTag",
    "bytes_to_u5",
    "decode_tags",
    "decode_timestamp",
    "encode_tags",
    "encode_timestamp",
    "pull_tagged",
    "shorten_amount",
    "u5_to_bytes",
    "unshorten_amount",
    "write_size",
    "__version__",
]
