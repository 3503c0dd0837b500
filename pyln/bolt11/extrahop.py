"""Private route hints carried in the `r` field.

BOLT #11:

`r` (3): `data_length` variable. One or more entries containing extra
routing information for a private route; there may be more than one `r`
field

   * `pubkey` (264 bits)
   * `short_channel_id` (64 bits)
   * `fee_base_msat` (32 bits, big-endian)
   * `fee_proportional_millionths` (32 bits, big-endian)
   * `cltv_expiry_delta` (16 bits, big-endian)
"""
from .errors import SerializationFault, TruncatedInputError
from .primitives import ShortChannelId
from typing import List
import struct


class ExtraHop(object):
    # 33 + 8 + 4 + 4 + 2
    PUBKEY_LENGTH = 33
    CHUNK_LENGTH = 51
    _fmt = "!QLLH"

    def __init__(self, pubkey: bytes, short_channel_id, fee_base_msat: int,
                 fee_proportional_millionths: int, cltv_expiry_delta: int):
        self.pubkey = bytes(pubkey)

        if isinstance(short_channel_id, str) and 'x' in short_channel_id:
            # Convert the short_channel_id from its string representation to
            # its numeric representation
            short_channel_id = ShortChannelId.from_str(short_channel_id).to_int()
        elif isinstance(short_channel_id, ShortChannelId):
            short_channel_id = short_channel_id.to_int()
        elif not isinstance(short_channel_id, int):
            raise ValueError(
                "short_channel_id format cannot be recognized: {}".format(
                    short_channel_id
                )
            )
        self.short_channel_id = short_channel_id

        self.fee_base_msat = fee_base_msat
        self.fee_proportional_millionths = fee_proportional_millionths
        self.cltv_expiry_delta = cltv_expiry_delta

    @property
    def scid(self) -> ShortChannelId:
        return ShortChannelId.from_int(self.short_channel_id)

    def pack(self) -> bytes:
        if len(self.pubkey) != self.PUBKEY_LENGTH:
            raise SerializationFault(
                "pubkey must be {} bytes, {} received".format(
                    self.PUBKEY_LENGTH, len(self.pubkey)))
        try:
            b = struct.pack(self._fmt,
                            self.short_channel_id,
                            self.fee_base_msat,
                            self.fee_proportional_millionths,
                            self.cltv_expiry_delta)
        except struct.error as e:
            raise SerializationFault("Cannot pack {!r}: {}".format(self, e)) from e
        return self.pubkey + b

    @classmethod
    def parse(cls, data: bytes) -> 'ExtraHop':
        if len(data) < cls.CHUNK_LENGTH:
            raise TruncatedInputError("route hint", cls.CHUNK_LENGTH, len(data))

        scid, base, prop, delta = struct.unpack(
            cls._fmt, data[cls.PUBKEY_LENGTH:cls.CHUNK_LENGTH])
        return cls(pubkey=data[:cls.PUBKEY_LENGTH],
                   short_channel_id=scid,
                   fee_base_msat=base,
                   fee_proportional_millionths=prop,
                   cltv_expiry_delta=delta)

    @classmethod
    def parse_all(cls, data: bytes) -> List['ExtraHop']:
        """Split `data` into consecutive hops.

        A trailing chunk shorter than CHUNK_LENGTH is dropped.
        """
        n = len(data) // cls.CHUNK_LENGTH
        return [cls.parse(data[i * cls.CHUNK_LENGTH:(i + 1) * cls.CHUNK_LENGTH])
                for i in range(n)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtraHop):
            return False

        return (
            self.pubkey == other.pubkey
            and self.short_channel_id == other.short_channel_id
            and self.fee_base_msat == other.fee_base_msat
            and self.fee_proportional_millionths == other.fee_proportional_millionths
            and self.cltv_expiry_delta == other.cltv_expiry_delta
        )

    def __repr__(self):
        return ("ExtraHop[pubkey={pubkey}, scid={self.scid}, "
                "fee_base_msat={self.fee_base_msat}, "
                "fee_proportional_millionths={self.fee_proportional_millionths}, "
                "cltv_expiry_delta={self.cltv_expiry_delta}]").format(
                    pubkey=self.pubkey.hex(), self=self)
