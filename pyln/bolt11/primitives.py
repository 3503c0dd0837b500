import struct


class ShortChannelId(object):
    """The block height, transaction index and output index of a channel
    funding output, packed into 64 bits as 24/24/16.
    """
    def __init__(self, block, txnum, outnum):
        for name, value, bits in (('block', block, 24), ('txnum', txnum, 24),
                                  ('outnum', outnum, 16)):
            if not 0 <= value < (1 << bits):
                raise ValueError("short_channel_id {} {} does not fit in {} bits".format(
                    name, value, bits))
        self.block = block
        self.txnum = txnum
        self.outnum = outnum

    @classmethod
    def from_bytes(cls, b):
        assert(len(b) == 8)
        i, = struct.unpack("!Q", b)
        return cls.from_int(i)

    @classmethod
    def from_int(cls, i):
        block = (i >> 40) & 0xFFFFFF
        txnum = (i >> 16) & 0xFFFFFF
        outnum = (i >> 0) & 0xFFFF
        return cls(block=block, txnum=txnum, outnum=outnum)

    @classmethod
    def from_str(cls, s):
        try:
            block, txnum, outnum = [int(p) for p in s.split('x')]
        except ValueError:
            raise ValueError("short_channel_id should be NxNxN, got {}".format(s))
        return cls(block=block, txnum=txnum, outnum=outnum)

    def to_int(self):
        return self.block << 40 | self.txnum << 16 | self.outnum

    def to_bytes(self):
        return struct.pack("!Q", self.to_int())

    def __str__(self):
        return "{self.block}x{self.txnum}x{self.outnum}".format(self=self)

    def __repr__(self):
        return "ShortChannelId[{}]".format(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortChannelId):
            return False

        return (
            self.block == other.block
            and self.txnum == other.txnum
            and self.outnum == other.outnum
        )
