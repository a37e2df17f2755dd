"""
Compact size (variable-length unsigned integer) decoding.

    d <= 0xfc   value is d itself                  1 byte
    d == 0xfd   value is the next u16 (LE)         3 bytes
    d == 0xfe   value is the next u32 (LE)         5 bytes
    d == 0xff   value is the next u64 (LE)         9 bytes
"""

from dataclasses import dataclass

from txdecode.base import Decodable
from txdecode.errors import MalformedCompactSize
from txdecode.reader import ByteCursor, read_u8, read_u16, read_u32, read_u64

MAX_SINGLE_BYTE = 0xFC
PREFIX_U16 = 0xFD
PREFIX_U32 = 0xFE
PREFIX_U64 = 0xFF

# Smallest value that legitimately needs each wider form
_MINIMUM_FOR_PREFIX = {
    PREFIX_U16: MAX_SINGLE_BYTE + 1,
    PREFIX_U32: 0x10000,
    PREFIX_U64: 0x100000000,
}


def read_compact_size(cursor: ByteCursor, strict: bool = False) -> int:
    """
    Read a compact size integer.

    Args:
        cursor: Cursor positioned at the discriminator byte
        strict: Reject encodings wider than the value needs

    Returns:
        Decoded value, always in [0, 2**64)

    Raises:
        UnexpectedEndOfInput: Buffer ends inside the encoding
        MalformedCompactSize: Non-minimal encoding while strict
    """
    prefix = read_u8(cursor)

    if prefix <= MAX_SINGLE_BYTE:
        return prefix
    if prefix == PREFIX_U16:
        value = read_u16(cursor)
    elif prefix == PREFIX_U32:
        value = read_u32(cursor)
    else:
        value = read_u64(cursor)

    if strict and value < _MINIMUM_FOR_PREFIX[prefix]:
        raise MalformedCompactSize(prefix, value)

    return value


@dataclass(frozen=True)
class CompactSize(Decodable):
    """A decoded compact size value"""

    value: int

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, strict: bool = False, **options):
        return cls(read_compact_size(cursor, strict=strict))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value
