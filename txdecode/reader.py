"""
Forward-only byte cursor and fixed-width integer readers.

All multi-byte integers in the transaction wire format are little-endian.
"""

import struct

from txdecode.errors import HexDecodeError, UnexpectedEndOfInput


class ByteCursor:
    """
    Read-only view over an immutable byte buffer with a moving offset.

    The only way to get bytes out is read_exact(); there is no seek or peek,
    so every decoder consumes the stream strictly in order.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @classmethod
    def from_hex(cls, hex_string: str) -> "ByteCursor":
        """Build a cursor over the bytes encoded by a hex string"""
        return cls(hex_to_bytes(hex_string))

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    @property
    def is_exhausted(self) -> bool:
        return self._offset == len(self._data)

    def read_exact(self, n: int) -> bytes:
        """
        Return the next n bytes and advance past them.

        Raises:
            UnexpectedEndOfInput: fewer than n bytes remain (offset unchanged)
        """
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        if n > self.remaining:
            raise UnexpectedEndOfInput(n, self.remaining, self._offset)
        chunk = self._data[self._offset : self._offset + n]
        self._offset += n
        return chunk

    def consumed(self, start: int = 0) -> bytes:
        """Bytes from start (default: beginning of buffer) up to the current offset"""
        return self._data[start : self._offset]

    def __repr__(self) -> str:
        return f"ByteCursor(offset={self._offset}, length={len(self._data)})"


def hex_to_bytes(hex_string: str) -> bytes:
    """
    Decode a hex string (case-insensitive, even length) into bytes.

    Surrounding whitespace is ignored; whitespace inside the string is not.
    """
    cleaned = hex_string.strip()
    if len(cleaned) % 2:
        raise HexDecodeError(f"Hex string has odd length {len(cleaned)}")
    if any(ch.isspace() for ch in cleaned):
        raise HexDecodeError("Hex string contains embedded whitespace")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise HexDecodeError(f"Invalid hex string: {e}") from e


_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


def read_u8(cursor: ByteCursor) -> int:
    return _U8.unpack(cursor.read_exact(1))[0]


def read_u16(cursor: ByteCursor) -> int:
    return _U16.unpack(cursor.read_exact(2))[0]


def read_u32(cursor: ByteCursor) -> int:
    return _U32.unpack(cursor.read_exact(4))[0]


def read_u64(cursor: ByteCursor) -> int:
    return _U64.unpack(cursor.read_exact(8))[0]
