"""
Exception hierarchy for transaction decoding.

Every decode-layer function either returns a complete value or raises one of
these. Nothing is retried: the input is a fully resident byte buffer.
"""


class TransactionDecodeError(Exception):
    """Base class for all decode failures"""


class HexDecodeError(TransactionDecodeError, ValueError):
    """Input string is not valid hexadecimal"""


class UnexpectedEndOfInput(TransactionDecodeError):
    """A read asked for more bytes than the buffer has left"""

    def __init__(self, requested: int, available: int, offset: int):
        self.requested = requested
        self.available = available
        self.offset = offset
        super().__init__(
            f"Unexpected end of input: need {requested} bytes at offset {offset}, "
            f"{available} available"
        )


class MalformedCompactSize(TransactionDecodeError):
    """Compact size uses a wider encoding than its value requires (strict mode)"""

    def __init__(self, discriminator: int, value: int):
        self.discriminator = discriminator
        self.value = value
        super().__init__(
            f"Non-minimal compact size: discriminator 0x{discriminator:02x} "
            f"encodes {value}"
        )


class TrailingBytesError(TransactionDecodeError):
    """Bytes remain after the locktime field"""

    def __init__(self, count: int, offset: int):
        self.count = count
        self.offset = offset
        super().__init__(f"{count} trailing bytes after transaction end (offset {offset})")
