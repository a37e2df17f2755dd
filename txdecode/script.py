"""Length-prefixed opaque byte strings (unlocking and locking scripts)."""

from dataclasses import dataclass

from txdecode.base import Decodable
from txdecode.compact_size import read_compact_size
from txdecode.reader import ByteCursor


@dataclass(frozen=True)
class Script(Decodable):
    """
    Raw script bytes, kept exactly as they appeared on the wire.

    The bytes are the content; hex() is only the display form.
    """

    raw: bytes

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, strict: bool = False, **options):
        length = read_compact_size(cursor, strict=strict)
        return cls(cursor.read_exact(length))

    def hex(self) -> str:
        return self.raw.hex()

    def __len__(self) -> int:
        return len(self.raw)
