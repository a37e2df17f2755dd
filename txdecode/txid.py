"""
Transaction identifiers.

A txid is SHA256(SHA256(raw_tx)). Internally the digest is kept in hash
order; block explorers and RPCs show it byte-reversed.
"""

import hashlib
from dataclasses import dataclass

from txdecode.base import Decodable
from txdecode.reader import ByteCursor, hex_to_bytes

TXID_SIZE = 32


def double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


@dataclass(frozen=True)
class Txid(Decodable):
    """32-byte transaction identifier in internal (hash) byte order"""

    digest: bytes

    def __post_init__(self):
        if len(self.digest) != TXID_SIZE:
            raise ValueError(f"Txid must be {TXID_SIZE} bytes, got {len(self.digest)}")

    @classmethod
    def from_raw_transaction(cls, raw_tx: bytes) -> "Txid":
        """Hash the exact serialized bytes of a transaction"""
        return cls(double_sha256(raw_tx))

    @classmethod
    def from_hex(cls, display_hex: str) -> "Txid":
        """Parse the byte-reversed display form"""
        return cls(hex_to_bytes(display_hex)[::-1])

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, **options):
        # Previous-output references are stored on the wire in hash order
        return cls(cursor.read_exact(TXID_SIZE))

    def hex(self) -> str:
        """Display form: reversed bytes, lowercase hex"""
        return self.digest[::-1].hex()

    def __str__(self) -> str:
        return self.hex()
