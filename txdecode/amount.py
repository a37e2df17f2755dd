"""
Satoshi amounts and their BTC display value.
"""

from dataclasses import dataclass

from txdecode.base import Decodable
from txdecode.reader import ByteCursor, read_u64

SATS_PER_BTC = 100_000_000
MAX_U64 = 2**64 - 1


def to_btc(sats: int) -> float:
    """Convert satoshis to BTC. Display only; lossy for large values."""
    return sats / SATS_PER_BTC


@dataclass(frozen=True)
class Amount(Decodable):
    """Integer count of satoshis (authoritative value)"""

    sats: int

    def __post_init__(self):
        if not 0 <= self.sats <= MAX_U64:
            raise ValueError(f"Amount out of u64 range: {self.sats}")

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, **options):
        return cls(read_u64(cursor))

    def to_btc(self) -> float:
        return to_btc(self.sats)
