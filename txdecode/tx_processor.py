"""
Transaction Processor

Decodes legacy (non-witness) serialized transactions:

    version      u32
    vin_count    compact size
    vin[]        prev txid (32) | prev index u32 | script_sig | sequence u32
    vout_count   compact size
    vout[]       value u64 | script_pubkey
    locktime     u32

The txid is hashed from the exact bytes consumed, never from a re-encoding.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from txdecode.amount import Amount
from txdecode.base import Decodable
from txdecode.compact_size import CompactSize
from txdecode.config.decoder_config import DecoderConfig, get_config
from txdecode.errors import TrailingBytesError
from txdecode.reader import ByteCursor, hex_to_bytes, read_u32
from txdecode.script import Script
from txdecode.txid import Txid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionInput(Decodable):
    prev_tx: Txid
    prev_index: int
    script_sig: Script
    sequence: int

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, strict: bool = False, **options):
        prev_tx = Txid.consensus_decode(cursor)
        prev_index = read_u32(cursor)
        script_sig = Script.consensus_decode(cursor, strict=strict)
        sequence = read_u32(cursor)

        logger.debug(
            f"input: prev_tx={prev_tx.hex()} prev_index={prev_index} "
            f"script_sig_len={len(script_sig)} sequence={sequence}"
        )
        return cls(prev_tx, prev_index, script_sig, sequence)


@dataclass(frozen=True)
class TransactionOutput(Decodable):
    value: Amount
    script_pubkey: Script

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, strict: bool = False, **options):
        value = Amount.consensus_decode(cursor)
        script_pubkey = Script.consensus_decode(cursor, strict=strict)

        logger.debug(
            f"output: value={value.sats} sats script_pubkey_len={len(script_pubkey)}"
        )
        return cls(value, script_pubkey)

    def to_btc(self) -> float:
        return self.value.to_btc()


@dataclass(frozen=True)
class ParsedTransaction(Decodable):
    version: int
    inputs: Tuple[TransactionInput, ...]
    outputs: Tuple[TransactionOutput, ...]
    locktime: int
    txid: Txid
    raw_bytes: bytes

    @classmethod
    def consensus_decode(cls, cursor: ByteCursor, strict: bool = False, **options):
        start = cursor.offset

        version = read_u32(cursor)
        logger.debug(f"version: {version}")

        input_count = CompactSize.consensus_decode(cursor, strict=strict).value
        logger.debug(f"input count: {input_count}")
        inputs = tuple(
            TransactionInput.consensus_decode(cursor, strict=strict)
            for _ in range(input_count)
        )

        output_count = CompactSize.consensus_decode(cursor, strict=strict).value
        logger.debug(f"output count: {output_count}")
        outputs = tuple(
            TransactionOutput.consensus_decode(cursor, strict=strict)
            for _ in range(output_count)
        )

        locktime = read_u32(cursor)
        logger.debug(f"locktime: {locktime}")

        raw_bytes = cursor.consumed(start)
        txid = Txid.from_raw_transaction(raw_bytes)

        return cls(
            version=version,
            inputs=inputs,
            outputs=outputs,
            locktime=locktime,
            txid=txid,
            raw_bytes=raw_bytes,
        )


class TransactionProcessor:
    """
    Decode raw transactions according to a DecoderConfig.

    Stateless apart from the config; one instance can be shared freely.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or get_config()

    def parse_transaction(self, raw_bytes: bytes) -> ParsedTransaction:
        """
        Decode one transaction from its raw serialization.

        Raises:
            UnexpectedEndOfInput: Buffer ends before the locktime
            MalformedCompactSize: Non-minimal count/length (strict mode only)
            TrailingBytesError: Leftover bytes (when rejection is enabled)
        """
        cursor = ByteCursor(raw_bytes)
        tx = ParsedTransaction.consensus_decode(
            cursor, strict=self.config.strict_compact_size
        )

        if not cursor.is_exhausted:
            if self.config.reject_trailing_bytes:
                raise TrailingBytesError(cursor.remaining, cursor.offset)
            logger.warning(
                f"Ignoring {cursor.remaining} trailing bytes after locktime "
                f"(offset {cursor.offset})"
            )

        logger.info(
            f"Decoded transaction {tx.txid.hex()}: "
            f"{len(tx.inputs)} inputs, {len(tx.outputs)} outputs"
        )
        return tx

    def parse_hex(self, raw_hex: str) -> ParsedTransaction:
        """Decode a transaction given as a hex string"""
        return self.parse_transaction(hex_to_bytes(raw_hex))


def decode_transaction(
    raw_hex: str, config: Optional[DecoderConfig] = None
) -> ParsedTransaction:
    """Convenience wrapper: hex string in, ParsedTransaction out"""
    return TransactionProcessor(config).parse_hex(raw_hex)
