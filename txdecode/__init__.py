"""
txdecode: raw Bitcoin transaction decoder.

Exports:
    decode_transaction: hex string -> ParsedTransaction
    TransactionProcessor: configurable decoder
    render: ParsedTransaction -> JSON text
"""

from txdecode.errors import (
    HexDecodeError,
    MalformedCompactSize,
    TrailingBytesError,
    TransactionDecodeError,
    UnexpectedEndOfInput,
)
from txdecode.presenter import TransactionDocument, render
from txdecode.tx_processor import (
    ParsedTransaction,
    TransactionInput,
    TransactionOutput,
    TransactionProcessor,
    decode_transaction,
)
from txdecode.txid import Txid

__version__ = "0.1.0"

__all__ = [
    "decode_transaction",
    "render",
    "ParsedTransaction",
    "TransactionInput",
    "TransactionOutput",
    "TransactionProcessor",
    "TransactionDocument",
    "Txid",
    "TransactionDecodeError",
    "HexDecodeError",
    "UnexpectedEndOfInput",
    "MalformedCompactSize",
    "TrailingBytesError",
]
