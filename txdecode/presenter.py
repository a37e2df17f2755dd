"""
Pydantic document models for decoded transactions.

Field declaration order is the output order.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from txdecode.tx_processor import ParsedTransaction, TransactionInput, TransactionOutput


class InputDocument(BaseModel):
    """One transaction input as displayed"""

    model_config = ConfigDict(frozen=True)

    previous_txid: str = Field(..., description="Spent transaction id (display order)")
    previous_vout: int = Field(..., ge=0, description="Index of the spent output")
    script_sig: str = Field(..., description="Unlocking script, hex")
    sequence: int = Field(..., ge=0, description="Sequence number")

    @classmethod
    def from_input(cls, tx_input: TransactionInput) -> "InputDocument":
        return cls(
            previous_txid=tx_input.prev_tx.hex(),
            previous_vout=tx_input.prev_index,
            script_sig=tx_input.script_sig.hex(),
            sequence=tx_input.sequence,
        )


class OutputDocument(BaseModel):
    """One transaction output as displayed"""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., ge=0, description="Amount in BTC")
    script_pubkey: str = Field(..., description="Locking script, hex")

    @classmethod
    def from_output(cls, tx_output: TransactionOutput) -> "OutputDocument":
        return cls(
            amount=tx_output.to_btc(),
            script_pubkey=tx_output.script_pubkey.hex(),
        )


class TransactionDocument(BaseModel):
    """Display document for a decoded transaction"""

    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(..., description="Transaction id (display order)")
    version: int = Field(..., ge=0)
    inputs: list[InputDocument]
    outputs: list[OutputDocument]
    locktime: int = Field(..., ge=0)

    @classmethod
    def from_transaction(cls, tx: ParsedTransaction) -> "TransactionDocument":
        return cls(
            transaction_id=tx.txid.hex(),
            version=tx.version,
            inputs=[InputDocument.from_input(i) for i in tx.inputs],
            outputs=[OutputDocument.from_output(o) for o in tx.outputs],
            locktime=tx.locktime,
        )


def render(tx: ParsedTransaction, indent: Optional[int] = 2) -> str:
    """
    Serialize a decoded transaction to JSON text.

    Args:
        tx: Decoded transaction
        indent: Spaces per nesting level; 0 or None gives compact output

    Returns:
        JSON document string
    """
    document = TransactionDocument.from_transaction(tx)
    return document.model_dump_json(indent=indent or None)
