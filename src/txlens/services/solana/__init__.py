"""Solana instruction decoding."""

from txlens.services.solana.instructions import (
    decode_instruction,
    get_typed_solana_tx_instructions,
)

__all__ = ["decode_instruction", "get_typed_solana_tx_instructions"]
