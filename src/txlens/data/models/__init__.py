"""Pydantic models for raw transactions, wallet context and parsed output."""

from txlens.data.models.account import WalletAccount
from txlens.data.models.parsed import (
    ParsedTransaction,
    ParsedTransactionFees,
    SolanaInstructionType,
    StructuralTransaction,
    TypedSolanaInstruction,
)
from txlens.data.models.pricing import SolFeeEstimates, SpotPrice
from txlens.data.models.token import BlockchainToken, NetworkInfo
from txlens.data.models.transaction import (
    DecodedSolanaInstructionData,
    Eip1559TxData,
    EvmLegacyTxData,
    FilecoinTxData,
    SolanaAccountMeta,
    SolanaInstruction,
    SolanaInstructionParam,
    SolanaTxData,
    TransactionInfo,
    TransactionStatus,
    TransactionType,
)

__all__ = [
    "BlockchainToken",
    "DecodedSolanaInstructionData",
    "Eip1559TxData",
    "EvmLegacyTxData",
    "FilecoinTxData",
    "NetworkInfo",
    "ParsedTransaction",
    "ParsedTransactionFees",
    "SolFeeEstimates",
    "SolanaAccountMeta",
    "SolanaInstruction",
    "SolanaInstructionParam",
    "SolanaInstructionType",
    "SolanaTxData",
    "SpotPrice",
    "StructuralTransaction",
    "TransactionInfo",
    "TransactionStatus",
    "TransactionType",
    "TypedSolanaInstruction",
    "WalletAccount",
]
