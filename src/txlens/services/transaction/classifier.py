"""Transaction kind classification.

Rules are tried in a fixed order and the first match wins:

    1. SOLANA_DAPP           Solana instruction bundle (incl. Solana swaps)
    2. ERC20_TRANSFER
    3. ERC721_TRANSFER       transferFrom and safeTransferFrom
    4. ERC20_APPROVE
    5. SOLANA_SPL_TRANSFER   with or without associated account creation
    6. ETH_SWAP
    7. VALUE_TRANSFER        native sends, system transfers, Other, and
                             anything else
"""

from enum import Enum

from txlens.data.models.transaction import TransactionInfo, TransactionType
from txlens.services.transaction.predicates import (
    is_erc721_transaction,
    is_solana_dapp_transaction,
    is_solana_spl_transaction,
)


class TransactionKind(str, Enum):
    """Output branch a transaction is parsed with."""

    SOLANA_DAPP = "solana_dapp"
    ERC20_TRANSFER = "erc20_transfer"
    ERC721_TRANSFER = "erc721_transfer"
    ERC20_APPROVE = "erc20_approve"
    SOLANA_SPL_TRANSFER = "solana_spl_transfer"
    ETH_SWAP = "eth_swap"
    VALUE_TRANSFER = "value_transfer"


def classify_transaction(tx: TransactionInfo) -> TransactionKind:
    """Kind of the first rule ``tx`` matches."""
    if is_solana_dapp_transaction(tx):
        return TransactionKind.SOLANA_DAPP
    if tx.tx_type == TransactionType.ERC20_TRANSFER:
        return TransactionKind.ERC20_TRANSFER
    if is_erc721_transaction(tx):
        return TransactionKind.ERC721_TRANSFER
    if tx.tx_type == TransactionType.ERC20_APPROVE:
        return TransactionKind.ERC20_APPROVE
    if is_solana_spl_transaction(tx):
        return TransactionKind.SOLANA_SPL_TRANSFER
    if tx.tx_type == TransactionType.ETH_SWAP:
        return TransactionKind.ETH_SWAP
    return TransactionKind.VALUE_TRANSFER
