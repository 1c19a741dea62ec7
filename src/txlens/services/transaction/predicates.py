"""Chain-family and type predicates over raw transactions.

The predicates overlap (a Solana swap is both a Solana and a dapp
transaction); the classifier's fixed rule order resolves overlaps.
"""

from typing import Final

from txlens.data.models.transaction import TransactionInfo, TransactionType

SOLANA_SPL_TRANSACTION_TYPES: Final[frozenset[TransactionType]] = frozenset(
    {
        TransactionType.SOLANA_SPL_TOKEN_TRANSFER,
        TransactionType.SOLANA_SPL_TOKEN_TRANSFER_WITH_ASSOCIATED_TOKEN_ACCOUNT_CREATION,
    }
)

SOLANA_DAPP_TRANSACTION_TYPES: Final[frozenset[TransactionType]] = frozenset(
    {
        TransactionType.SOLANA_DAPP_SIGN_TRANSACTION,
        TransactionType.SOLANA_DAPP_SIGN_AND_SEND_TRANSACTION,
        TransactionType.SOLANA_SWAP,
    }
)

SOLANA_TRANSACTION_TYPES: Final[frozenset[TransactionType]] = (
    SOLANA_SPL_TRANSACTION_TYPES
    | SOLANA_DAPP_TRANSACTION_TYPES
    | {TransactionType.SOLANA_SYSTEM_TRANSFER}
)

ERC721_TRANSACTION_TYPES: Final[frozenset[TransactionType]] = frozenset(
    {
        TransactionType.ERC721_TRANSFER_FROM,
        TransactionType.ERC721_SAFE_TRANSFER_FROM,
    }
)

# Calls whose target contract is the token being moved or approved
TOKEN_CONTRACT_CALL_TYPES: Final[frozenset[TransactionType]] = ERC721_TRANSACTION_TYPES | {
    TransactionType.ERC20_TRANSFER,
    TransactionType.ERC20_APPROVE,
    TransactionType.ERC1155_SAFE_TRANSFER_FROM,
}


def _is_opaque_solana(tx: TransactionInfo) -> bool:
    return tx.tx_type == TransactionType.OTHER and tx.solana_data is not None


def is_solana_transaction(tx: TransactionInfo) -> bool:
    return tx.tx_type in SOLANA_TRANSACTION_TYPES or _is_opaque_solana(tx)


def is_solana_spl_transaction(tx: TransactionInfo) -> bool:
    return tx.tx_type in SOLANA_SPL_TRANSACTION_TYPES


def is_solana_dapp_transaction(tx: TransactionInfo) -> bool:
    """Solana instruction bundle that is not a plain system or SPL transfer."""
    return tx.tx_type in SOLANA_DAPP_TRANSACTION_TYPES or _is_opaque_solana(tx)


def is_filecoin_transaction(tx: TransactionInfo) -> bool:
    return tx.filecoin_data is not None


def is_evm_transaction(tx: TransactionInfo) -> bool:
    return tx.evm_data is not None


def is_eip1559_transaction(tx: TransactionInfo) -> bool:
    """EIP-1559 iff both max fee fields are set."""
    data = tx.eip1559_data
    return data is not None and data.max_fee_per_gas != "" and data.max_priority_fee_per_gas != ""


def is_erc721_transaction(tx: TransactionInfo) -> bool:
    return tx.tx_type in ERC721_TRANSACTION_TYPES
