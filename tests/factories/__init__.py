"""Test data factories using factory_boy.

These factories generate realistic test data for txlens models.
"""

from tests.factories.token import (
    BlockchainTokenFactory,
    NetworkInfoFactory,
    WalletAccountFactory,
    generate_evm_address,
    generate_solana_address,
)
from tests.factories.transaction import (
    Eip1559TxDataFactory,
    EvmLegacyTxDataFactory,
    FilecoinTxDataFactory,
    SolanaTxDataFactory,
    TransactionInfoFactory,
)

__all__ = [
    "BlockchainTokenFactory",
    "Eip1559TxDataFactory",
    "EvmLegacyTxDataFactory",
    "FilecoinTxDataFactory",
    "NetworkInfoFactory",
    "SolanaTxDataFactory",
    "TransactionInfoFactory",
    "WalletAccountFactory",
    "generate_evm_address",
    "generate_solana_address",
]
