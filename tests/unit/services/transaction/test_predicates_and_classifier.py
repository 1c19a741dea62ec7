"""Unit tests for transaction predicates and kind classification."""

import pytest

from tests.factories import (
    Eip1559TxDataFactory,
    EvmLegacyTxDataFactory,
    FilecoinTxDataFactory,
    SolanaTxDataFactory,
    TransactionInfoFactory,
)
from txlens.constants.magics import SWAP_EXCHANGE_PROXY
from txlens.data.models import TransactionType
from txlens.services.transaction.classifier import TransactionKind, classify_transaction
from txlens.services.transaction.predicates import (
    is_eip1559_transaction,
    is_erc721_transaction,
    is_evm_transaction,
    is_filecoin_transaction,
    is_solana_dapp_transaction,
    is_solana_spl_transaction,
    is_solana_transaction,
)


def _solana(tx_type: TransactionType):
    return TransactionInfoFactory(tx_type=tx_type, tx_data=SolanaTxDataFactory())


class TestChainPredicates:
    """Chain family predicates."""

    @pytest.mark.parametrize(
        "tx_type",
        [
            TransactionType.SOLANA_SYSTEM_TRANSFER,
            TransactionType.SOLANA_SPL_TOKEN_TRANSFER,
            TransactionType.SOLANA_SPL_TOKEN_TRANSFER_WITH_ASSOCIATED_TOKEN_ACCOUNT_CREATION,
            TransactionType.SOLANA_DAPP_SIGN_TRANSACTION,
            TransactionType.SOLANA_DAPP_SIGN_AND_SEND_TRANSACTION,
            TransactionType.SOLANA_SWAP,
        ],
    )
    def test_solana_types(self, tx_type: TransactionType) -> None:
        assert is_solana_transaction(_solana(tx_type))

    def test_other_with_solana_payload_is_solana_dapp(self) -> None:
        """
        Given: A transaction declared Other carrying a Solana payload
        When: Checked with the Solana predicates
        Then: It counts as a Solana dapp transaction
        """
        tx = _solana(TransactionType.OTHER)

        assert is_solana_transaction(tx)
        assert is_solana_dapp_transaction(tx)
        assert not is_solana_spl_transaction(tx)

    def test_other_with_evm_payload_is_not_solana(self) -> None:
        tx = TransactionInfoFactory(tx_type=TransactionType.OTHER)

        assert not is_solana_transaction(tx)
        assert not is_solana_dapp_transaction(tx)
        assert is_evm_transaction(tx)

    def test_system_transfer_is_not_dapp(self) -> None:
        assert not is_solana_dapp_transaction(_solana(TransactionType.SOLANA_SYSTEM_TRANSFER))

    def test_spl_with_account_creation_is_spl(self) -> None:
        tx = _solana(TransactionType.SOLANA_SPL_TOKEN_TRANSFER_WITH_ASSOCIATED_TOKEN_ACCOUNT_CREATION)

        assert is_solana_spl_transaction(tx)

    def test_filecoin(self) -> None:
        tx = TransactionInfoFactory(
            tx_type=TransactionType.FIL_SEND, tx_data=FilecoinTxDataFactory()
        )

        assert is_filecoin_transaction(tx)
        assert not is_evm_transaction(tx)
        assert not is_solana_transaction(tx)

    def test_erc721(self) -> None:
        assert is_erc721_transaction(
            TransactionInfoFactory(tx_type=TransactionType.ERC721_SAFE_TRANSFER_FROM)
        )
        assert not is_erc721_transaction(
            TransactionInfoFactory(tx_type=TransactionType.ERC1155_SAFE_TRANSFER_FROM)
        )


class TestEip1559Predicate:
    def test_both_max_fee_fields_set(self) -> None:
        assert is_eip1559_transaction(TransactionInfoFactory())

    def test_missing_priority_fee(self) -> None:
        tx = TransactionInfoFactory(tx_data=Eip1559TxDataFactory(max_priority_fee_per_gas=""))

        assert not is_eip1559_transaction(tx)

    def test_legacy(self) -> None:
        assert not is_eip1559_transaction(
            TransactionInfoFactory(tx_data=EvmLegacyTxDataFactory())
        )


class TestClassifyTransaction:
    """First matching rule wins."""

    @pytest.mark.parametrize(
        ("tx_type", "expected"),
        [
            (TransactionType.ERC20_TRANSFER, TransactionKind.ERC20_TRANSFER),
            (TransactionType.ERC721_TRANSFER_FROM, TransactionKind.ERC721_TRANSFER),
            (TransactionType.ERC721_SAFE_TRANSFER_FROM, TransactionKind.ERC721_TRANSFER),
            (TransactionType.ERC20_APPROVE, TransactionKind.ERC20_APPROVE),
            (TransactionType.ETH_SWAP, TransactionKind.ETH_SWAP),
            (TransactionType.ETH_SEND, TransactionKind.VALUE_TRANSFER),
            (TransactionType.OTHER, TransactionKind.VALUE_TRANSFER),
            (TransactionType.ERC1155_SAFE_TRANSFER_FROM, TransactionKind.VALUE_TRANSFER),
        ],
    )
    def test_evm_kinds(self, tx_type: TransactionType, expected: TransactionKind) -> None:
        assert classify_transaction(TransactionInfoFactory(tx_type=tx_type)) == expected

    @pytest.mark.parametrize(
        ("tx_type", "expected"),
        [
            (TransactionType.SOLANA_SWAP, TransactionKind.SOLANA_DAPP),
            (TransactionType.SOLANA_DAPP_SIGN_TRANSACTION, TransactionKind.SOLANA_DAPP),
            (TransactionType.SOLANA_DAPP_SIGN_AND_SEND_TRANSACTION, TransactionKind.SOLANA_DAPP),
            (TransactionType.OTHER, TransactionKind.SOLANA_DAPP),
            (TransactionType.SOLANA_SPL_TOKEN_TRANSFER, TransactionKind.SOLANA_SPL_TRANSFER),
            (
                TransactionType.SOLANA_SPL_TOKEN_TRANSFER_WITH_ASSOCIATED_TOKEN_ACCOUNT_CREATION,
                TransactionKind.SOLANA_SPL_TRANSFER,
            ),
            (TransactionType.SOLANA_SYSTEM_TRANSFER, TransactionKind.VALUE_TRANSFER),
        ],
    )
    def test_solana_kinds(self, tx_type: TransactionType, expected: TransactionKind) -> None:
        assert classify_transaction(_solana(tx_type)) == expected

    def test_erc20_transfer_to_swap_proxy_is_not_the_fallback(self) -> None:
        tx = TransactionInfoFactory(
            tx_type=TransactionType.ERC20_TRANSFER,
            tx_data=Eip1559TxDataFactory(
                base_data=EvmLegacyTxDataFactory(to=SWAP_EXCHANGE_PROXY)
            ),
        )

        assert classify_transaction(tx) == TransactionKind.ERC20_TRANSFER

    def test_filecoin_send_is_value_transfer(self) -> None:
        tx = TransactionInfoFactory(
            tx_type=TransactionType.FIL_SEND, tx_data=FilecoinTxDataFactory()
        )

        assert classify_transaction(tx) == TransactionKind.VALUE_TRANSFER

    def test_missing_payload_is_value_transfer(self) -> None:
        tx = TransactionInfoFactory(tx_type=TransactionType.OTHER, tx_data=None)

        assert classify_transaction(tx) == TransactionKind.VALUE_TRANSFER
