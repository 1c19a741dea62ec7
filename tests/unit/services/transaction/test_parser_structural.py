"""Unit tests for the price-independent structural parse."""

import pytest

from tests.factories import (
    Eip1559TxDataFactory,
    EvmLegacyTxDataFactory,
    FilecoinTxDataFactory,
    SolanaTxDataFactory,
    TransactionInfoFactory,
)
from txlens.constants.magics import NATIVE_ASSET_CONTRACT_ADDRESS_0X, SWAP_EXCHANGE_PROXY
from txlens.data.models import StructuralTransaction, TransactionType
from txlens.services.transaction.parser import parse_transaction_without_prices

RECIPIENT = "0x2f318c334780961fb129d2a6c30d0763d9a5c970"


def _evm(tx_type: TransactionType, to: str, args=None, sender: str = ""):
    return TransactionInfoFactory(
        from_address=sender or RECIPIENT,
        tx_type=tx_type,
        tx_args=args or [],
        tx_data=Eip1559TxDataFactory(base_data=EvmLegacyTxDataFactory(to=to)),
    )


class TestParseWithoutPrices:
    def test_erc20_transfer(self, eth_network, eth_account, usdc, full_token_list) -> None:
        tx = _evm(
            TransactionType.ERC20_TRANSFER,
            usdc.contract_address,
            args=[eth_account.address, "1"],
        )

        structural = parse_transaction_without_prices(
            tx, eth_network, [eth_account], [], full_token_list
        )

        assert isinstance(structural, StructuralTransaction)
        assert structural.token == usdc
        assert structural.recipient == eth_account.address
        assert structural.recipient_label == "Account 1"
        assert structural.nonce == "1"
        assert structural.is_solana_transaction is False
        assert structural.sell_token is None

    def test_eth_swap_legs(self, eth_network, dai, full_token_list) -> None:
        path = NATIVE_ASSET_CONTRACT_ADDRESS_0X + dai.contract_address[2:]
        tx = _evm(
            TransactionType.ETH_SWAP,
            SWAP_EXCHANGE_PROXY,
            args=[path, "1000000000000000000", "5000000000000000000"],
        )

        structural = parse_transaction_without_prices(tx, eth_network, [], [], full_token_list)

        assert structural.sell_token.symbol == "ETH"
        assert structural.buy_token == dai
        assert structural.min_buy_amount.format() == "5"

    def test_solana_dapp_flags(self, sol_network) -> None:
        """
        Given: A Solana swap
        When: Parsed without prices
        Then: It is flagged as a Solana dapp transaction
        """
        tx = TransactionInfoFactory(
            tx_type=TransactionType.SOLANA_SWAP, tx_data=SolanaTxDataFactory()
        )

        structural = parse_transaction_without_prices(tx, sol_network, [], [], [])

        assert structural.is_solana_transaction is True
        assert structural.is_solana_dapp_transaction is True
        assert structural.is_solana_spl_transaction is False

    def test_visible_tokens_shadow_full_list(self, eth_network, usdc, full_token_list) -> None:
        custom = usdc.model_copy(update={"symbol": "MYUSDC"})
        tx = _evm(TransactionType.ERC20_TRANSFER, usdc.contract_address, args=[RECIPIENT, "1"])

        structural = parse_transaction_without_prices(
            tx, eth_network, [], [custom], full_token_list
        )

        assert structural.token.symbol == "MYUSDC"


class TestMatchesFullParse:
    """The structural subset equals the same fields of a full parse."""

    @pytest.fixture
    def transactions(self, eth_account, usdc, dai, bayc, spl_token):
        path = NATIVE_ASSET_CONTRACT_ADDRESS_0X + dai.contract_address[2:]
        return [
            _evm(TransactionType.ETH_SEND, RECIPIENT, sender=eth_account.address),
            _evm(
                TransactionType.ERC20_TRANSFER,
                usdc.contract_address,
                args=[RECIPIENT, "1000000"],
                sender=eth_account.address,
            ),
            _evm(
                TransactionType.ERC721_TRANSFER_FROM,
                bayc.contract_address,
                args=[eth_account.address, RECIPIENT, "7"],
            ),
            _evm(TransactionType.ETH_SWAP, SWAP_EXCHANGE_PROXY, args=[path, "1", "2"]),
            TransactionInfoFactory(
                tx_type=TransactionType.FIL_SEND, tx_data=FilecoinTxDataFactory()
            ),
            TransactionInfoFactory(
                tx_type=TransactionType.SOLANA_SPL_TOKEN_TRANSFER,
                tx_data=SolanaTxDataFactory(
                    amount="1", spl_token_mint_address=spl_token.contract_address
                ),
            ),
        ]

    def test_fields_agree(
        self, eth_network, eth_account, full_token_list, eth_parser, transactions
    ) -> None:
        for tx in transactions:
            parsed = eth_parser.parse(tx).model_dump()
            structural = parse_transaction_without_prices(
                tx, eth_network, [eth_account], [], full_token_list
            ).model_dump()

            assert structural == {name: parsed[name] for name in structural}
