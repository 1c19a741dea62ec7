"""Parsers wired to the shared wallet context fixtures."""

import pytest

from txlens.services.transaction.parser import TransactionParser


@pytest.fixture
def eth_parser(eth_network, eth_account, full_token_list, spot_prices) -> TransactionParser:
    """Mainnet parser for an account holding 1 ETH and 10 USDC."""
    return TransactionParser(
        network=eth_network,
        accounts=[eth_account],
        full_token_list=full_token_list,
        spot_prices=spot_prices,
        display_precision=6,
    )


@pytest.fixture
def sol_parser(
    sol_network, sol_account, full_token_list, spot_prices, sol_fee_estimates
) -> TransactionParser:
    """Solana parser for an account holding 1 SOL and 5 USDC."""
    return TransactionParser(
        network=sol_network,
        accounts=[sol_account],
        full_token_list=full_token_list,
        spot_prices=spot_prices,
        sol_fee_estimates=sol_fee_estimates,
        display_precision=6,
    )


@pytest.fixture
def fil_parser(fil_network, spot_prices) -> TransactionParser:
    return TransactionParser(network=fil_network, spot_prices=spot_prices, display_precision=6)
