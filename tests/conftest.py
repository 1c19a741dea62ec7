"""Shared pytest fixtures for txlens tests.

This module provides fixtures for:
- Environment isolation for settings
- Networks (Ethereum, Solana, Filecoin) and their native assets
- Token registry, accounts and spot prices
- Test data factories

Usage:
    def test_something(eth_network, transaction_factory):
        tx = transaction_factory()
        assert TransactionParser(network=eth_network).parse(tx).symbol == "ETH"
"""

import os
from collections.abc import Generator

import pytest

from tests.factories.token import (
    BlockchainTokenFactory,
    NetworkInfoFactory,
    WalletAccountFactory,
    generate_solana_address,
)
from tests.factories.transaction import TransactionInfoFactory
from txlens.config.settings import get_settings
from txlens.data.models.account import WalletAccount
from txlens.data.models.pricing import SolFeeEstimates, SpotPrice
from txlens.data.models.token import BlockchainToken, NetworkInfo

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Isolate tests from TXLENS_* variables and any local .env file."""
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()
    for key in [k for k in os.environ if k.startswith("TXLENS_")]:
        del os.environ[key]
    get_settings.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def transaction_factory() -> type[TransactionInfoFactory]:
    """Provide transaction factory for creating raw records."""
    return TransactionInfoFactory


@pytest.fixture
def token_factory() -> type[BlockchainTokenFactory]:
    """Provide token factory."""
    return BlockchainTokenFactory


# =============================================================================
# Networks
# =============================================================================


@pytest.fixture
def eth_network() -> NetworkInfo:
    return NetworkInfoFactory()


@pytest.fixture
def sol_network() -> NetworkInfo:
    return NetworkInfoFactory(solana=True)


@pytest.fixture
def fil_network() -> NetworkInfo:
    return NetworkInfoFactory(filecoin=True)


# =============================================================================
# Registry, accounts and prices
# =============================================================================


@pytest.fixture
def usdc() -> BlockchainToken:
    """6-decimal ERC20."""
    return BlockchainTokenFactory(
        contract_address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        name="USD Coin",
        symbol="USDC",
        decimals=6,
    )


@pytest.fixture
def dai() -> BlockchainToken:
    return BlockchainTokenFactory(
        contract_address="0x6b175474e89094c44da98b954eedeac495271d0f",
        name="Dai Stablecoin",
        symbol="DAI",
        decimals=18,
    )


@pytest.fixture
def bayc() -> BlockchainToken:
    return BlockchainTokenFactory(
        contract_address="0xbc4ca0eda7647a8ab7c2061c2e118a18a936f13d",
        name="Bored Ape Yacht Club",
        symbol="BAYC",
        erc721=True,
    )


@pytest.fixture
def spl_token() -> BlockchainToken:
    """6-decimal SPL token (USDC on Solana)."""
    return BlockchainTokenFactory(
        contract_address="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        name="USD Coin",
        symbol="USDC",
        spl=True,
        decimals=6,
    )


@pytest.fixture
def full_token_list(usdc, dai, bayc, spl_token) -> list[BlockchainToken]:
    return [usdc, dai, bayc, spl_token]


@pytest.fixture
def spot_prices() -> list[SpotPrice]:
    return [
        SpotPrice(from_asset="ETH", price="2000"),
        SpotPrice(from_asset="USDC", price="2.00"),
        SpotPrice(from_asset="DAI", price="1"),
        SpotPrice(from_asset="SOL", price="100"),
        SpotPrice(from_asset="FIL", price="5"),
    ]


@pytest.fixture
def sol_fee_estimates() -> SolFeeEstimates:
    return SolFeeEstimates(fee=5000)


@pytest.fixture
def eth_account() -> WalletAccount:
    """Account holding 1 ETH and 10 USDC on mainnet."""
    return WalletAccountFactory(
        address="0x7d66c9ddaed3115d93bb8deb6e1f2dfcfa7a4f5e",
        name="Account 1",
        native_balances={"0x1": "1000000000000000000"},
        token_balances={"0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48": "10000000"},
    )


@pytest.fixture
def sol_account(spl_token) -> WalletAccount:
    """Account holding 1 SOL and 5 SPL USDC."""
    return WalletAccountFactory(
        address=generate_solana_address(),
        name="Solana Account",
        coin="sol",
        native_balances={"0x65": "1000000000"},
        token_balances={spl_token.contract_address.lower(): "5000000"},
    )
