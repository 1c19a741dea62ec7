"""Token registry lookups.

The registry is the user's visible tokens followed by the full token list.
Lookups return the first match, so a visible token shadows a full-list entry
with the same address.
"""

from collections.abc import Sequence

from txlens.data.models.token import BlockchainToken, NetworkInfo


def make_network_asset(network: NetworkInfo) -> BlockchainToken:
    """Token describing the native asset of ``network``."""
    return BlockchainToken(
        contract_address="",
        name=network.symbol_name,
        symbol=network.symbol,
        decimals=network.decimals,
        chain_id=network.chain_id,
        logo=network.logo,
        coin_type=network.coin,
    )


def combine_token_lists(
    visible_tokens: Sequence[BlockchainToken],
    full_token_list: Sequence[BlockchainToken],
) -> list[BlockchainToken]:
    return [*visible_tokens, *full_token_list]


def find_token_by_contract_address(
    contract_address: str, tokens: Sequence[BlockchainToken]
) -> BlockchainToken | None:
    """First token whose contract address matches case-insensitively."""
    if not contract_address:
        return None
    lowered = contract_address.lower()
    return next((t for t in tokens if t.contract_address.lower() == lowered), None)


def is_known_contract_address(address: str, tokens: Sequence[BlockchainToken]) -> bool:
    """True when ``address`` is a token contract from the registry."""
    return find_token_by_contract_address(address, tokens) is not None
