"""Token registry helpers."""

from txlens.services.token.registry import (
    combine_token_lists,
    find_token_by_contract_address,
    is_known_contract_address,
    make_network_asset,
)

__all__ = [
    "combine_token_lists",
    "find_token_by_contract_address",
    "is_known_contract_address",
    "make_network_asset",
]
