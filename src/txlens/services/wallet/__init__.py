"""Account lookup, labels and balances."""

from txlens.services.wallet.accounts import (
    find_account,
    get_address_label,
    get_balance,
    reduce_address,
)

__all__ = ["find_account", "get_address_label", "get_balance", "reduce_address"]
