"""Account lookup, address labels and balance reads."""

from collections.abc import Sequence

from txlens.data.models.account import WalletAccount
from txlens.data.models.token import BlockchainToken


def reduce_address(address: str) -> str:
    """Shorten an address for display: ``0x1234***cdef``."""
    if not address:
        return ""
    return f"{address[:6]}***{address[-4:]}"


def find_account(address: str, accounts: Sequence[WalletAccount]) -> WalletAccount | None:
    """Account whose address matches case-insensitively, if any."""
    lowered = address.lower()
    return next((a for a in accounts if a.address.lower() == lowered), None)


def get_address_label(address: str, accounts: Sequence[WalletAccount]) -> str:
    """Account name for a known address, else the reduced address."""
    account = find_account(address, accounts)
    if account is not None and account.name:
        return account.name
    return reduce_address(address)


def get_balance(account: WalletAccount | None, token: BlockchainToken | None) -> str:
    """Base-unit balance of ``token`` held by ``account``.

    The native asset (empty contract address) is read from the per-chain
    native balances, anything else from the token balances.

    Returns:
        Decimal balance text, or ``""`` when the balance is unknown.
    """
    if account is None or token is None:
        return ""
    if token.is_native:
        return account.native_balances.get(token.chain_id, "")
    return account.token_balances.get(token.contract_address.lower(), "")
