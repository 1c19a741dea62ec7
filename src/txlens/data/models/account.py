"""Wallet account model."""

from pydantic import Field

from txlens.data.models.base import TxLensModel


class WalletAccount(TxLensModel):
    """An account the user controls, with balances supplied by the caller.

    Balances are decimal strings in base units (wei, lamports, attoFIL).
    A missing entry means the balance is unknown, which is not the same as
    a zero balance.

    Attributes:
        address: Account address, compared case-insensitively.
        name: Display name used as the address label.
        native_balances: chain_id -> native asset balance.
        token_balances: lower-cased contract address -> token balance.
    """

    address: str
    name: str = ""
    coin: str = "eth"
    native_balances: dict[str, str] = Field(default_factory=dict)
    token_balances: dict[str, str] = Field(default_factory=dict)
