"""Spot price and fee estimate models."""

from pydantic import Field

from txlens.data.models.base import TxLensModel


class SpotPrice(TxLensModel):
    """Fiat unit price of one asset symbol."""

    from_asset: str
    to_asset: str = "usd"
    price: str = ""


class SolFeeEstimates(TxLensModel):
    """Pre-transaction Solana fee estimate in lamports.

    Solana fees are shown from this estimate, not from the fee the
    transaction actually paid on chain.
    """

    fee: int = Field(default=0, ge=0)
