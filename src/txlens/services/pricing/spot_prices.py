"""Spot price lookup over a caller-supplied price table."""

from collections.abc import Sequence

from txlens.core.amount import Amount
from txlens.data.models.pricing import SpotPrice


class PricingLookup:
    """Read-only view of a spot price table.

    A symbol missing from the table has the empty price ``""``; fiat
    amounts computed from it are empty, never an error.
    """

    def __init__(self, spot_prices: Sequence[SpotPrice]) -> None:
        self._prices = {p.from_asset.lower(): p.price for p in spot_prices}

    def find_asset_price(self, symbol: str) -> str:
        """Fiat unit price for ``symbol`` (case-insensitive), or ``""``."""
        return self._prices.get(symbol.lower(), "")

    def compute_fiat_amount(self, value: str, symbol: str, decimals: int) -> Amount:
        """Fiat value of a base-unit ``value`` of ``symbol``.

        Returns:
            Empty when the value or the price is missing.
        """
        price = self.find_asset_price(symbol)
        if not value or not price:
            return Amount.empty()
        return Amount(value).divide_by_decimals(decimals).times(price)
