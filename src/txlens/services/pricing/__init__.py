"""Spot price lookup."""

from txlens.services.pricing.spot_prices import PricingLookup

__all__ = ["PricingLookup"]
