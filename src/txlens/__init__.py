"""txlens: interpret multi-chain wallet transactions for display."""

from txlens.core.amount import Amount
from txlens.services.transaction import (
    TransactionParser,
    TransactionParserCache,
    parse_transaction_without_prices,
)

__version__ = "0.1.0"

__all__ = [
    "Amount",
    "TransactionParser",
    "TransactionParserCache",
    "parse_transaction_without_prices",
]
