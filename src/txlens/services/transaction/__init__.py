"""Transaction interpretation: predicates, extractors, fees and parsing."""

from txlens.services.transaction.cache import TransactionParserCache
from txlens.services.transaction.classifier import TransactionKind, classify_transaction
from txlens.services.transaction.fees import TransactionFeesParser
from txlens.services.transaction.parser import (
    TransactionParser,
    parse_transaction_without_prices,
)

__all__ = [
    "TransactionFeesParser",
    "TransactionKind",
    "TransactionParser",
    "TransactionParserCache",
    "classify_transaction",
    "parse_transaction_without_prices",
]
