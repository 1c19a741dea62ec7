"""LRU cache of transaction parsers keyed by wallet context identity.

Building a :class:`TransactionParser` merges token lists and indexes
prices; callers that re-render on every state tick reuse the parser as long
as the context objects they pass are the same objects. Keys are object
identities, not contents: replacing the price list with an equal copy
builds a new parser.
"""

import threading
from collections.abc import Sequence

import structlog
from cachetools import LRUCache

from txlens.config.settings import get_settings
from txlens.core.exceptions import ConfigurationError
from txlens.data.models.account import WalletAccount
from txlens.data.models.parsed import ParsedTransaction
from txlens.data.models.pricing import SolFeeEstimates, SpotPrice
from txlens.data.models.token import BlockchainToken, NetworkInfo
from txlens.data.models.transaction import TransactionInfo
from txlens.services.locale.strings import Locale
from txlens.services.transaction.parser import TransactionParser

logger = structlog.get_logger(__name__)


class TransactionParserCache:
    """Reuses parsers across calls with identical context objects."""

    def __init__(self, max_size: int | None = None) -> None:
        """Initialize parser cache.

        Args:
            max_size: Maximum cached parsers, defaults to
                ``Settings.parser_cache_max_size``.

        Raises:
            ConfigurationError: If ``max_size`` is not positive.
        """
        if max_size is None:
            max_size = get_settings().parser_cache_max_size
        if max_size < 1:
            raise ConfigurationError(f"Parser cache size must be positive, got {max_size}")

        self.max_size = max_size
        # Cached parsers hold references to their key objects, so the ids in
        # a live key cannot be reused by other objects.
        self._cache: LRUCache[tuple[int, ...], TransactionParser] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_parser(
        self,
        network: NetworkInfo | None,
        accounts: Sequence[WalletAccount] = (),
        visible_tokens: Sequence[BlockchainToken] = (),
        full_token_list: Sequence[BlockchainToken] = (),
        spot_prices: Sequence[SpotPrice] = (),
        sol_fee_estimates: SolFeeEstimates | None = None,
        locale: Locale | None = None,
    ) -> TransactionParser:
        """Cached parser for this context, building one on a miss."""
        key = (
            id(network),
            id(accounts),
            id(visible_tokens),
            id(full_token_list),
            id(spot_prices),
            id(sol_fee_estimates),
            id(locale),
        )
        with self._lock:
            parser = self._cache.get(key)
            if parser is not None:
                self._hits += 1
                return parser

            self._misses += 1
            parser = TransactionParser(
                network=network,
                accounts=accounts,
                visible_tokens=visible_tokens,
                full_token_list=full_token_list,
                spot_prices=spot_prices,
                sol_fee_estimates=sol_fee_estimates,
                locale=locale,
            )
            self._cache[key] = parser
            logger.debug(
                "transaction_parser_built",
                chain_id=network.chain_id if network else None,
                cache_size=len(self._cache),
            )
            return parser

    def parse(
        self,
        tx: TransactionInfo,
        network: NetworkInfo | None,
        accounts: Sequence[WalletAccount] = (),
        visible_tokens: Sequence[BlockchainToken] = (),
        full_token_list: Sequence[BlockchainToken] = (),
        spot_prices: Sequence[SpotPrice] = (),
        sol_fee_estimates: SolFeeEstimates | None = None,
        locale: Locale | None = None,
    ) -> ParsedTransaction:
        """Parse ``tx`` with the cached parser for this context."""
        parser = self.get_parser(
            network,
            accounts=accounts,
            visible_tokens=visible_tokens,
            full_token_list=full_token_list,
            spot_prices=spot_prices,
            sol_fee_estimates=sol_fee_estimates,
            locale=locale,
        )
        return parser.parse(tx)

    def clear(self) -> None:
        """Clear entire cache."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            dict with cache stats
        """
        with self._lock:
            hits, misses, size = self._hits, self._misses, len(self._cache)

        total = hits + misses
        hit_rate = hits / total if total > 0 else 0.0

        return {
            "size": size,
            "max_size": self.max_size,
            "hits": hits,
            "misses": misses,
            "hit_rate": round(hit_rate, 4),
        }
