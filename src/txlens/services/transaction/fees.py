"""Fee figures for EVM, Filecoin and Solana transactions."""

import structlog

from txlens.constants.locale import MISSING_GAS_LIMIT_ERROR
from txlens.core.amount import Amount
from txlens.data.models.parsed import ParsedTransactionFees
from txlens.data.models.pricing import SolFeeEstimates
from txlens.data.models.token import NetworkInfo
from txlens.data.models.transaction import TransactionInfo
from txlens.services.locale.strings import DictLocale, Locale
from txlens.services.transaction.predicates import is_solana_transaction

log = structlog.get_logger(__name__)


class TransactionFeesParser:
    """Compute :class:`ParsedTransactionFees` for a transaction.

    Fee rules:
        EVM EIP-1559: max_fee_per_gas * gas_limit (when both max fee fields are set)
        EVM legacy:   gas_price * gas_limit
        Filecoin:     gas_fee_cap * gas_limit, with gas_premium and gas_fee_cap surfaced
        Solana:       the supplied fee estimate, not the fee actually paid

    Attributes:
        network: Network whose native asset pays the fee.
        network_spot_price: Fiat price of the native asset, ``""`` if unknown.
        sol_fee_estimates: Pre-transaction Solana fee estimate.

    Example:
        parser = TransactionFeesParser(network=eth, network_spot_price="2000")
        fees = parser.parse(tx)
        print(fees.gas_fee, fees.gas_fee_fiat)
    """

    def __init__(
        self,
        network: NetworkInfo | None = None,
        network_spot_price: str = "",
        sol_fee_estimates: SolFeeEstimates | None = None,
        locale: Locale | None = None,
    ) -> None:
        self.network = network
        self.network_spot_price = network_spot_price
        self.sol_fee_estimates = sol_fee_estimates
        self._locale = locale or DictLocale()

    def check_for_missing_gas_limit_error(self, gas_limit: str) -> str | None:
        """Localized error when the gas limit is empty or zero."""
        if Amount.normalize(gas_limit) in ("", "0"):
            return self._locale.get(MISSING_GAS_LIMIT_ERROR)
        return None

    def compute_gas_fee_fiat(self, gas_fee: str) -> Amount:
        """Fiat value of a base-unit fee; empty without network or price."""
        if self.network is None or not self.network_spot_price:
            return Amount.empty()
        return (
            Amount(gas_fee)
            .divide_by_decimals(self.network.decimals)
            .times(self.network_spot_price)
        )

    def parse(self, tx: TransactionInfo) -> ParsedTransactionFees:
        evm = tx.evm_data
        eip1559 = tx.eip1559_data
        filecoin = tx.filecoin_data
        is_solana = is_solana_transaction(tx)

        if filecoin is not None:
            gas_limit = filecoin.gas_limit
        else:
            gas_limit = evm.gas_limit if evm else ""
        gas_price = evm.gas_price if evm else ""
        max_fee_per_gas = eip1559.max_fee_per_gas if eip1559 else ""
        max_priority_fee_per_gas = eip1559.max_priority_fee_per_gas if eip1559 else ""
        is_eip1559 = max_fee_per_gas != "" and max_priority_fee_per_gas != ""

        # TODO: show the fee the Solana transaction actually paid once the
        # record carries it; the estimate can differ from the final fee.
        if is_solana:
            estimate = self.sol_fee_estimates.fee if self.sol_fee_estimates else None
            gas_fee = Amount(estimate).format()
        elif filecoin is not None:
            gas_fee = Amount(filecoin.gas_fee_cap).times(gas_limit).format()
        elif is_eip1559:
            gas_fee = Amount(max_fee_per_gas).times(gas_limit).format()
        else:
            gas_fee = Amount(gas_price).times(gas_limit).format()

        fees = ParsedTransactionFees(
            gas_limit=Amount.normalize(gas_limit),
            gas_price=Amount.normalize(gas_price),
            max_fee_per_gas=Amount.normalize(max_fee_per_gas),
            max_priority_fee_per_gas=Amount.normalize(max_priority_fee_per_gas),
            gas_fee=gas_fee,
            gas_fee_fiat=self.compute_gas_fee_fiat(gas_fee).format_as_fiat(),
            is_eip1559_transaction=is_eip1559,
            missing_gas_limit_error=None
            if is_solana
            else self.check_for_missing_gas_limit_error(gas_limit),
            gas_premium=Amount(filecoin.gas_premium).format() if filecoin else "",
            gas_fee_cap=Amount(filecoin.gas_fee_cap).format() if filecoin else "",
            is_gas_fee_estimate=is_solana,
        )

        log.debug(
            "transaction_fees_parsed",
            tx_id=tx.id,
            gas_fee=fees.gas_fee,
            is_eip1559=is_eip1559,
            is_estimate=is_solana,
        )
        return fees
