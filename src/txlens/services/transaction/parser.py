"""Transaction interpretation.

``TransactionParser`` turns a raw :class:`TransactionInfo` into a
:class:`ParsedTransaction` for one wallet context (network, accounts, token
registry, spot prices, Solana fee estimate). It is stateless once built and
safe to share between threads.

``parse_transaction_without_prices`` produces only the structural fields,
for callers that do not have prices yet.

Example:
    parser = TransactionParser(
        network=eth_mainnet,
        accounts=accounts,
        visible_tokens=visible,
        full_token_list=registry,
        spot_prices=prices,
    )
    parsed = parser.parse(tx)
    print(parsed.intent, parsed.fiat_total.format_as_fiat())
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from txlens.config.settings import get_settings
from txlens.constants.locale import (
    CONTRACT_ADDRESS_ERROR,
    INTENT_APPROVAL,
    INTENT_DAPP_INTERACTION,
    INTENT_SEND,
    INTENT_SWAP,
    SAME_ADDRESS_ERROR,
    SWAP,
)
from txlens.constants.magics import (
    APPROVAL_NATIVE_TOTAL_PRECISION,
    DEFAULT_EVM_DECIMALS,
    DEFAULT_SPL_DECIMALS,
    MAX_UINT256,
    NFT_DECIMALS,
    SWAP_EXCHANGE_PROXY,
)
from txlens.core.amount import Amount, AmountLike
from txlens.core.exceptions import ValidationError
from txlens.data.models.account import WalletAccount
from txlens.data.models.parsed import (
    ParsedTransaction,
    ParsedTransactionFees,
    StructuralTransaction,
)
from txlens.data.models.pricing import SolFeeEstimates, SpotPrice
from txlens.data.models.token import BlockchainToken, NetworkInfo
from txlens.data.models.transaction import TransactionInfo, TransactionType
from txlens.services.locale.strings import DictLocale, Locale, substitute, to_proper_case
from txlens.services.pricing.spot_prices import PricingLookup
from txlens.services.solana.instructions import get_typed_solana_tx_instructions
from txlens.services.token.registry import (
    combine_token_lists,
    is_known_contract_address,
    make_network_asset,
)
from txlens.services.transaction.classifier import TransactionKind, classify_transaction
from txlens.services.transaction.extractors import (
    SwapLegs,
    find_transaction_token,
    get_eth_swap_transaction_buy_and_sell_tokens,
    get_lamports_moved_from_instructions,
    get_transaction_base_value,
    get_transaction_nonce,
    get_transaction_to_address,
    get_transaction_transfered_value,
)
from txlens.services.transaction.fees import TransactionFeesParser
from txlens.services.transaction.predicates import (
    is_filecoin_transaction,
    is_solana_dapp_transaction,
    is_solana_spl_transaction,
    is_solana_transaction,
)
from txlens.services.wallet.accounts import find_account, get_address_label, get_balance

log = structlog.get_logger(__name__)


def _exceeds(amount: AmountLike, balance: str) -> bool | None:
    """``amount > balance``, or None when the balance is unknown."""
    if balance == "":
        return None
    return Amount(amount).gt(balance)


def _fields(model: Any, model_type: type) -> dict[str, Any]:
    """Field values of ``model`` for the fields declared on ``model_type``."""
    return {name: getattr(model, name) for name in model_type.model_fields}


def build_structural_transaction(
    tx: TransactionInfo,
    accounts: Sequence[WalletAccount],
    tokens: Sequence[BlockchainToken],
    native_asset: BlockchainToken | None,
    swap: SwapLegs | None = None,
    token: BlockchainToken | None = None,
) -> StructuralTransaction:
    """Price-independent fields shared by both parsers."""
    if swap is None:
        swap = get_eth_swap_transaction_buy_and_sell_tokens(tx, native_asset, tokens)
    if token is None:
        token = find_transaction_token(
            tx, tokens, native_asset.chain_id if native_asset else ""
        )
    to = get_transaction_to_address(tx)
    return StructuralTransaction(
        nonce=get_transaction_nonce(tx),
        recipient=to,
        recipient_label=get_address_label(to, accounts),
        token=token,
        is_solana_transaction=is_solana_transaction(tx),
        is_solana_dapp_transaction=is_solana_dapp_transaction(tx),
        is_solana_spl_transaction=is_solana_spl_transaction(tx),
        is_filecoin_transaction=is_filecoin_transaction(tx),
        sell_token=swap.sell_token,
        sell_amount=swap.sell_amount,
        sell_amount_wei=swap.sell_amount_wei,
        buy_token=swap.buy_token,
        min_buy_amount=swap.buy_amount,
        min_buy_amount_wei=swap.buy_amount_wei,
    )


def parse_transaction_without_prices(
    tx: TransactionInfo,
    network: NetworkInfo,
    accounts: Sequence[WalletAccount],
    visible_tokens: Sequence[BlockchainToken],
    full_token_list: Sequence[BlockchainToken],
) -> StructuralTransaction:
    """Structural subset of :meth:`TransactionParser.parse`.

    Needs no spot prices or fee estimate; the fields match those of the full
    parse for the same inputs.
    """
    return build_structural_transaction(
        tx,
        accounts=accounts,
        tokens=combine_token_lists(visible_tokens, full_token_list),
        native_asset=make_network_asset(network),
    )


@dataclass(frozen=True)
class _Context:
    """Per-transaction values shared by several branches."""

    tx: TransactionInfo
    fees: ParsedTransactionFees
    gas_fee_fiat: Amount
    base_value: str
    to: str
    account: WalletAccount | None
    token: BlockchainToken | None
    native_balance: str
    token_balance: str
    swap: SwapLegs
    structural: StructuralTransaction


class TransactionParser:
    """Interprets transactions for one wallet context.

    Attributes:
        network: Network the transactions run on; None degrades fiat and
            native fields to empty values.
        accounts: User accounts, used for labels and balances.
        tokens: Visible tokens followed by the full token list.
    """

    def __init__(
        self,
        network: NetworkInfo | None,
        accounts: Sequence[WalletAccount] = (),
        visible_tokens: Sequence[BlockchainToken] = (),
        full_token_list: Sequence[BlockchainToken] = (),
        spot_prices: Sequence[SpotPrice] = (),
        sol_fee_estimates: SolFeeEstimates | None = None,
        locale: Locale | None = None,
        display_precision: int | None = None,
    ) -> None:
        if display_precision is None:
            display_precision = get_settings().display_precision
        if display_precision < 0:
            raise ValidationError(f"display_precision must be >= 0, got {display_precision}")

        self.network = network
        self.accounts = accounts
        self.visible_tokens = visible_tokens
        self.full_token_list = full_token_list
        self.spot_prices = spot_prices
        self.sol_fee_estimates = sol_fee_estimates
        self.locale = locale or DictLocale()
        self.display_precision = display_precision

        self.tokens = combine_token_lists(visible_tokens, full_token_list)
        self.native_asset = make_network_asset(network) if network else None
        self.pricing = PricingLookup(spot_prices)
        self.network_spot_price = self.pricing.find_asset_price(network.symbol) if network else ""
        self.fees_parser = TransactionFeesParser(
            network=network,
            network_spot_price=self.network_spot_price,
            sol_fee_estimates=sol_fee_estimates,
            locale=self.locale,
        )

    # ------------------------------------------------------------------
    # Validation findings
    # ------------------------------------------------------------------

    def check_for_contract_address_error(self, to: str) -> str | None:
        """Localized error when ``to`` is a known token contract."""
        if to and is_known_contract_address(to, self.tokens):
            return self.locale.get(CONTRACT_ADDRESS_ERROR)
        return None

    def check_for_same_address_error(self, to: str, from_address: str) -> str | None:
        """Localized error when sender and recipient are the same address."""
        if to.lower() == from_address.lower():
            return self.locale.get(SAME_ADDRESS_ERROR)
        return None

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def parse(self, tx: TransactionInfo) -> ParsedTransaction:
        """Interpret ``tx``. Never raises on missing or malformed fields."""
        ctx = self._build_context(tx)
        kind = classify_transaction(tx)

        match kind:
            case TransactionKind.SOLANA_DAPP:
                parsed = self._parse_solana_dapp(ctx)
            case TransactionKind.ERC20_TRANSFER:
                parsed = self._parse_erc20_transfer(ctx)
            case TransactionKind.ERC721_TRANSFER:
                parsed = self._parse_erc721_transfer(ctx)
            case TransactionKind.ERC20_APPROVE:
                parsed = self._parse_erc20_approve(ctx)
            case TransactionKind.SOLANA_SPL_TRANSFER:
                parsed = self._parse_solana_spl_transfer(ctx)
            case TransactionKind.ETH_SWAP:
                parsed = self._parse_eth_swap(ctx)
            case TransactionKind.VALUE_TRANSFER:
                parsed = self._parse_value_transfer(ctx)

        log.debug(
            "transaction_parsed",
            tx_id=tx.id,
            kind=kind.value,
            symbol=parsed.symbol,
            value=parsed.value_exact,
        )
        return parsed

    # ------------------------------------------------------------------
    # Shared pieces
    # ------------------------------------------------------------------

    def _build_context(self, tx: TransactionInfo) -> _Context:
        fees = self.fees_parser.parse(tx)
        account = find_account(tx.from_address, self.accounts)
        token = find_transaction_token(tx, self.tokens, self._chain_id)
        swap = get_eth_swap_transaction_buy_and_sell_tokens(tx, self.native_asset, self.tokens)
        return _Context(
            tx=tx,
            fees=fees,
            gas_fee_fiat=self.fees_parser.compute_gas_fee_fiat(fees.gas_fee),
            base_value=get_transaction_base_value(tx),
            to=get_transaction_to_address(tx),
            account=account,
            token=token,
            native_balance=get_balance(account, self.native_asset),
            token_balance=get_balance(account, token),
            swap=swap,
            structural=build_structural_transaction(
                tx, self.accounts, self.tokens, self.native_asset, swap=swap, token=token
            ),
        )

    @property
    def _native_symbol(self) -> str:
        return self.network.symbol if self.network else ""

    @property
    def _chain_id(self) -> str:
        return self.network.chain_id if self.network else ""

    @property
    def _native_decimals(self) -> int:
        return self.network.decimals if self.network else DEFAULT_EVM_DECIMALS

    def _native_total(self, fiat: Amount) -> str:
        """Fiat amount expressed in the native asset."""
        return fiat.div(self.network_spot_price).format_as_asset(
            self.display_precision, self._native_symbol or None
        )

    def _build(self, ctx: _Context, **fields: Any) -> ParsedTransaction:
        """Assemble the output: structural, common, branch and fee fields."""
        tx = ctx.tx
        return ParsedTransaction(
            **_fields(ctx.structural, StructuralTransaction),
            hash=tx.tx_hash,
            created_time=tx.created_time,
            status=tx.tx_status,
            sender=tx.from_address,
            sender_label=get_address_label(tx.from_address, self.accounts),
            **fields,
            **_fields(ctx.fees, ParsedTransactionFees),
        )

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def _parse_solana_dapp(self, ctx: _Context) -> ParsedTransaction:
        tx = ctx.tx
        solana = tx.solana_data
        instructions = get_typed_solana_tx_instructions(solana) if solana else []
        moved = get_lamports_moved_from_instructions(instructions, tx.from_address)

        # Lamports: declared value plus whatever the instructions send out
        transferred = Amount(ctx.base_value or "0").plus(moved)
        if self.network:
            fiat_value = self.pricing.compute_fiat_amount(
                transferred.format(), self.network.symbol, self.network.decimals
            )
            normalized = transferred.divide_by_decimals(self.network.decimals)
            value = normalized.format(self.display_precision)
            value_exact = normalized.format()
        else:
            fiat_value = Amount.empty()
            value = value_exact = ""

        is_swap = tx.tx_type == TransactionType.SOLANA_SWAP
        return self._build(
            ctx,
            fiat_value=fiat_value,
            fiat_total=ctx.gas_fee_fiat.plus(fiat_value),
            formatted_native_currency_total=self._native_total(fiat_value),
            value=value,
            value_exact=value_exact,
            symbol=self._native_symbol,
            decimals=self._native_decimals,
            insufficient_funds_error=_exceeds(
                transferred.plus(ctx.fees.gas_fee), ctx.native_balance
            ),
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            is_swap=is_swap,
            instructions=instructions,
            intent=self.locale.get(SWAP if is_swap else INTENT_DAPP_INTERACTION),
        )

    def _parse_erc20_transfer(self, ctx: _Context) -> ParsedTransaction:
        # transfer(address recipient, uint256 amount)
        tx, token = ctx.tx, ctx.token
        address, amount = tx.arg(0), tx.arg(1)
        normalized = get_transaction_transfered_value(tx, self.network, token).normalized
        decimals = token.decimals if token else DEFAULT_EVM_DECIMALS
        symbol = token.symbol if token else ""

        price = self.pricing.find_asset_price(symbol)
        fiat_value = Amount(amount).divide_by_decimals(decimals).times(price)

        return self._build(
            ctx,
            fiat_value=fiat_value,
            fiat_total=ctx.gas_fee_fiat.plus(fiat_value),
            formatted_native_currency_total=self._native_total(fiat_value),
            value=normalized.format(self.display_precision),
            value_exact=normalized.format(),
            symbol=symbol,
            decimals=decimals,
            insufficient_funds_error=_exceeds(amount, ctx.token_balance),
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            contract_address_error=self.check_for_contract_address_error(address),
            same_address_error=self.check_for_same_address_error(address, tx.from_address),
            intent=substitute(
                self.locale.get(INTENT_SEND),
                normalized.format_as_asset(self.display_precision, symbol or None),
            ),
        )

    def _parse_erc721_transfer(self, ctx: _Context) -> ParsedTransaction:
        # transferFrom / safeTransferFrom(address owner, address to, uint256 tokenId).
        # The owner is not necessarily the caller; sender stays the caller.
        tx, token = ctx.tx, ctx.token
        owner, to_address, token_id = tx.arg(0), tx.arg(1), tx.arg(2)
        normalized = get_transaction_transfered_value(tx, self.network, token).normalized
        symbol = token.symbol if token else ""
        erc721_token_id = f"#{Amount.normalize(token_id)}" if token_id else None

        return self._build(
            ctx,
            fiat_value=Amount.zero(),
            fiat_total=ctx.gas_fee_fiat,
            formatted_native_currency_total=self._native_total(ctx.gas_fee_fiat),
            value=normalized.format(self.display_precision),
            value_exact=normalized.format(),
            symbol=symbol,
            decimals=NFT_DECIMALS,
            insufficient_funds_error=False,
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            erc721_blockchain_token=token,
            erc721_token_id=erc721_token_id,
            contract_address_error=self.check_for_contract_address_error(to_address),
            same_address_error=self.check_for_same_address_error(to_address, owner),
            intent=substitute(
                self.locale.get(INTENT_SEND), f"{symbol} {erc721_token_id or ''}".strip()
            ),
        )

    def _parse_erc20_approve(self, ctx: _Context) -> ParsedTransaction:
        # approve(address spender, uint256 amount)
        tx, token = ctx.tx, ctx.token
        spender = tx.arg(0)
        transferred = get_transaction_transfered_value(tx, self.network, token)
        symbol = token.symbol if token else ""

        return self._build(
            ctx,
            fiat_value=Amount.zero(),
            fiat_total=ctx.gas_fee_fiat,
            formatted_native_currency_total=Amount.zero().format_as_asset(
                APPROVAL_NATIVE_TOTAL_PRECISION, self._native_symbol or None
            ),
            value=transferred.normalized.format(self.display_precision),
            value_exact=transferred.normalized.format(),
            symbol=symbol,
            decimals=token.decimals if token else DEFAULT_EVM_DECIMALS,
            approval_target=spender,
            approval_target_label=get_address_label(spender, self.accounts),
            is_approval_unlimited=transferred.wei.eq(MAX_UINT256),
            insufficient_funds_error=False,
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            same_address_error=self.check_for_same_address_error(spender, tx.from_address),
            intent=f"{to_proper_case(self.locale.get(INTENT_APPROVAL))} {symbol}".strip(),
        )

    def _parse_solana_spl_transfer(self, ctx: _Context) -> ParsedTransaction:
        tx, token = ctx.tx, ctx.token
        decimals = token.decimals if token else DEFAULT_SPL_DECIMALS
        symbol = token.symbol if token else ""
        destination = tx.solana_data.to_wallet_address if tx.solana_data else ""

        normalized = Amount(ctx.base_value).divide_by_decimals(decimals)
        fiat_value = normalized.times(self.pricing.find_asset_price(symbol))

        return self._build(
            ctx,
            fiat_value=fiat_value,
            fiat_total=ctx.gas_fee_fiat.plus(fiat_value),
            formatted_native_currency_total=self._native_total(fiat_value),
            value=normalized.format(self.display_precision),
            value_exact=normalized.format(),
            symbol=symbol,
            decimals=decimals,
            insufficient_funds_error=_exceeds(ctx.base_value, ctx.token_balance),
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            contract_address_error=self.check_for_contract_address_error(destination),
            same_address_error=self.check_for_same_address_error(destination, tx.from_address),
            intent=substitute(
                self.locale.get(INTENT_SEND),
                normalized.format_as_asset(self.display_precision, symbol or None),
            ),
        )

    def _parse_eth_swap(self, ctx: _Context) -> ParsedTransaction:
        # swap(bytes fillPath, uint256 sellAmount, uint256 minBuyAmount)
        swap = ctx.swap
        sell_token, buy_token = swap.sell_token, swap.buy_token
        sell_amount_wei = swap.sell_amount_wei or Amount(ctx.tx.arg(1))
        sell_amount = swap.sell_amount or Amount.empty()
        buy_amount = swap.buy_amount or Amount.empty()

        if sell_token is not None:
            fiat_value = self.pricing.compute_fiat_amount(
                sell_amount_wei.format(), sell_token.symbol, sell_token.decimals
            )
        else:
            fiat_value = Amount.empty()

        sell_symbol = sell_token.symbol if sell_token else ""
        buy_symbol = buy_token.symbol if buy_token else ""

        return self._build(
            ctx,
            fiat_value=fiat_value,
            fiat_total=ctx.gas_fee_fiat.plus(fiat_value),
            formatted_native_currency_total=self._native_total(fiat_value),
            value=sell_amount.format(self.display_precision),
            value_exact=sell_amount.format(),
            symbol=sell_symbol,
            decimals=sell_token.decimals if sell_token else DEFAULT_EVM_DECIMALS,
            insufficient_funds_error=_exceeds(
                sell_amount_wei, get_balance(ctx.account, sell_token)
            ),
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            is_swap=True,
            intent=substitute(
                self.locale.get(INTENT_SWAP),
                sell_amount.format_as_asset(self.display_precision, sell_symbol or None),
                buy_amount.format_as_asset(self.display_precision, buy_symbol or None),
            ),
        )

    def _parse_value_transfer(self, ctx: _Context) -> ParsedTransaction:
        tx = ctx.tx
        normalized = get_transaction_transfered_value(tx, self.network).normalized
        if self.network:
            fiat_value = self.pricing.compute_fiat_amount(
                ctx.base_value, self.network.symbol, self.network.decimals
            )
        else:
            fiat_value = Amount.empty()

        return self._build(
            ctx,
            fiat_value=fiat_value,
            fiat_total=ctx.gas_fee_fiat.plus(fiat_value),
            formatted_native_currency_total=self._native_total(fiat_value),
            value=normalized.format(self.display_precision),
            value_exact=normalized.format(),
            symbol=self._native_symbol,
            decimals=self._native_decimals,
            insufficient_funds_error=_exceeds(
                Amount(ctx.base_value).plus(ctx.fees.gas_fee), ctx.native_balance
            ),
            insufficient_funds_for_gas_error=_exceeds(ctx.fees.gas_fee, ctx.native_balance),
            # Calls to the 0x proxy are swaps even when declared as Other
            is_swap=ctx.to.lower() == SWAP_EXCHANGE_PROXY,
            intent=substitute(
                self.locale.get(INTENT_SEND),
                normalized.format_as_asset(self.display_precision, self._native_symbol or None),
            ),
        )
