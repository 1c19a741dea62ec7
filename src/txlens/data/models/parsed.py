"""Normalized transaction output.

``ParsedTransaction`` is what the presentation layer renders. Field names
serialize to the camelCase names existing consumers expect
(``model_dump(by_alias=True)``); Amount fields serialize to decimal text.

``StructuralTransaction`` is the price-independent subset produced before
spot prices are available. ``ParsedTransaction`` extends it, so a caller
can swap one for the other without a shape change.
"""

from datetime import timedelta
from enum import Enum

from pydantic import Field

from txlens.core.amount import Amount
from txlens.data.models.base import TxLensModel
from txlens.data.models.token import BlockchainToken
from txlens.data.models.transaction import SolanaAccountMeta, TransactionStatus


class SolanaInstructionType(str, Enum):
    """Program family of a typed Solana instruction."""

    SYSTEM = "System"
    TOKEN = "Token"
    ASSOCIATED_TOKEN = "AssociatedToken"
    UNKNOWN = "Unknown"


class TypedSolanaInstruction(TxLensModel):
    """Solana instruction with its method and named params resolved.

    Attributes:
        type: Program family.
        method_name: e.g. ``Transfer``; ``Unknown`` when not decodable.
        account_params: param name -> account address.
        params: param name -> value text (amounts in base units).
    """

    program_id: str
    type: SolanaInstructionType = SolanaInstructionType.UNKNOWN
    method_name: str = "Unknown"
    account_params: dict[str, str] = Field(default_factory=dict)
    params: dict[str, str] = Field(default_factory=dict)
    account_metas: list[SolanaAccountMeta] = Field(default_factory=list)
    data: list[int] = Field(default_factory=list)


class ParsedTransactionFees(TxLensModel):
    """Fee figures for any chain.

    Attributes:
        gas_fee: Fee in base units as decimal text.
        gas_fee_fiat: Fee value in fiat, ``""`` when network or price is unknown.
        missing_gas_limit_error: Localized error, only for non-Solana transactions.
        gas_premium: Filecoin only, ``""`` elsewhere.
        gas_fee_cap: Filecoin only, ``""`` elsewhere.
        is_gas_fee_estimate: True when ``gas_fee`` is a pre-transaction
            estimate (Solana) rather than derived from the transaction.
    """

    gas_limit: str = ""
    gas_price: str = ""
    max_priority_fee_per_gas: str = ""
    max_fee_per_gas: str = ""
    gas_fee: str = ""
    gas_fee_fiat: str = ""
    is_eip1559_transaction: bool = Field(default=False, alias="isEIP1559Transaction")
    missing_gas_limit_error: str | None = None
    gas_premium: str = ""
    gas_fee_cap: str = ""
    is_gas_fee_estimate: bool = False


class StructuralTransaction(TxLensModel):
    """Fields that can be computed without spot prices."""

    nonce: str = ""
    recipient: str = ""
    recipient_label: str = ""
    token: BlockchainToken | None = None

    is_solana_transaction: bool = False
    is_solana_dapp_transaction: bool = False
    is_solana_spl_transaction: bool = Field(default=False, alias="isSolanaSPLTransaction")
    is_filecoin_transaction: bool = False

    sell_token: BlockchainToken | None = None
    sell_amount: Amount | None = None
    sell_amount_wei: Amount | None = None
    buy_token: BlockchainToken | None = None
    min_buy_amount: Amount | None = None
    min_buy_amount_wei: Amount | None = None


class ParsedTransaction(ParsedTransactionFees, StructuralTransaction):
    """Human-facing interpretation of one transaction.

    Insufficiency flags are tri-state: ``None`` means the balance was not
    known, so the condition could not be decided.
    """

    hash: str = ""
    created_time: timedelta = timedelta(0)
    status: TransactionStatus = TransactionStatus.UNAPPROVED

    sender: str = ""
    sender_label: str = ""

    fiat_value: Amount = Field(default_factory=Amount.empty)
    fiat_total: Amount = Field(default_factory=Amount.empty)
    formatted_native_currency_total: str = ""
    value: str = ""
    value_exact: str = ""
    symbol: str = ""
    decimals: int = Field(default=18, ge=0)

    insufficient_funds_for_gas_error: bool | None = None
    insufficient_funds_error: bool | None = None
    contract_address_error: str | None = None
    same_address_error: str | None = None

    erc721_blockchain_token: BlockchainToken | None = None
    erc721_token_id: str | None = None
    is_swap: bool | None = None
    intent: str = ""

    approval_target: str | None = None
    approval_target_label: str | None = None
    is_approval_unlimited: bool | None = None

    instructions: list[TypedSolanaInstruction] | None = None
