"""Raw wallet transaction records.

A :class:`TransactionInfo` carries the chain-specific payload in
``tx_data``, a tagged union discriminated by the ``chain`` field:

    evm_legacy   -> EvmLegacyTxData
    evm_eip1559  -> Eip1559TxData
    solana       -> SolanaTxData
    filecoin     -> FilecoinTxData

Records are immutable and owned by whoever fetched them; parsing never
modifies them.
"""

from datetime import timedelta
from enum import Enum
from typing import Annotated, Any, Literal, Union

import structlog
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from txlens.core.exceptions import TransactionDecodeError
from txlens.data.models.base import TxLensModel

log = structlog.get_logger(__name__)


class TransactionType(str, Enum):
    """Declared high-level transaction type."""

    ETH_SEND = "ETHSend"
    ERC20_TRANSFER = "ERC20Transfer"
    ERC20_APPROVE = "ERC20Approve"
    ERC721_TRANSFER_FROM = "ERC721TransferFrom"
    ERC721_SAFE_TRANSFER_FROM = "ERC721SafeTransferFrom"
    ERC1155_SAFE_TRANSFER_FROM = "ERC1155SafeTransferFrom"
    OTHER = "Other"
    SOLANA_SYSTEM_TRANSFER = "SolanaSystemTransfer"
    SOLANA_SPL_TOKEN_TRANSFER = "SolanaSPLTokenTransfer"
    SOLANA_SPL_TOKEN_TRANSFER_WITH_ASSOCIATED_TOKEN_ACCOUNT_CREATION = (
        "SolanaSPLTokenTransferWithAssociatedTokenAccountCreation"
    )
    SOLANA_DAPP_SIGN_TRANSACTION = "SolanaDappSignTransaction"
    SOLANA_DAPP_SIGN_AND_SEND_TRANSACTION = "SolanaDappSignAndSendTransaction"
    SOLANA_SWAP = "SolanaSwap"
    ETH_SWAP = "ETHSwap"
    FIL_SEND = "FilSend"


class TransactionStatus(str, Enum):
    """Lifecycle status of a wallet transaction."""

    UNAPPROVED = "Unapproved"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    SUBMITTED = "Submitted"
    CONFIRMED = "Confirmed"
    ERROR = "Error"
    DROPPED = "Dropped"


# ---------------------------------------------------------------------------
# Solana instructions
# ---------------------------------------------------------------------------


class SolanaAccountMeta(TxLensModel):
    pubkey: str
    is_signer: bool = False
    is_writable: bool = False


class SolanaInstructionParam(TxLensModel):
    """One named value of a decoded instruction (account or data param)."""

    name: str
    localized_name: str = ""
    value: str = ""
    type: str = ""


class DecodedSolanaInstructionData(TxLensModel):
    """Decoding done upstream by the wallet backend, when available."""

    instruction_type: int
    account_params: list[SolanaInstructionParam] = Field(default_factory=list)
    params: list[SolanaInstructionParam] = Field(default_factory=list)


class SolanaInstruction(TxLensModel):
    """A single Solana instruction as stored on the transaction.

    Attributes:
        program_id: Program the instruction is addressed to.
        account_metas: Accounts in instruction order.
        data: Raw instruction bytes.
        decoded_data: Upstream decoding, if the backend could decode it.
    """

    program_id: str
    account_metas: list[SolanaAccountMeta] = Field(default_factory=list)
    data: list[int] = Field(default_factory=list)
    decoded_data: DecodedSolanaInstructionData | None = None


# ---------------------------------------------------------------------------
# Chain payloads
# ---------------------------------------------------------------------------


class EvmLegacyTxData(TxLensModel):
    """Legacy (type 0) EVM transaction fields. Numbers are hex or decimal strings."""

    chain: Literal["evm_legacy"] = "evm_legacy"
    nonce: str = ""
    gas_price: str = ""
    gas_limit: str = ""
    to: str = ""
    value: str = ""
    data: list[int] = Field(default_factory=list)


class Eip1559TxData(TxLensModel):
    """EIP-1559 (type 2) EVM transaction fields."""

    chain: Literal["evm_eip1559"] = "evm_eip1559"
    base_data: EvmLegacyTxData = Field(default_factory=EvmLegacyTxData)
    chain_id: str = ""
    max_priority_fee_per_gas: str = ""
    max_fee_per_gas: str = ""


class SolanaTxData(TxLensModel):
    """Solana transaction fields.

    ``lamports`` is the native amount of a system transfer; ``amount`` is the
    base-unit amount of an SPL transfer.
    """

    chain: Literal["solana"] = "solana"
    recent_blockhash: str = ""
    last_valid_block_height: int = 0
    fee_payer: str = ""
    to_wallet_address: str = ""
    spl_token_mint_address: str = ""
    lamports: str = ""
    amount: str = ""
    tx_type: TransactionType | None = None
    instructions: list[SolanaInstruction] = Field(default_factory=list)


class FilecoinTxData(TxLensModel):
    """Filecoin message fields, all attoFIL strings."""

    chain: Literal["filecoin"] = "filecoin"
    nonce: str = ""
    gas_premium: str = ""
    gas_fee_cap: str = ""
    gas_limit: str = ""
    max_fee: str = ""
    to: str = ""
    from_address: str = Field(default="", alias="from")
    value: str = ""


TxData = Annotated[
    Union[EvmLegacyTxData, Eip1559TxData, SolanaTxData, FilecoinTxData],
    Field(discriminator="chain"),
]


class TransactionInfo(TxLensModel):
    """A raw wallet transaction plus its chain payload.

    Attributes:
        id: Wallet-side transaction id.
        from_address: Account that created the transaction.
        tx_hash: On-chain hash, empty until submitted.
        tx_status: Lifecycle status.
        tx_type: Declared type; drives which arguments ``tx_args`` holds.
        tx_args: Decoded ABI arguments (EVM contract calls only).
        tx_data: Chain payload (tagged union on ``chain``).
        created_time: Time since epoch when the wallet created it.
    """

    id: str = ""
    from_address: str = ""
    tx_hash: str = ""
    tx_status: TransactionStatus = TransactionStatus.UNAPPROVED
    tx_type: TransactionType = TransactionType.OTHER
    tx_args: list[str] = Field(default_factory=list)
    tx_data: TxData | None = None
    created_time: timedelta = timedelta(0)

    @property
    def evm_data(self) -> EvmLegacyTxData | None:
        """Legacy fields for either EVM variant."""
        if isinstance(self.tx_data, Eip1559TxData):
            return self.tx_data.base_data
        if isinstance(self.tx_data, EvmLegacyTxData):
            return self.tx_data
        return None

    @property
    def eip1559_data(self) -> Eip1559TxData | None:
        return self.tx_data if isinstance(self.tx_data, Eip1559TxData) else None

    @property
    def solana_data(self) -> SolanaTxData | None:
        return self.tx_data if isinstance(self.tx_data, SolanaTxData) else None

    @property
    def filecoin_data(self) -> FilecoinTxData | None:
        return self.tx_data if isinstance(self.tx_data, FilecoinTxData) else None

    def arg(self, index: int) -> str:
        """ABI argument at ``index``, or ``""`` when the call has fewer."""
        return self.tx_args[index] if index < len(self.tx_args) else ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TransactionInfo":
        """Validate a camelCase wallet payload into a record.

        Raises:
            TransactionDecodeError: If the payload does not match the schema.
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            tx_id = payload.get("id") if isinstance(payload, dict) else None
            log.warning(
                "transaction_payload_invalid",
                tx_id=tx_id,
                error_count=e.error_count(),
            )
            raise TransactionDecodeError(str(e), tx_id=tx_id) from e
