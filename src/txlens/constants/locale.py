"""Locale keys and the default English strings for them."""

from typing import Final

MISSING_GAS_LIMIT_ERROR: Final[str] = "missing_gas_limit_error"
CONTRACT_ADDRESS_ERROR: Final[str] = "contract_address_error"
SAME_ADDRESS_ERROR: Final[str] = "same_address_error"
SWAP: Final[str] = "swap"
INTENT_SEND: Final[str] = "transaction_intent_send"
INTENT_SWAP: Final[str] = "transaction_intent_swap"
INTENT_APPROVAL: Final[str] = "approval_transaction_intent"
INTENT_DAPP_INTERACTION: Final[str] = "transaction_intent_dapp_interaction"

DEFAULT_STRINGS: Final[dict[str, str]] = {
    MISSING_GAS_LIMIT_ERROR: "Missing gas limit",
    CONTRACT_ADDRESS_ERROR: (
        "The receiving address is a token's contract address. "
        "Sending tokens to it may result in a loss of funds."
    ),
    SAME_ADDRESS_ERROR: "The receiving address is your own address",
    SWAP: "Swap",
    INTENT_SEND: "Send $1",
    INTENT_SWAP: "Swap $1 to $2",
    INTENT_APPROVAL: "approve",
    INTENT_DAPP_INTERACTION: "Dapp interaction",
}
