"""Typed field extraction from raw transactions.

Every extractor returns a defined value for every chain: fields that do not
apply to a chain come back as ``""``, ``None`` or an empty Amount.
"""

from collections.abc import Sequence
from typing import NamedTuple

from txlens.constants.magics import (
    DEFAULT_EVM_DECIMALS,
    DEFAULT_SPL_DECIMALS,
    FILL_PATH_ADDRESS_HEX_LENGTH,
    NATIVE_ASSET_CONTRACT_ADDRESS_0X,
)
from txlens.constants.solana import FROM_ACCOUNT, LAMPORT_MOVING_SYSTEM_METHODS, LAMPORTS_PARAM
from txlens.core.amount import Amount
from txlens.data.models.parsed import SolanaInstructionType, TypedSolanaInstruction
from txlens.data.models.token import BlockchainToken, NetworkInfo
from txlens.data.models.transaction import TransactionInfo, TransactionType
from txlens.services.token.registry import find_token_by_contract_address
from txlens.services.transaction.predicates import (
    ERC721_TRANSACTION_TYPES,
    TOKEN_CONTRACT_CALL_TYPES,
    is_solana_spl_transaction,
)


class TransferredValue(NamedTuple):
    """Moved amount in base units and in human units."""

    wei: Amount
    normalized: Amount


class SwapLegs(NamedTuple):
    """Sell and buy sides of an ETHSwap, all None for other transactions."""

    sell_token: BlockchainToken | None = None
    sell_amount: Amount | None = None
    sell_amount_wei: Amount | None = None
    buy_token: BlockchainToken | None = None
    buy_amount: Amount | None = None
    buy_amount_wei: Amount | None = None


def get_transaction_base_value(tx: TransactionInfo) -> str:
    """Transferred amount in the chain's smallest unit, before scaling.

    SPL transfers report the token amount; other Solana transactions the
    lamports. EVM reports the call value in wei, Filecoin in attoFIL.
    """
    if (solana := tx.solana_data) is not None:
        return solana.amount if is_solana_spl_transaction(tx) else solana.lamports
    if (filecoin := tx.filecoin_data) is not None:
        return filecoin.value
    if (evm := tx.evm_data) is not None:
        return evm.value
    return ""


def get_transaction_to_address(tx: TransactionInfo) -> str:
    """Recipient of the value, which for token calls is an ABI argument."""
    if (solana := tx.solana_data) is not None:
        return solana.to_wallet_address

    # transfer(address recipient, uint256 amount) / approve(address spender, uint256 amount)
    if tx.tx_type in (TransactionType.ERC20_TRANSFER, TransactionType.ERC20_APPROVE):
        return tx.arg(0)

    # transferFrom(address owner, address to, uint256 tokenId)
    if tx.tx_type in ERC721_TRANSACTION_TYPES:
        return tx.arg(1)

    if (filecoin := tx.filecoin_data) is not None:
        return filecoin.to
    if (evm := tx.evm_data) is not None:
        return evm.to
    return ""


def get_transaction_nonce(tx: TransactionInfo) -> str:
    """Decimal nonce for EVM and Filecoin, ``""`` for Solana."""
    if (evm := tx.evm_data) is not None:
        return Amount.normalize(evm.nonce)
    if (filecoin := tx.filecoin_data) is not None:
        return Amount.normalize(filecoin.nonce)
    return ""


def find_transaction_token(
    tx: TransactionInfo, tokens: Sequence[BlockchainToken], chain_id: str = ""
) -> BlockchainToken | None:
    """Registry token the transaction moves or approves.

    SPL transfers resolve by mint address, preferring the entry on
    ``chain_id`` when the same mint is listed for several clusters. EVM
    token calls resolve by the called contract. Anything else has no token
    and falls back to the native asset.
    """
    if is_solana_spl_transaction(tx):
        mint = tx.solana_data.spl_token_mint_address if tx.solana_data else ""
        matches = [t for t in tokens if mint and t.contract_address == mint]
        on_chain = [t for t in matches if chain_id and t.chain_id == chain_id]
        return next(iter(on_chain or matches), None)

    if tx.tx_type in TOKEN_CONTRACT_CALL_TYPES and (evm := tx.evm_data) is not None:
        return find_token_by_contract_address(evm.to, tokens)

    return None


def get_transaction_transfered_value(
    tx: TransactionInfo,
    network: NetworkInfo | None = None,
    token: BlockchainToken | None = None,
) -> TransferredValue:
    """Amount moved by the transaction in base and human units.

    Decimals come from ``token`` when given, else from ``network``, else the
    chain default (9 for SPL transfers, 18 otherwise).
    """
    if tx.tx_type in ERC721_TRANSACTION_TYPES:
        one = Amount(1)
        return TransferredValue(wei=one, normalized=one)

    if is_solana_spl_transaction(tx):
        wei = Amount(get_transaction_base_value(tx))
        decimals = token.decimals if token else DEFAULT_SPL_DECIMALS
        return TransferredValue(wei=wei, normalized=wei.divide_by_decimals(decimals))

    if tx.tx_type in (TransactionType.ERC20_TRANSFER, TransactionType.ERC20_APPROVE):
        wei = Amount(tx.arg(1))
    elif tx.tx_type == TransactionType.ETH_SWAP:
        wei = Amount(tx.arg(1) or get_transaction_base_value(tx))
    else:
        wei = Amount(get_transaction_base_value(tx))

    if token is not None:
        decimals = token.decimals
    elif network is not None:
        decimals = network.decimals
    else:
        decimals = DEFAULT_EVM_DECIMALS
    return TransferredValue(wei=wei, normalized=wei.divide_by_decimals(decimals))


def decode_fill_path(fill_path: str) -> list[str]:
    """Split a 0x fill path into its 20-byte addresses, in route order.

    A trailing partial segment is kept as-is.
    """
    body = fill_path[2:] if fill_path[:2].lower() == "0x" else fill_path
    step = FILL_PATH_ADDRESS_HEX_LENGTH
    return ["0x" + body[i : i + step] for i in range(0, len(body), step)]


def get_eth_swap_transaction_buy_and_sell_tokens(
    tx: TransactionInfo,
    native_asset: BlockchainToken | None,
    tokens: Sequence[BlockchainToken],
) -> SwapLegs:
    """Resolve the sell and buy legs of an ETHSwap.

    Args: ``(bytes fillPath, uint256 sellAmount, uint256 minBuyAmount)``.
    The first fill path token is sold and the last is bought. The native
    placeholder address, and any address missing from the registry, stand
    for the native asset. A single-token path sells the native asset.
    """
    if tx.tx_type != TransactionType.ETH_SWAP:
        return SwapLegs()

    fill_tokens: list[BlockchainToken] = []
    for address in decode_fill_path(tx.arg(0)):
        if address.lower() == NATIVE_ASSET_CONTRACT_ADDRESS_0X:
            resolved = native_asset
        else:
            resolved = find_token_by_contract_address(address, tokens) or native_asset
        if resolved is not None:
            fill_tokens.append(resolved)

    if not fill_tokens:
        return SwapLegs()

    sell_token = native_asset if len(fill_tokens) == 1 else fill_tokens[0]
    buy_token = fill_tokens[-1]

    sell_amount_wei = Amount(tx.arg(1) or get_transaction_base_value(tx))
    buy_amount_wei = Amount(tx.arg(2))

    return SwapLegs(
        sell_token=sell_token,
        sell_amount=sell_amount_wei.divide_by_decimals(sell_token.decimals)
        if sell_token
        else Amount.empty(),
        sell_amount_wei=sell_amount_wei,
        buy_token=buy_token,
        buy_amount=buy_amount_wei.divide_by_decimals(buy_token.decimals),
        buy_amount_wei=buy_amount_wei,
    )


def get_lamports_moved_from_instructions(
    instructions: Sequence[TypedSolanaInstruction], from_address: str
) -> Amount:
    """Lamports sent out of ``from_address`` by System Program instructions.

    Covers dapp bundles that move SOL as a side effect. Instructions without
    a lamports param are skipped.
    """
    total = Amount.zero()
    for instruction in instructions:
        if instruction.type != SolanaInstructionType.SYSTEM:
            continue
        if instruction.method_name not in LAMPORT_MOVING_SYSTEM_METHODS:
            continue
        if instruction.account_params.get(FROM_ACCOUNT) != from_address:
            continue
        lamports = Amount(instruction.params.get(LAMPORTS_PARAM))
        if not lamports.is_empty():
            total = total.plus(lamports)
    return total
