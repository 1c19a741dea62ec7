"""Typed decoding of Solana instructions.

Instructions arrive either already decoded by the wallet backend
(``decoded_data``) or as raw bytes. Upstream decoding is trusted as-is.
Raw System Program instructions are decoded here; other programs keep
their raw bytes and an ``Unknown`` method name.

System Program data layout (bincode, little-endian):
    u32 discriminator, then per instruction:
    Transfer               u64 lamports
    CreateAccount          u64 lamports, u64 space, [32] owner
    TransferWithSeed       u64 lamports, string seed, [32] owner
    CreateAccountWithSeed  [32] base, string seed, u64 lamports, u64 space, [32] owner
"""

import struct

import structlog
from solders.pubkey import Pubkey

from txlens.constants.solana import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    BASE_ACCOUNT,
    FROM_ACCOUNT,
    LAMPORTS_PARAM,
    NEW_ACCOUNT,
    SYSTEM_CREATE_ACCOUNT,
    SYSTEM_CREATE_ACCOUNT_WITH_SEED,
    SYSTEM_INSTRUCTION_NAMES,
    SYSTEM_PROGRAM_ID,
    SYSTEM_TRANSFER,
    SYSTEM_TRANSFER_WITH_SEED,
    TO_ACCOUNT,
    TOKEN_INSTRUCTION_NAMES,
    TOKEN_PROGRAM_ID,
)
from txlens.core.exceptions import InstructionDecodeError
from txlens.data.models.parsed import SolanaInstructionType, TypedSolanaInstruction
from txlens.data.models.transaction import (
    DecodedSolanaInstructionData,
    SolanaInstruction,
    SolanaTxData,
)

log = structlog.get_logger(__name__)

_PUBKEY_LENGTH = 32

_PROGRAM_TYPES = {
    SYSTEM_PROGRAM_ID: SolanaInstructionType.SYSTEM,
    TOKEN_PROGRAM_ID: SolanaInstructionType.TOKEN,
    ASSOCIATED_TOKEN_PROGRAM_ID: SolanaInstructionType.ASSOCIATED_TOKEN,
}


def get_typed_solana_tx_instructions(solana_data: SolanaTxData) -> list[TypedSolanaInstruction]:
    """Decode every instruction of a Solana transaction, in order."""
    return [decode_instruction(instruction) for instruction in solana_data.instructions]


def decode_instruction(instruction: SolanaInstruction) -> TypedSolanaInstruction:
    """Resolve method name and named params of one instruction.

    Never raises: undecodable instructions come back as ``Unknown``.
    """
    if instruction.decoded_data is not None:
        return _from_decoded_data(instruction, instruction.decoded_data)

    if instruction.program_id == SYSTEM_PROGRAM_ID:
        try:
            return _decode_system_instruction(instruction)
        except InstructionDecodeError as e:
            log.debug(
                "solana_instruction_undecodable",
                program_id=e.program_id,
                error=str(e),
            )

    return TypedSolanaInstruction(
        program_id=instruction.program_id,
        type=_PROGRAM_TYPES.get(instruction.program_id, SolanaInstructionType.UNKNOWN),
        account_metas=instruction.account_metas,
        data=instruction.data,
    )


def _method_name(program_type: SolanaInstructionType, instruction_type: int) -> str:
    if program_type == SolanaInstructionType.SYSTEM:
        return SYSTEM_INSTRUCTION_NAMES.get(instruction_type, "Unknown")
    if program_type == SolanaInstructionType.TOKEN:
        return TOKEN_INSTRUCTION_NAMES.get(instruction_type, "Unknown")
    return "Unknown"


def _from_decoded_data(
    instruction: SolanaInstruction, decoded: DecodedSolanaInstructionData
) -> TypedSolanaInstruction:
    program_type = _PROGRAM_TYPES.get(instruction.program_id, SolanaInstructionType.UNKNOWN)
    return TypedSolanaInstruction(
        program_id=instruction.program_id,
        type=program_type,
        method_name=_method_name(program_type, decoded.instruction_type),
        account_params={p.name: p.value for p in decoded.account_params},
        params={p.name: p.value for p in decoded.params},
        account_metas=instruction.account_metas,
        data=instruction.data,
    )


def _read_pubkey(data: bytes, offset: int, program_id: str) -> str:
    raw = data[offset : offset + _PUBKEY_LENGTH]
    if len(raw) != _PUBKEY_LENGTH:
        raise InstructionDecodeError(f"truncated pubkey at offset {offset}", program_id)
    return str(Pubkey.from_bytes(raw))


def _read_seed(data: bytes, offset: int) -> tuple[str, int]:
    """Read a bincode string; returns the text and the offset after it."""
    (length,) = struct.unpack_from("<Q", data, offset)
    start = offset + 8
    raw = data[start : start + length]
    if len(raw) != length:
        raise struct.error("truncated seed")
    return raw.decode("utf-8", errors="replace"), start + length


def _name_accounts(addresses: list[str], *names: str) -> dict[str, str]:
    return {name: address for name, address in zip(names, addresses)}


def _decode_system_instruction(instruction: SolanaInstruction) -> TypedSolanaInstruction:
    program_id = instruction.program_id
    addresses = [meta.pubkey for meta in instruction.account_metas]
    params: dict[str, str] = {}
    account_params: dict[str, str] = {}

    try:
        data = bytes(instruction.data)
        (discriminator,) = struct.unpack_from("<I", data, 0)

        if discriminator == SYSTEM_TRANSFER:
            (lamports,) = struct.unpack_from("<Q", data, 4)
            params[LAMPORTS_PARAM] = str(lamports)
            account_params = _name_accounts(addresses, FROM_ACCOUNT, TO_ACCOUNT)

        elif discriminator == SYSTEM_CREATE_ACCOUNT:
            lamports, space = struct.unpack_from("<QQ", data, 4)
            params[LAMPORTS_PARAM] = str(lamports)
            params["space"] = str(space)
            params["owner_program"] = _read_pubkey(data, 20, program_id)
            account_params = _name_accounts(addresses, FROM_ACCOUNT, NEW_ACCOUNT)

        elif discriminator == SYSTEM_TRANSFER_WITH_SEED:
            (lamports,) = struct.unpack_from("<Q", data, 4)
            seed, offset = _read_seed(data, 12)
            params[LAMPORTS_PARAM] = str(lamports)
            params["from_seed"] = seed
            params["from_owner"] = _read_pubkey(data, offset, program_id)
            account_params = _name_accounts(addresses, FROM_ACCOUNT, BASE_ACCOUNT, TO_ACCOUNT)

        elif discriminator == SYSTEM_CREATE_ACCOUNT_WITH_SEED:
            params["base"] = _read_pubkey(data, 4, program_id)
            seed, offset = _read_seed(data, 4 + _PUBKEY_LENGTH)
            lamports, space = struct.unpack_from("<QQ", data, offset)
            params["seed"] = seed
            params[LAMPORTS_PARAM] = str(lamports)
            params["space"] = str(space)
            params["owner_program"] = _read_pubkey(data, offset + 16, program_id)
            account_params = _name_accounts(addresses, FROM_ACCOUNT, NEW_ACCOUNT, BASE_ACCOUNT)

    except (struct.error, ValueError) as e:
        raise InstructionDecodeError(str(e), program_id) from e

    return TypedSolanaInstruction(
        program_id=program_id,
        type=SolanaInstructionType.SYSTEM,
        method_name=SYSTEM_INSTRUCTION_NAMES.get(discriminator, "Unknown"),
        account_params=account_params,
        params=params,
        account_metas=instruction.account_metas,
        data=instruction.data,
    )
