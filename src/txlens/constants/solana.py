"""Solana program ids and System Program instruction layout."""

from typing import Final

SYSTEM_PROGRAM_ID: Final[str] = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID: Final[str] = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
ASSOCIATED_TOKEN_PROGRAM_ID: Final[str] = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"

# System Program instruction discriminators (little-endian u32 prefix)
SYSTEM_CREATE_ACCOUNT: Final[int] = 0
SYSTEM_ASSIGN: Final[int] = 1
SYSTEM_TRANSFER: Final[int] = 2
SYSTEM_CREATE_ACCOUNT_WITH_SEED: Final[int] = 3
SYSTEM_ADVANCE_NONCE_ACCOUNT: Final[int] = 4
SYSTEM_WITHDRAW_NONCE_ACCOUNT: Final[int] = 5
SYSTEM_INITIALIZE_NONCE_ACCOUNT: Final[int] = 6
SYSTEM_AUTHORIZE_NONCE_ACCOUNT: Final[int] = 7
SYSTEM_ALLOCATE: Final[int] = 8
SYSTEM_ALLOCATE_WITH_SEED: Final[int] = 9
SYSTEM_ASSIGN_WITH_SEED: Final[int] = 10
SYSTEM_TRANSFER_WITH_SEED: Final[int] = 11

SYSTEM_INSTRUCTION_NAMES: Final[dict[int, str]] = {
    SYSTEM_CREATE_ACCOUNT: "CreateAccount",
    SYSTEM_ASSIGN: "Assign",
    SYSTEM_TRANSFER: "Transfer",
    SYSTEM_CREATE_ACCOUNT_WITH_SEED: "CreateAccountWithSeed",
    SYSTEM_ADVANCE_NONCE_ACCOUNT: "AdvanceNonceAccount",
    SYSTEM_WITHDRAW_NONCE_ACCOUNT: "WithdrawNonceAccount",
    SYSTEM_INITIALIZE_NONCE_ACCOUNT: "InitializeNonceAccount",
    SYSTEM_AUTHORIZE_NONCE_ACCOUNT: "AuthorizeNonceAccount",
    SYSTEM_ALLOCATE: "Allocate",
    SYSTEM_ALLOCATE_WITH_SEED: "AllocateWithSeed",
    SYSTEM_ASSIGN_WITH_SEED: "AssignWithSeed",
    SYSTEM_TRANSFER_WITH_SEED: "TransferWithSeed",
}

# Instruction param / account param names
LAMPORTS_PARAM: Final[str] = "lamports"
FROM_ACCOUNT: Final[str] = "from_account"
TO_ACCOUNT: Final[str] = "to_account"
NEW_ACCOUNT: Final[str] = "new_account"
BASE_ACCOUNT: Final[str] = "base_account"

# SPL Token Program instruction discriminators (u8 prefix)
TOKEN_INSTRUCTION_NAMES: Final[dict[int, str]] = {
    0: "InitializeMint",
    1: "InitializeAccount",
    2: "InitializeMultisig",
    3: "Transfer",
    4: "Approve",
    5: "Revoke",
    6: "SetAuthority",
    7: "MintTo",
    8: "Burn",
    9: "CloseAccount",
    10: "FreezeAccount",
    11: "ThawAccount",
    12: "TransferChecked",
    13: "ApproveChecked",
    14: "MintToChecked",
    15: "BurnChecked",
}

# System methods that move lamports out of FROM_ACCOUNT
LAMPORT_MOVING_SYSTEM_METHODS: Final[frozenset[str]] = frozenset(
    {"Transfer", "TransferWithSeed", "CreateAccount", "CreateAccountWithSeed"}
)
