"""txlens exception hierarchy.

This module defines the base exception class and specialized exceptions
for the few places where txlens does raise. Transaction interpretation
itself never raises on partial data: missing fields degrade to empty
values instead.
"""


class TxLensError(Exception):
    """Base exception for all txlens errors.

    All custom exceptions in txlens should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(TxLensError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("parser_cache_max_size must be positive")
    """

    pass


class ValidationError(TxLensError):
    """Raised when caller-supplied context fails validation.

    Example:
        raise ValidationError("Network decimals must be non-negative")
    """

    pass


class TransactionDecodeError(TxLensError):
    """Raised when a raw transaction payload cannot be turned into a record.

    Attributes:
        tx_id: Transaction id from the payload, if one could be read.

    Example:
        raise TransactionDecodeError("txDataUnion is missing", tx_id="abc")
    """

    def __init__(self, message: str, tx_id: str | None = None) -> None:
        super().__init__(message)
        self.tx_id = tx_id


class InstructionDecodeError(TxLensError):
    """Raised when raw Solana instruction bytes are malformed.

    The instruction decoder catches this and keeps the instruction as an
    unknown instruction, so it never reaches the transaction parser caller.

    Attributes:
        program_id: Program the instruction was addressed to.
    """

    def __init__(self, message: str, program_id: str) -> None:
        self.program_id = program_id
        super().__init__(f"{program_id}: {message}")
