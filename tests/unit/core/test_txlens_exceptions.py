"""Tests for txlens exception hierarchy."""

import pytest


class TestTxLensError:
    """Tests for base TxLensError exception."""

    def test_txlens_error_is_exception(self) -> None:
        """
        Given: TxLensError class
        When: Checking inheritance
        Then: It inherits from Exception
        """
        from txlens.core.exceptions import TxLensError

        assert issubclass(TxLensError, Exception)

    def test_txlens_error_str_representation(self) -> None:
        """
        Given: TxLensError with message
        When: Converting to string
        Then: Returns the message
        """
        from txlens.core.exceptions import TxLensError

        assert str(TxLensError("Something went wrong")) == "Something went wrong"

    @pytest.mark.parametrize(
        "name", ["ConfigurationError", "ValidationError", "TransactionDecodeError"]
    )
    def test_subclasses_inherit_from_base(self, name: str) -> None:
        """
        Given: A txlens exception class
        When: Checking inheritance
        Then: It inherits from TxLensError
        """
        from txlens.core import exceptions

        assert issubclass(getattr(exceptions, name), exceptions.TxLensError)


class TestTransactionDecodeError:
    """Tests for TransactionDecodeError exception."""

    def test_keeps_transaction_id(self) -> None:
        """
        Given: TransactionDecodeError raised for a known id
        When: Caught
        Then: The id is available on the exception
        """
        from txlens.core.exceptions import TransactionDecodeError

        with pytest.raises(TransactionDecodeError, match="bad payload") as exc_info:
            raise TransactionDecodeError("bad payload", tx_id="tx-1")

        assert exc_info.value.tx_id == "tx-1"

    def test_transaction_id_defaults_to_none(self) -> None:
        from txlens.core.exceptions import TransactionDecodeError

        assert TransactionDecodeError("bad payload").tx_id is None


class TestInstructionDecodeError:
    """Tests for InstructionDecodeError exception."""

    def test_message_includes_program(self) -> None:
        """
        Given: InstructionDecodeError for a program
        When: Converting to string
        Then: Program id prefixes the message
        """
        from txlens.core.exceptions import InstructionDecodeError, TxLensError

        error = InstructionDecodeError("truncated data", "11111111111111111111111111111111")

        assert isinstance(error, TxLensError)
        assert error.program_id == "11111111111111111111111111111111"
        assert str(error) == "11111111111111111111111111111111: truncated data"
