"""Unit tests for locale lookup and template substitution."""

from txlens.constants.locale import INTENT_SEND, MISSING_GAS_LIMIT_ERROR
from txlens.services.locale.strings import DictLocale, substitute, to_proper_case


class TestDictLocale:
    def test_defaults_are_english(self) -> None:
        locale = DictLocale()

        assert locale.get(INTENT_SEND) == "Send $1"
        assert locale.get(MISSING_GAS_LIMIT_ERROR) == "Missing gas limit"

    def test_overrides_merge_over_defaults(self) -> None:
        locale = DictLocale({INTENT_SEND: "Enviar $1"})

        assert locale.get(INTENT_SEND) == "Enviar $1"
        assert locale.get(MISSING_GAS_LIMIT_ERROR) == "Missing gas limit"

    def test_unknown_key_returns_key(self) -> None:
        assert DictLocale().get("no_such_key") == "no_such_key"


class TestSubstitute:
    def test_positional_placeholders(self) -> None:
        assert substitute("Swap $1 to $2", "1 ETH", "2,000 DAI") == "Swap 1 ETH to 2,000 DAI"

    def test_double_digit_placeholder_is_not_clobbered(self) -> None:
        template = " ".join(f"${i}" for i in range(1, 11))
        values = [f"v{i}" for i in range(1, 11)]

        assert substitute(template, *values) == " ".join(values)

    def test_missing_values_leave_placeholder(self) -> None:
        assert substitute("Swap $1 to $2", "1 ETH") == "Swap 1 ETH to $2"


class TestToProperCase:
    def test_capitalizes_each_word(self) -> None:
        assert to_proper_case("approve") == "Approve"
        assert to_proper_case("dAPP interaction") == "Dapp Interaction"
