"""Arbitrary-precision amounts with an empty sentinel.

``Amount`` wraps a :class:`~decimal.Decimal` or nothing at all. Anything that
cannot be read as a finite number (``None``, ``""``, ``"0x"``, ``"abc"``,
``NaN``) becomes the *empty* amount. Empty is closed under arithmetic: any
operation with an empty operand yields empty, and comparisons involving an
empty side are ``False``. Nothing in this module raises on bad input.

Example:
    fee = Amount("0x5208").times("20000000000")   # 21000 gas * 20 gwei
    fee.divide_by_decimals(18).format(6)            # "0.00042"
    Amount("oops").plus(1).format()                 # ""
"""

from __future__ import annotations

import string
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from txlens.constants.magics import DIVISION_DECIMAL_PLACES, FIAT_PRECISION

# Wide enough for uint256 values scaled by any realistic decimals. No traps:
# overflow and invalid results come back as Infinity/NaN and are read as empty.
_CONTEXT = Context(prec=200, rounding=ROUND_HALF_UP, traps=[])
_HEX_DIGITS = frozenset(string.hexdigits)
_ONE_CENT = Decimal("0.01")

AmountLike = Union["Amount", str, int, float, Decimal, None]


def _parse(value: Any) -> Decimal | None:
    """Read a value into a finite Decimal, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Amount):
        return value._value
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        value = repr(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text or "_" in text:
        return None

    if text[:2].lower() == "0x":
        digits = text[2:]
        if not digits or not _HEX_DIGITS.issuperset(digits):
            return None
        return Decimal(int(digits, 16))

    try:
        parsed = Decimal(text)
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def _round(value: Decimal, places: int) -> Decimal:
    """Round half-up to at most ``places`` fractional digits without losing integer digits."""
    if value.as_tuple().exponent >= -places:
        return value
    context = _CONTEXT
    needed = value.adjusted() + places + 2
    if needed > context.prec:
        context = context.copy()
        context.prec = needed
    rounded = value.quantize(Decimal(1).scaleb(-places), context=context)
    return rounded if rounded.is_finite() else value


def _plain(value: Decimal) -> str:
    """Fixed-point text without exponent or trailing zeros."""
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _commify(text: str) -> str:
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    whole, dot, fraction = text.partition(".")
    return f"{sign}{int(whole):,}{dot}{fraction}"


class Amount:
    """Decimal value that is either valid or empty.

    Arithmetic methods accept anything :class:`Amount` accepts (strings,
    ``0x`` hex strings, ints, floats, Decimals or other Amounts) and always
    return a new Amount. Instances are immutable.
    """

    __slots__ = ("_value",)

    def __init__(self, value: AmountLike = None) -> None:
        self._value: Decimal | None = _parse(value)

    @classmethod
    def _of(cls, value: Decimal | None) -> Amount:
        amount = cls.__new__(cls)
        amount._value = value if value is not None and value.is_finite() else None
        return amount

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @staticmethod
    def zero() -> Amount:
        return Amount._of(Decimal(0))

    @staticmethod
    def empty() -> Amount:
        return Amount._of(None)

    @staticmethod
    def normalize(value: AmountLike) -> str:
        """Canonical decimal text for a decimal or ``0x`` hex input.

        Malformed input gives ``""``. Idempotent:
        ``normalize(normalize(x)) == normalize(x)``.
        """
        return Amount(value).format()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def value(self) -> Decimal | None:
        return self._value

    def is_empty(self) -> bool:
        return self._value is None

    def is_zero(self) -> bool:
        return self._value is not None and self._value.is_zero()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, other: AmountLike) -> Amount:
        right = _parse(other)
        if self._value is None or right is None:
            return Amount.empty()
        return Amount._of(_CONTEXT.add(self._value, right))

    def minus(self, other: AmountLike) -> Amount:
        right = _parse(other)
        if self._value is None or right is None:
            return Amount.empty()
        return Amount._of(_CONTEXT.subtract(self._value, right))

    def times(self, other: AmountLike) -> Amount:
        right = _parse(other)
        if self._value is None or right is None:
            return Amount.empty()
        return Amount._of(_CONTEXT.multiply(self._value, right))

    def div(self, other: AmountLike) -> Amount:
        """Divide, keeping a fixed number of fractional digits.

        Division by zero yields empty.
        """
        right = _parse(other)
        if self._value is None or right is None or right.is_zero():
            return Amount.empty()
        quotient = _CONTEXT.divide(self._value, right)
        if not quotient.is_finite():
            return Amount.empty()
        return Amount._of(_round(quotient, DIVISION_DECIMAL_PLACES))

    def divide_by_decimals(self, decimals: int) -> Amount:
        """Shift the value by ``10 ** -decimals`` (base units to human units)."""
        if self._value is None:
            return Amount.empty()
        return Amount._of(self._value.scaleb(-decimals, _CONTEXT))

    def multiply_by_decimals(self, decimals: int) -> Amount:
        """Shift the value by ``10 ** decimals`` (human units to base units)."""
        if self._value is None:
            return Amount.empty()
        return Amount._of(self._value.scaleb(decimals, _CONTEXT))

    # ------------------------------------------------------------------
    # Comparisons (False whenever either side is empty)
    # ------------------------------------------------------------------

    def gt(self, other: AmountLike) -> bool:
        right = _parse(other)
        return self._value is not None and right is not None and self._value > right

    def gte(self, other: AmountLike) -> bool:
        right = _parse(other)
        return self._value is not None and right is not None and self._value >= right

    def lt(self, other: AmountLike) -> bool:
        right = _parse(other)
        return self._value is not None and right is not None and self._value < right

    def eq(self, other: AmountLike) -> bool:
        right = _parse(other)
        return self._value is not None and right is not None and self._value == right

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, precision: int | None = None, commify: bool = False) -> str:
        """Fixed-point text, ``""`` for empty.

        Args:
            precision: Round half-up to at most this many fractional digits.
                ``None`` keeps full precision.
            commify: Group the integer part with thousands separators.
        """
        if self._value is None:
            return ""
        value = self._value
        if precision is not None:
            value = _round(value, precision)
        text = _plain(value)
        return _commify(text) if commify else text

    def format_as_asset(self, precision: int | None = None, symbol: str | None = None) -> str:
        """Render ``"<amount> <symbol>"``; ``""`` for empty."""
        text = self.format(precision, commify=True)
        if not text:
            return ""
        return f"{text} {symbol}" if symbol else text

    def format_as_fiat(self) -> str:
        """Two fractional digits with separators, ``""`` for empty.

        Non-zero values below one cent keep two significant digits so they
        do not collapse to ``0.00``.
        """
        if self._value is None:
            return ""
        value = self._value
        places = FIAT_PRECISION
        if not value.is_zero() and abs(value) < _ONE_CENT:
            places = -value.adjusted() + 1
        rounded = _round(value, places)
        if rounded.is_zero():
            rounded = abs(rounded)
        return format(rounded, f",.{places}f")

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __add__(self, other: AmountLike) -> Amount:
        return self.plus(other)

    def __sub__(self, other: AmountLike) -> Amount:
        return self.minus(other)

    def __mul__(self, other: AmountLike) -> Amount:
        return self.times(other)

    def __truediv__(self, other: AmountLike) -> Amount:
        return self.div(other)

    def __gt__(self, other: AmountLike) -> bool:
        return self.gt(other)

    def __ge__(self, other: AmountLike) -> bool:
        return self.gte(other)

    def __lt__(self, other: AmountLike) -> bool:
        return self.lt(other)

    def __eq__(self, other: object) -> bool:
        """Value equality; two empty amounts are equal to each other."""
        if isinstance(other, Amount):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        if self._value is None:
            return "Amount.empty()"
        return f"Amount('{self.format()}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda amount: amount.format(), when_used="always"
            ),
        )
