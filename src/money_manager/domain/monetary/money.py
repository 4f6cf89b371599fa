from __future__ import annotations

import logging
from decimal import Context, Decimal, InvalidOperation

from money_manager.domain.monetary import precision as precision_settings
from money_manager.domain.monetary.currency import Currency
from money_manager.domain.monetary.errors import CurrencyMismatchError, DivisionByZeroError, InvalidAmountError
from money_manager.utils.decimal_tools import DecimalLike, as_decimal, is_decimal_string, quantize_to_precision, to_plain_string, working_context

logger = logging.getLogger(__name__)

# Types accepted as a scalar factor / divisor by the Python operators
_SCALAR_TYPES = (Decimal, str, int, float)


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for arbitrary precision arithmetic. Instances are
    immutable: every operation returns a new Money.

    Arithmetic results are truncated toward zero (`ROUND_DOWN`) to exactly
    $precision fractional digits. When $precision is omitted, the process-wide
    default precision (see `money_manager.domain.monetary.precision`) is read
    once at the start of the call.

    Currency rules:
        - `add`, `subtract` and `compare_to` (and everything built on it) require
          both values to share the same currency, otherwise `CurrencyMismatchError`.
        - `multiply` and `divide` are scaling operations. A Money operand only
          contributes its amount; its currency is not checked and the result
          keeps the receiver's currency.
    """

    __slots__ = ("_value", "_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        No rounding happens here: the amount is stored exactly as given.

        Args:
            amount: Decimal-like scalar. Strings must be plain decimal numbers (e.g. "-12.50", ".5", "+1")
                and are returned unchanged by `amount`.
            currency (Currency): Currency object.

        Raises:
            InvalidAmountError: If $amount is not a finite decimal number.
            TypeError: If $currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        self._value = _to_finite_decimal(amount, "Cannot init `Money` because $amount")
        # String input is kept verbatim, other scalars are rendered in fixed point
        self._amount = amount if isinstance(amount, str) else to_plain_string(self._value)
        self._currency = currency

    # region Accessors

    @property
    def amount(self) -> str:
        """Get the amount as decimal string (verbatim for string input, fixed point otherwise)."""
        return self._amount

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def is_zero(self) -> bool:
        """Check if the value is zero."""
        return self._value.is_zero()

    @property
    def is_positive(self) -> bool:
        """Check if the value is greater than zero."""
        return self._value > 0

    @property
    def is_negative(self) -> bool:
        """Check if the value is less than zero."""
        return self._value < 0

    # endregion

    # region Default precision

    @classmethod
    def get_default_precision(cls) -> int:
        """Return the process-wide default precision."""
        return precision_settings.get_default_precision()

    @classmethod
    def set_default_precision(cls, precision: int) -> None:
        """Set the process-wide default precision used when an operation gets no $precision."""
        precision_settings.set_default_precision(precision)

    # endregion

    # region Arithmetic

    def add(self, other: Money, precision: int | None = None) -> Money:
        """Return the sum of this Money and $other.

        Raises:
            CurrencyMismatchError: If $other has a different currency.
        """
        self._check_same_currency(other, "add")
        precision = precision_settings.resolve_precision(precision)
        context = working_context(precision, self._value, other.value)
        return self._new_money(context.add(self._value, other.value), precision, context)

    def subtract(self, other: Money, precision: int | None = None) -> Money:
        """Return the difference of this Money and $other.

        Raises:
            CurrencyMismatchError: If $other has a different currency.
        """
        self._check_same_currency(other, "subtract")
        precision = precision_settings.resolve_precision(precision)
        context = working_context(precision, self._value, other.value)
        return self._new_money(context.subtract(self._value, other.value), precision, context)

    def negate(self, precision: int | None = None) -> Money:
        """Return this Money with the opposite sign."""
        precision = precision_settings.resolve_precision(precision)
        context = working_context(precision, self._value)
        return self._new_money(self._value.copy_negate(), precision, context)

    def absolute(self, precision: int | None = None) -> Money:
        """Return this Money without sign."""
        precision = precision_settings.resolve_precision(precision)
        context = working_context(precision, self._value)
        return self._new_money(self._value.copy_abs(), precision, context)

    def multiply(self, factor: DecimalLike | Money, precision: int | None = None) -> Money:
        """Return this Money multiplied by $factor.

        If $factor is Money, only its amount is used. Its currency is not checked.

        Raises:
            InvalidAmountError: If $factor is not a finite decimal number.
        """
        factor_value = _operand_value(factor, "Cannot call `multiply` because $factor")
        precision = precision_settings.resolve_precision(precision)
        context = working_context(precision, self._value, factor_value)
        return self._new_money(context.multiply(self._value, factor_value), precision, context)

    def divide(self, divisor: DecimalLike | Money, precision: int | None = None) -> Money:
        """Return this Money divided by $divisor.

        If $divisor is Money, only its amount is used. Its currency is not checked.

        Raises:
            InvalidAmountError: If $divisor is not a finite decimal number.
            DivisionByZeroError: If $divisor is zero.
        """
        divisor_value = _operand_value(divisor, "Cannot call `divide` because $divisor")

        # Raise: divisor must not be zero
        if divisor_value.is_zero():
            raise DivisionByZeroError(f"Cannot call `divide` because $divisor ({divisor_value}) is zero")

        precision = precision_settings.resolve_precision(precision)
        context = working_context(precision, self._value, divisor_value)
        return self._new_money(context.divide(self._value, divisor_value), precision, context)

    # endregion

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Compare exact values of this Money and $other.

        Returns:
            int: -1, 0 or 1 if this value is less than, equal to or greater than $other.

        Raises:
            CurrencyMismatchError: If $other has a different currency.
        """
        self._check_same_currency(other, "compare_to")
        if self._value == other.value:
            return 0
        return -1 if self._value < other.value else 1

    def equals(self, other: Money) -> bool:
        """Check if this Money equals $other (same currency required)."""
        return self.compare_to(other) == 0

    def greater_than(self, other: Money) -> bool:
        """Check if this Money is greater than $other (same currency required)."""
        return self.compare_to(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        """Check if this Money is greater than or equal to $other (same currency required)."""
        return self.compare_to(other) >= 0

    def less_than(self, other: Money) -> bool:
        """Check if this Money is less than $other (same currency required)."""
        return self.compare_to(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        """Check if this Money is less than or equal to $other (same currency required)."""
        return self.compare_to(other) <= 0

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Check equality with another Money object.

        Unlike `equals`, a different currency gives False instead of raising.
        """
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self._value == other.value

    def __hash__(self) -> int:
        """Hash based on value and currency code."""
        return hash((self._value, self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number or by amount of another Money."""
        if not isinstance(other, (Money, *_SCALAR_TYPES)) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number or by amount of another Money."""
        if not isinstance(other, (Money, *_SCALAR_TYPES)) or isinstance(other, bool):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.absolute()

    # endregion

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.amount} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self.amount}, {self.currency.code})"

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        # Raise: other must be Money
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")

        # Raise: currencies must match
        if self.currency != other.currency:
            logger.debug(f"Currency mismatch in `{operation}`: {self.currency} vs {other.currency}")
            raise CurrencyMismatchError(operation, self.currency, other.currency)

    def _new_money(self, value: Decimal, precision: int, context: Context) -> Money:
        return self.__class__(quantize_to_precision(value, precision, context), self._currency)


def _to_finite_decimal(value: DecimalLike, error_prefix: str) -> Decimal:
    # Raise: bool is an int subclass, but not an amount
    if isinstance(value, bool):
        raise InvalidAmountError(f"{error_prefix} must not be bool, but provided value is: {value!r}")

    # Raise: strings must be plain decimal numbers
    if isinstance(value, str) and not is_decimal_string(value):
        raise InvalidAmountError(f"{error_prefix} ({value!r}) is not a well-formed decimal string")

    try:
        result = as_decimal(value)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise InvalidAmountError(f"{error_prefix} ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and Infinity are not amounts
    if not result.is_finite():
        raise InvalidAmountError(f"{error_prefix} ({value!r}) must be a finite number")

    return result


def _operand_value(operand: DecimalLike | Money, error_prefix: str) -> Decimal:
    if isinstance(operand, Money):
        return operand.value
    return _to_finite_decimal(operand, error_prefix)
