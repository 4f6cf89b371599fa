from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from money_manager.domain.monetary.currency import Currency


class MoneyError(Exception):
    """Base class for all errors raised by the monetary domain."""

    pass


class InvalidAmountError(MoneyError, ValueError):
    """Raised when an amount (or factor / divisor) is not a finite decimal number."""

    pass


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when an operation combining two Money values gets different currencies.

    Attributes:
        left (Currency): Currency of the receiver.
        right (Currency): Currency of the other operand.
    """

    def __init__(self, operation: str, left: Currency, right: Currency):
        self.left = left
        self.right = right
        super().__init__(f"Cannot call `{operation}` because currencies differ: {left} and {right}")


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when `Money.divide` gets a divisor equal to zero."""

    pass


class InvalidPrecisionError(MoneyError, ValueError):
    """Raised when a precision is not a non-negative integer."""

    pass
