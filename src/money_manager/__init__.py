__version__ = "0.1.0"

from money_manager.domain.monetary.currency import Currency
from money_manager.domain.monetary.errors import CurrencyMismatchError, DivisionByZeroError, InvalidAmountError, InvalidPrecisionError, MoneyError
from money_manager.domain.monetary.money import Money
from money_manager.domain.monetary.precision import get_default_precision, load_default_precision_from_env, set_default_precision

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "InvalidAmountError",
    "InvalidPrecisionError",
    "Money",
    "MoneyError",
    "get_default_precision",
    "load_default_precision_from_env",
    "set_default_precision",
]
