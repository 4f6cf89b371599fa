from __future__ import annotations

import re
from decimal import Context, Decimal, MAX_EMAX, MIN_EMIN, ROUND_DOWN
from typing import TypeAlias


DecimalLike: TypeAlias = Decimal | str | int | float

# Single rounding mode used whenever a result is reduced to a fixed number of fractional digits
ROUNDING_MODE = ROUND_DOWN

# Optional sign, then digits with optional fraction ("1", "1.", "1.50") or a bare fraction (".5")
DECIMAL_STRING_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def is_decimal_string(value: str) -> bool:
    """Check that $value is a plain decimal number.

    Stricter than `Decimal(str)`: no surrounding whitespace, no `_` separators,
    no exponent and no special values like NaN or Infinity.
    """
    return DECIMAL_STRING_PATTERN.fullmatch(value) is not None


def as_decimal(value: DecimalLike) -> Decimal:
    """Convert supported scalar types into Decimal.

    Floats are converted via `str` so that binary representation noise
    (e.g. 0.1 -> 0.1000000000000000055511151231257827) never reaches Decimal.

    Args:
        value: Input value as Decimal, string, int or float.

    Returns:
        Value converted to Decimal.
    """

    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def working_context(precision: int, *operands: Decimal) -> Context:
    """Build a local decimal Context wide enough to hold exact results for $operands.

    Significant digits are sized from the coefficient length and exponent of
    every operand plus $precision, so add/subtract/multiply stay exact and
    divide keeps every digit up to $precision fractional places before the
    final truncation. Exponent limits are opened to the widest range the
    decimal module supports, so finite operands never overflow. The global
    decimal context is left untouched.

    Args:
        precision: Number of fractional digits the result will be reduced to.
        *operands: Finite Decimal values taking part in the operation.

    Returns:
        Context: Fresh context using `ROUNDING_MODE`.
    """
    digits = 0
    for operand in operands:
        sign, coefficient, exponent = operand.as_tuple()
        digits += len(coefficient) + abs(exponent)

    return Context(prec=digits + precision + 2, rounding=ROUNDING_MODE, Emax=MAX_EMAX, Emin=MIN_EMIN)


def quantize_to_precision(value: Decimal, precision: int, context: Context) -> Decimal:
    """Reduce $value to exactly $precision fractional digits using `ROUNDING_MODE`.

    A zero result is returned without sign, so truncating -0.00001 to 4 places
    gives 0.0000 and not -0.0000.
    """
    result = value.quantize(Decimal(1).scaleb(-precision), rounding=ROUNDING_MODE, context=context)
    if result.is_zero():
        result = result.copy_abs()
    return result


def to_plain_string(value: Decimal) -> str:
    """Render $value in fixed-point notation, keeping its exponent (trailing zeros)."""
    return format(value, "f")
