"""Process-wide default precision used by Money arithmetic.

Every Money operation that is called without an explicit `precision` reads
the default exactly once, at the start of the call. The value is guarded by
a lock, so readers never see a half-written value, but a concurrent
`set_default_precision` may or may not affect an operation already running
in another thread. Pass `precision` explicitly where that matters.
"""
from __future__ import annotations

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from money_manager.domain.monetary.errors import InvalidPrecisionError

logger = logging.getLogger(__name__)

DEFAULT_PRECISION: int = 4
PRECISION_ENV_VAR = "MONEY_MANAGER_DEFAULT_PRECISION"

# Module-level state shared by all Money instances
_default_precision: int = DEFAULT_PRECISION
_precision_lock = Lock()


def validate_precision(precision: int) -> int:
    """Check that $precision is a non-negative int and return it.

    Raises:
        InvalidPrecisionError: If $precision is not an int (bool is rejected too) or is negative.
    """
    # Raise: precision must be a real int
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecisionError(f"$precision must be an int, but provided value is: {precision!r}")

    # Raise: precision must not be negative
    if precision < 0:
        raise InvalidPrecisionError(f"$precision must be >= 0, but provided value is: {precision}")

    return precision


def get_default_precision() -> int:
    """Return the current process-wide default precision."""
    with _precision_lock:
        return _default_precision


def set_default_precision(precision: int) -> None:
    """Replace the process-wide default precision.

    Existing Money instances are not affected; only operations started after
    this call observe the new value.

    Args:
        precision: Number of fractional digits, >= 0.

    Raises:
        InvalidPrecisionError: If $precision is not a non-negative int.
    """
    global _default_precision
    precision = validate_precision(precision)
    with _precision_lock:
        previous = _default_precision
        _default_precision = precision
    if previous != precision:
        logger.info(f"Default precision changed from {previous} to {precision}")


def resolve_precision(precision: int | None) -> int:
    """Return $precision when given, otherwise the current default precision."""
    if precision is None:
        return get_default_precision()
    return validate_precision(precision)


def load_default_precision_from_env(dotenv_path: str | os.PathLike | None = None) -> int:
    """Set the default precision from `MONEY_MANAGER_DEFAULT_PRECISION`.

    A `.env` file is loaded first (values already present in the environment
    win). When the variable is missing, the current default is kept.

    Args:
        dotenv_path: Optional explicit path to the `.env` file. When None, python-dotenv searches for one.

    Returns:
        int: The effective default precision after loading.

    Raises:
        InvalidPrecisionError: If the variable is set but is not a non-negative integer.
    """
    load_dotenv(dotenv_path=dotenv_path)
    raw_value = os.environ.get(PRECISION_ENV_VAR)
    if raw_value is None:
        return get_default_precision()

    try:
        precision = int(raw_value.strip())
    except ValueError as e:
        raise InvalidPrecisionError(f"${PRECISION_ENV_VAR} must be an integer, but provided value is: '{raw_value}'") from e

    set_default_precision(precision)
    logger.info(f"Loaded default precision {precision} from ${PRECISION_ENV_VAR}")
    return precision
