import pytest

from money_manager.domain.monetary.precision import DEFAULT_PRECISION, set_default_precision


@pytest.fixture(autouse=True)
def restore_default_precision():
    # Default precision is process-wide, so every test starts and ends with the initial value
    set_default_precision(DEFAULT_PRECISION)
    yield
    set_default_precision(DEFAULT_PRECISION)
