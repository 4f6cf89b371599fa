import logging
import threading

import pytest

from money_manager.domain.monetary import precision
from money_manager.domain.monetary.errors import InvalidPrecisionError
from money_manager.domain.monetary.precision import (
    DEFAULT_PRECISION,
    PRECISION_ENV_VAR,
    get_default_precision,
    load_default_precision_from_env,
    resolve_precision,
    set_default_precision,
)


def test_default_precision_is_four():
    assert DEFAULT_PRECISION == 4
    assert get_default_precision() == 4


def test_set_and_get():
    set_default_precision(8)
    assert get_default_precision() == 8
    set_default_precision(0)
    assert get_default_precision() == 0


@pytest.mark.parametrize("value", [-1, 2.0, "2", None, True])
def test_set_rejects_invalid_values(value):
    with pytest.raises(InvalidPrecisionError):
        set_default_precision(value)
    assert get_default_precision() == DEFAULT_PRECISION


def test_resolve_precision():
    assert resolve_precision(None) == DEFAULT_PRECISION
    assert resolve_precision(2) == 2
    set_default_precision(6)
    assert resolve_precision(None) == 6
    with pytest.raises(InvalidPrecisionError, match=">= 0"):
        resolve_precision(-3)


def test_change_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger=precision.__name__):
        set_default_precision(2)
    assert "Default precision changed from 4 to 2" in caplog.text


def test_load_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(PRECISION_ENV_VAR, "6")
    assert load_default_precision_from_env(tmp_path / "missing.env") == 6
    assert get_default_precision() == 6


def test_load_from_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.delenv(PRECISION_ENV_VAR, raising=False)
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{PRECISION_ENV_VAR}=2\n")
    assert load_default_precision_from_env(dotenv_file) == 2
    assert get_default_precision() == 2


def test_environment_wins_over_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.setenv(PRECISION_ENV_VAR, "3")
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{PRECISION_ENV_VAR}=9\n")
    assert load_default_precision_from_env(dotenv_file) == 3


def test_missing_variable_keeps_current_default(monkeypatch, tmp_path):
    monkeypatch.delenv(PRECISION_ENV_VAR, raising=False)
    set_default_precision(5)
    assert load_default_precision_from_env(tmp_path / "missing.env") == 5


@pytest.mark.parametrize("raw_value", ["abc", "1.5", "-2"])
def test_invalid_environment_value(monkeypatch, tmp_path, raw_value):
    monkeypatch.setenv(PRECISION_ENV_VAR, raw_value)
    with pytest.raises(InvalidPrecisionError):
        load_default_precision_from_env(tmp_path / "missing.env")


def test_concurrent_writers_never_produce_unknown_values():
    allowed = {2, 4, 6}
    seen = []

    def writer(value: int) -> None:
        for _ in range(200):
            set_default_precision(value)

    def reader() -> None:
        for _ in range(200):
            seen.append(get_default_precision())

    threads = [threading.Thread(target=writer, args=(value,)) for value in (2, 6)]
    threads.append(threading.Thread(target=reader))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert set(seen) <= allowed
    assert get_default_precision() in {2, 6}
