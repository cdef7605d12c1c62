from __future__ import annotations

import pytest

from ledgerstate.config import LedgerConfig
from ledgerstate.context import LedgerContext
from ledgerstate.exceptions import LedgerConfigError, LedgerError


def test_config_defaults() -> None:
    config = LedgerConfig()

    assert config.remind_later_seconds == 86400
    assert config.payments_enabled_default is True


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGER_REMIND_LATER_SECONDS", "3600")
    monkeypatch.setenv("LEDGER_PAYMENTS_ENABLED_DEFAULT", "off")

    config = LedgerConfig.from_env()

    assert config.remind_later_seconds == 3600
    assert config.payments_enabled_default is False


def test_config_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGER_REMIND_LATER_SECONDS", "3600")
    monkeypatch.setenv("LEDGER_PAYMENTS_ENABLED_DEFAULT", "false")

    config = LedgerConfig.from_env(remind_later_seconds=10, payments_enabled_default=True)

    assert config.remind_later_seconds == 10
    assert config.payments_enabled_default is True


def test_config_from_env_invalid_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGER_REMIND_LATER_SECONDS", "tomorrow")

    with pytest.raises(LedgerConfigError) as excinfo:
        LedgerConfig.from_env()

    assert excinfo.value.field == "remind_later_seconds"
    assert isinstance(excinfo.value, LedgerError)


def test_config_rejects_negative_window() -> None:
    with pytest.raises(LedgerConfigError):
        LedgerConfig(remind_later_seconds=-1)


def test_context_payments_enabled_coerces_setting() -> None:
    class _Settings:
        def get_setting(self, key: str) -> object:
            return None

    assert LedgerContext(settings=_Settings()).payments_enabled() is False


def test_context_now_uses_injected_clock() -> None:
    assert LedgerContext(clock=lambda: 42).now() == 42
