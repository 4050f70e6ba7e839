"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from finstatements.configuration import FinstatementsSettings


def test_defaults() -> None:
    settings = FinstatementsSettings(_env_file=None)

    assert settings.flash_duration_ms == 2000
    assert settings.flash_duration_seconds == 2.0
    assert settings.currency_symbol == "$"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINSTATEMENTS_FLASH_DURATION_MS", "500")
    monkeypatch.setenv("FINSTATEMENTS_LOG_LEVEL", "debug")

    settings = FinstatementsSettings(_env_file=None)

    assert settings.flash_duration_seconds == 0.5
    assert settings.log_level == "DEBUG"


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINSTATEMENTS_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        FinstatementsSettings(_env_file=None)

    with pytest.raises(ValidationError):
        FinstatementsSettings(_env_file=None, log_level="INFO", interface_port=0)
