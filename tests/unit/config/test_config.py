# -*- coding: utf-8 -*-
"""Unit tests for Settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from notify_composer.config.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STACKING__MAX_LINES", raising=False)
    monkeypatch.delenv("HOST__BACKEND", raising=False)

    settings = Settings.from_env(_env_file=None)

    assert settings.formatting.secondary_color == "#3D3D3D"
    assert settings.formatting.line_break == "<br>"
    assert settings.stacking.max_lines == 0
    assert settings.channel.default_id == "application_notification"
    assert settings.host.backend == "memory"


def test_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STACKING__MAX_LINES", "5")
    monkeypatch.setenv("HOST__BACKEND", "console")
    monkeypatch.setenv("FORMATTING__SECONDARY_COLOR", "#112233")

    settings = Settings.from_env(_env_file=None)

    assert settings.stacking.max_lines == 5
    assert settings.host.backend == "console"
    assert settings.formatting.secondary_color == "#112233"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings.from_env(_env_file=None, stacking={"max_lines": -1})
    with pytest.raises(ValidationError):
        Settings.from_env(_env_file=None, formatting={"secondary_color": "grey"})


def test_settings_are_frozen() -> None:
    settings = Settings.from_env(_env_file=None)

    with pytest.raises(ValidationError):
        settings.app = settings.app  # type: ignore[misc]
