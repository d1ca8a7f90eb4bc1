from __future__ import annotations

import pytest
from pydantic import ValidationError

from appcommands.env import Env


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        'APPCOMMANDS_DEV',
        'APPCOMMANDS_ENFORCE_OPTION_ORDER',
        'APPCOMMANDS_MAX_OPTION_DEPTH',
        'LOGFIRE_TOKEN'
    ):
        monkeypatch.delenv(name, raising=False)

    env = Env.new()

    assert env.dev is True
    assert env.enforce_option_order is False
    assert env.max_option_depth == 8
    assert env.logfire_token == ''


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('APPCOMMANDS_DEV', '0')
    monkeypatch.setenv('APPCOMMANDS_ENFORCE_OPTION_ORDER', '1')
    monkeypatch.setenv('APPCOMMANDS_MAX_OPTION_DEPTH', '3')

    env = Env.new()

    assert env.dev is False
    assert env.enforce_option_order is True
    assert env.max_option_depth == 3


def test_depth_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('APPCOMMANDS_MAX_OPTION_DEPTH', '0')

    with pytest.raises(ValidationError):
        Env.new()
