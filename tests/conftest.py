"""Pytest configuration and shared fixtures for pseudo-rand tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from pseudo_rand import _config
from pseudo_rand._logging import clear_log_hooks
from pseudo_rand.engine import get_thread_engines

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from an uninitialized config with no env overrides or hooks."""
    for var in ('PSEUDO_RAND_ENGINE', 'PSEUDO_RAND_MAX_RESAMPLES', 'PSEUDO_RAND_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(_config, '_config', None)
    clear_log_hooks()
    get_thread_engines().reset()
    root_level = logging.getLogger().level
    yield
    clear_log_hooks()
    logging.getLogger().setLevel(root_level)
