"""Shared fixtures for Confidant tests."""

from __future__ import annotations

import pytest

from confidant.core.config import get_config
from confidant.core.defaults import (
    ENV_DISCLOSURE_TEMPLATE,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_STRICT_COUNTERPART,
)
from confidant.privacy.names import MappingNameResolver

OWNER = "user:owner"
ALLY = "user:ally"
ALLY_COMMENTER = "user:ally-commenter"
STRANGER = "user:stranger"


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the caller's CONFIDANT_* environment."""
    for key in (ENV_LOG_LEVEL, ENV_LOG_FORMAT, ENV_STRICT_COUNTERPART, ENV_DISCLOSURE_TEMPLATE):
        monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def names() -> MappingNameResolver:
    """Directory covering every identity used in the scenarios."""
    return MappingNameResolver(
        {
            OWNER: "Olive Owner",
            ALLY: "Abe Ally",
            ALLY_COMMENTER: "Bea Commenter",
            STRANGER: "Sam Stranger",
        }
    )
