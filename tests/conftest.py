"""Shared fixtures for webcheck tests."""

import os
from collections.abc import Iterator

import pytest

from webcheck.services import reset_state


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without WEBCHECK_* overrides or cached singletons."""
    for key in list(os.environ):
        if key.startswith("WEBCHECK_"):
            monkeypatch.delenv(key)
    reset_state()
    yield
    reset_state()
