"""Shared fixtures for resultcase tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from resultcase.foundation.config import clear_settings_cache
from resultcase.observability import reset_logging


class CallCounter:
    """Callable stand-in that records every call and returns a fixed value."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[tuple[object, ...]] = []
        self.returns = returns

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> CallCounter:
    return CallCounter()


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh settings and no installed log handler for each test."""
    for var in ("RESULTCASE_DEBUG", "RESULTCASE_LOG_LEVEL", "RESULTCASE_LOG_FORMAT", "RESULTCASE_CODEC_DEFAULT"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
