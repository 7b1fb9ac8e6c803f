"""
Shared test configuration.
It provides environment defaults, a settings cache reset, and a deterministic clock for marker tests.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common import settings as settings_module


class FakeClock:
    """Return queued timestamps in order; once drained, repeat the last one."""

    def __init__(self, timestamps: Iterable[int] = ()) -> None:
        self._queue = list(timestamps)
        self.now = 0

    def push(self, *timestamps: int) -> None:
        self._queue.extend(timestamps)

    def __call__(self) -> int:
        if self._queue:
            self.now = self._queue.pop(0)
        return self.now


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin marker settings so sink tests do not depend on the developer's environment."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
        "TIME_MARKER_TAG": "TimeMarker",
        "TIME_MARKER_SINK_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        monkeypatch.setenv(key, value)

    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
