"""测试共用的可控时钟。"""

from __future__ import annotations

import pytest


class FakeClock:
    """按顺序返回预设纳秒值的时钟。"""

    def __init__(self, *instants: int) -> None:
        self._instants = list(instants)
        self.calls = 0

    def __call__(self) -> int:
        value = self._instants[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def fake_clock():
    return FakeClock
