from __future__ import annotations

from collections.abc import Iterable, Sequence

import pytest

from lotto_game.config import DevelopmentConfig


class FakeRandomSource:
    """Returns the queued picks in order, ignoring the population."""

    def __init__(self, picks: Iterable[Sequence[int]]) -> None:
        self._picks = [list(p) for p in picks]
        self.calls = 0

    def sample(self, population, k):  # type: ignore[no-untyped-def]
        pick = self._picks[self.calls % len(self._picks)]
        self.calls += 1
        assert len(pick) == k
        return list(pick)


class ScriptedReader:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)

    def __call__(self) -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture
def output_lines() -> list[str]:
    return []


@pytest.fixture
def writer(output_lines):  # type: ignore[no-untyped-def]
    return output_lines.append


@pytest.fixture
def config() -> DevelopmentConfig:
    return DevelopmentConfig(LOG_LEVEL="WARNING", MESSAGE_LOCALE="ko", LOTTO_RANDOM_SEED=None, PROFIT_RATE_DECIMALS=1)
