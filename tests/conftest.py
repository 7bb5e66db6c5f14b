"""Shared fixtures for join_lazy_fmt tests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pytest

from join_lazy_fmt import reset_format_config


class FailingSink:
    """Sink that raises OSError on the write numbered ``fail_at`` (0-based)."""

    def __init__(self, fail_at: int) -> None:
        self.fail_at = fail_at
        self.parts: list[str] = []

    def write(self, s: str) -> int:
        if len(self.parts) == self.fail_at:
            raise OSError("sink is full")
        self.parts.append(s)
        return len(s)

    def getvalue(self) -> str:
        return "".join(self.parts)


class CountingIterable:
    """Iterable that records how many items were pulled from it."""

    def __init__(self, items: Iterable[object]) -> None:
        self._items = list(items)
        self.pulled = 0
        self.iter_calls = 0

    def __iter__(self) -> Iterator[object]:
        self.iter_calls += 1
        return self._generate()

    def _generate(self) -> Iterator[object]:
        for item in self._items:
            self.pulled += 1
            yield item


@pytest.fixture(autouse=True)
def _default_format_config() -> Iterator[None]:
    """Every test starts and ends with the default FormatConfig."""
    reset_format_config()
    yield
    reset_format_config()


@pytest.fixture
def failing_sink() -> type[FailingSink]:
    return FailingSink


@pytest.fixture
def counting_iterable() -> type[CountingIterable]:
    return CountingIterable
