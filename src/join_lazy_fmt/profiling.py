"""RenderAccumulator — opt-in profiling for lazy joins.

This module provides accumulated metrics while rendering:
- Number of render() calls on DisplayableJoin objects
- Items and separators written
- Renders of joins that were already exhausted

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from join_lazy_fmt import Join
    from join_lazy_fmt.profiling import profiled_render

    with profiled_render() as metrics:
        text = str(Join(", ").join(range(5)))

    print(metrics.summary())
    # {"total_ms": 0.01, "render_calls": 1, "items": 5, "separators": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of DisplayableJoin.render() calls.
        items: Number of items written.
        separators: Number of separators written.
        exhausted_renders: Renders that found the join already consumed.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    items: int = 0
    separators: int = 0
    exhausted_renders: int = 0

    def record_render(self, *, exhausted: bool = False) -> None:
        self.render_calls += 1
        if exhausted:
            self.exhausted_renders += 1

    def record_item(self) -> None:
        self.items += 1

    def record_separator(self) -> None:
        self.separators += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics.

        Returns:
            Dict with total_ms, render_calls, items, separators,
            exhausted_renders.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "items": self.items,
            "separators": self.separators,
            "exhausted_renders": self.exhausted_renders,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator populated by every join rendered inside the block.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
]
