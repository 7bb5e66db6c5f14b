"""Lazy ``separator.join(iterable)``.

``Join(sep).join(items)`` mirrors ``str.join`` with the separator first, but
accepts a lazy iterable of arbitrary displayable values and returns a
DisplayableJoin: nothing is pulled from ``items`` and nothing is formatted
until the result is rendered into a sink or materialized with ``str()``.

Example:
    >>> from join_lazy_fmt import Join
    >>> f"[{Join(', ').join(range(5))}]"
    '[0, 1, 2, 3, 4]'

    >>> import itertools
    >>> numbers = Join(", ").join(itertools.count())  # does not hang

Single use:
    A DisplayableJoin owns an iterator and drains it on its first render.
    Rendering it again writes nothing (or raises AlreadyConsumedError under
    ``FormatConfig(strict_single_use=True)``). Materialize it with ``str()``
    when the text is needed more than once.

Thread Safety:
    DisplayableJoin is not thread-safe. The borrow flag only detects
    re-entrant renders from the same thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto

from join_lazy_fmt.config import get_format_config
from join_lazy_fmt.errors import AlreadyConsumedError, ReentrantRenderError
from join_lazy_fmt.profiling import RenderAccumulator, get_render_accumulator
from join_lazy_fmt.protocols import LazyDisplay, Sink, write_display
from join_lazy_fmt.stringbuilder import StringBuilder
from join_lazy_fmt.utils.logger import get_logger

logger = get_logger(__name__)

_EMPTY = object()


class JoinState(Enum):
    """Observable lifecycle of a DisplayableJoin."""

    UNCONSUMED = auto()
    EXHAUSTED = auto()


class DisplayableJoin(LazyDisplay):
    """Lazily rendered interleaving of items and a separator.

    Returned by :meth:`Join.join`. Holds the separator by reference and owns
    the iterator derived from the joined iterable.

    The first render moves the object to ``JoinState.EXHAUSTED`` whether it
    succeeds or fails. A sink failure stops the render immediately: the items
    not yet pulled are dropped.

    """

    __slots__ = ("_borrowed", "_iterator", "_separator", "_state")

    def __init__(self, separator: object, iterable: Iterable[object]) -> None:
        self._separator = separator
        self._iterator: Iterator[object] = iter(iterable)
        self._state = JoinState.UNCONSUMED
        self._borrowed = False

    @property
    def separator(self) -> object:
        return self._separator

    @property
    def state(self) -> JoinState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is JoinState.EXHAUSTED

    def render(self, sink: Sink) -> None:
        """Drain the iterator into ``sink``, separator between items.

        Should only be called once. The second call writes nothing.

        Args:
            sink: Output destination

        Raises:
            ReentrantRenderError: If called while this join is rendering
            AlreadyConsumedError: On a second call in strict mode
        """
        self._render(sink, "")

    def _render(self, sink: Sink, format_spec: str) -> None:
        if self._borrowed:
            raise ReentrantRenderError(
                f"DisplayableJoin with separator {self._separator!r} "
                "was rendered from inside its own render"
            )

        acc = get_render_accumulator()

        if self._state is JoinState.EXHAUSTED:
            if acc is not None:
                acc.record_render(exhausted=True)
            if get_format_config().strict_single_use:
                raise AlreadyConsumedError(self._separator)
            logger.debug(
                "Rendering exhausted join with separator %r; writing nothing",
                self._separator,
            )
            return

        if acc is not None:
            acc.record_render()

        self._state = JoinState.EXHAUSTED
        self._borrowed = True
        try:
            self._drain(sink, format_spec, acc)
        finally:
            self._borrowed = False
            # Drop the remaining cursor so the iterable can be collected.
            self._iterator = iter(())

    def _drain(
        self,
        sink: Sink,
        format_spec: str,
        acc: RenderAccumulator | None,
    ) -> None:
        iterator = self._iterator
        separator = self._separator

        first = next(iterator, _EMPTY)
        if first is _EMPTY:
            return
        write_display(sink, first, format_spec)
        if acc is not None:
            acc.record_item()

        for item in iterator:
            write_display(sink, separator)
            if acc is not None:
                acc.record_separator()
            write_display(sink, item, format_spec)
            if acc is not None:
                acc.record_item()

    def __str__(self) -> str:
        sb = StringBuilder()
        self._render(sb, "")
        return sb.build()

    def __format__(self, format_spec: str) -> str:
        """Materialize, applying ``format_spec`` to every item.

        The separator is always written with its plain display.

        Example:
            >>> f"{Join(' | ').join([1, 2.5]):.1f}"
            '1.0 | 2.5'
        """
        sb = StringBuilder()
        self._render(sb, format_spec)
        return sb.build()

    def __repr__(self) -> str:
        return f"DisplayableJoin(separator={self._separator!r}, state={self._state.name})"


@dataclass(frozen=True, slots=True)
class Join:
    """Separator that can lazily join any iterable.

    Reusable: each :meth:`join` call builds an independent DisplayableJoin.
    The separator may be any displayable value, including a LazyFormat.

    Example:
        >>> str(Join("-").join(["a"]))
        'a'
        >>> str(Join(", ").join([]))
        ''

    """

    separator: object

    def join(self, iterable: Iterable[object]) -> DisplayableJoin:
        """Lazily join ``iterable`` with this separator.

        Performs no iteration: only ``iter(iterable)`` is called.
        """
        return DisplayableJoin(self.separator, iterable)


def join(separator: object, iterable: Iterable[object]) -> DisplayableJoin:
    """Function form of ``Join(separator).join(iterable)``."""
    return DisplayableJoin(separator, iterable)


__all__ = [
    "DisplayableJoin",
    "Join",
    "JoinState",
    "join",
]
