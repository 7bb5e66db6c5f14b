"""Protocols for join_lazy_fmt.

Defines the two contracts every lazy object is built on: the sink it writes
into and the render protocol it implements. ``write_display`` is the single
dispatch point that writes any value, lazy or not, into a sink.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Destination accepting sequential text fragments.

    ``io.StringIO``, ``sys.stdout``, open text files and
    :class:`~join_lazy_fmt.stringbuilder.StringBuilder` all conform.
    A write failure is signalled by raising; callers never catch it.

    """

    def write(self, s: str, /) -> object:
        """Write one fragment."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """Structural type of values that stream themselves into a sink.

    For static typing only: runtime dispatch uses :class:`LazyDisplay`.

    Thread Safety:
        Implementations decide. ``LazyFormat`` is stateless; ``DisplayableJoin``
        is single-use and must not be shared between threads.

    """

    def render(self, sink: Sink) -> object:
        """Write this value's text representation into ``sink``.

        Args:
            sink: Output destination

        Returns:
            Implementation defined; exceptions signal failure.

        """
        ...


class LazyDisplay(ABC):
    """Nominal base for values that stream themselves into a sink.

    ``write_display`` only calls ``render(sink)`` on instances of this class.
    Having a ``render`` method is not enough: template and page objects often
    define one with an unrelated meaning, and those are displayed with
    ``format()`` like any other value. Third-party renderables opt in by
    subclassing or with ``LazyDisplay.register(cls)``.

    """

    __slots__ = ()

    @abstractmethod
    def render(self, sink: Sink) -> object:
        """Write this value's text representation into ``sink``."""
        ...


def write_display(sink: Sink, value: object, format_spec: str = "") -> None:
    """Write ``value`` into ``sink``.

    LazyDisplay values stream directly into the sink when no format spec is
    requested. Everything else goes through ``format(value, format_spec)``,
    i.e. the value's own display mechanism, in one write. Only exact ``str``
    instances skip ``format()``; subclasses keep their own ``__format__``.

    Args:
        sink: Output destination
        value: Any displayable or renderable value
        format_spec: Format spec forwarded to ``format()``

    Example:
        >>> import io
        >>> buf = io.StringIO()
        >>> write_display(buf, 3.14159, ".2f")
        >>> buf.getvalue()
        '3.14'
    """
    if format_spec:
        sink.write(format(value, format_spec))
    elif type(value) is str:
        sink.write(value)
    elif isinstance(value, LazyDisplay):
        value.render(sink)
    else:
        sink.write(format(value, format_spec))


__all__ = [
    "LazyDisplay",
    "Renderable",
    "Sink",
    "write_display",
]
