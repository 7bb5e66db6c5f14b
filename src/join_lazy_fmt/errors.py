"""Exception classes for join_lazy_fmt.

Failures raised by a sink while writing are never wrapped: they propagate
to the caller of ``render()`` exactly as the sink raised them. The classes
below only cover misuse of single-use join objects.
"""

from __future__ import annotations


class LazyFmtError(Exception):
    """Base exception for all join_lazy_fmt errors."""

    pass


class AlreadyConsumedError(LazyFmtError):
    """A DisplayableJoin was rendered a second time in strict mode.

    Only raised when ``FormatConfig.strict_single_use`` is enabled. By default
    a second render silently writes nothing.
    """

    def __init__(self, separator: object) -> None:
        """Initialize with the separator of the exhausted join.

        Args:
            separator: Separator of the join that was already rendered
        """
        self.separator = separator
        super().__init__(
            f"DisplayableJoin with separator {separator!r} was already rendered; "
            "materialize it with str() if it must be written more than once"
        )


class ReentrantRenderError(LazyFmtError):
    """A DisplayableJoin was rendered again while its render was in progress.

    Happens when an item or the separator renders the join that contains it.
    """

    pass
