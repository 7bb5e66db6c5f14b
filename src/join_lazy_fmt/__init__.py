"""
join_lazy_fmt — Lazy join and deferred formatting for Python

``separator.join(iterable)`` that neither iterates nor allocates until the
result is written, plus LazyFormat to turn any formatting callable into a
value that composes with it.

Quick Start:
    >>> from join_lazy_fmt import Join, lazy_format
    >>> f"[{Join(', ').join(range(5))}]"
    '[0, 1, 2, 3, 4]'

    >>> # Nested composition allocates a single string at the end
    >>> table = Join("\\n").join(
    ...     lazy_format("| {} |", Join(" | ").join(range(i, i + 3)))
    ...     for i in (1, 4)
    ... )
    >>> print(table)
    | 1 | 2 | 3 |
    | 4 | 5 | 6 |

    >>> # Stream into any writable sink
    >>> import sys
    >>> Join(" ").join(["a", "b"]).render(sys.stdout)
    a b

Single use:
    A DisplayableJoin drains its iterator on the first render and renders
    nothing afterwards. Use ``str()`` to keep the text.

Installation:
    pip install join-lazy-fmt        # zero runtime dependencies
"""

from join_lazy_fmt.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from join_lazy_fmt.errors import AlreadyConsumedError, LazyFmtError, ReentrantRenderError
from join_lazy_fmt.formatting import LazyFormat, lazy_format
from join_lazy_fmt.joining import DisplayableJoin, Join, JoinState, join
from join_lazy_fmt.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from join_lazy_fmt.protocols import LazyDisplay, Renderable, Sink, write_display
from join_lazy_fmt.stringbuilder import StringBuilder

__version__ = "0.9.2"

__all__ = [
    "AlreadyConsumedError",
    "DisplayableJoin",
    "FormatConfig",
    "Join",
    "JoinState",
    "LazyDisplay",
    "LazyFmtError",
    "LazyFormat",
    "ReentrantRenderError",
    "RenderAccumulator",
    "Renderable",
    "Sink",
    "StringBuilder",
    "__version__",
    "format_config_context",
    "get_format_config",
    "get_render_accumulator",
    "join",
    "lazy_format",
    "profiled_render",
    "reset_format_config",
    "set_format_config",
    "write_display",
]
