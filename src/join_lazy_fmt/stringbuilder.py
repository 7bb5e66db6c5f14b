"""StringBuilder: the sink used to materialize lazy objects.

Appends fragments to a list and joins them once at the end, so nesting
joins inside lazy formats inside joins costs a single final allocation
instead of one intermediate string per level.

Thread Safety:
StringBuilder instances are local to each str()/format() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator implementing the sink protocol.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("0")
            1
            >>> sb.append(", ").append("1")
            StringBuilder(parts=3)
            >>> sb.build()
            '0, 1'

    Thread Safety:
        Instance is local to each materialization.
        No shared mutable state.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, s: str) -> int:
        """Sink protocol entry point.

        Args:
            s: Fragment to write (empty strings are skipped)

        Returns:
            Number of characters written, like ``io.TextIOBase.write``
        """
        if s:
            self._parts.append(s)
        return len(s)

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def extend(self, strings: list[str]) -> StringBuilder:
        """Append multiple strings at once."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"StringBuilder(parts={len(self._parts)})"
