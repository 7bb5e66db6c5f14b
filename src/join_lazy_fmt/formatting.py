"""LazyFormat: deferred formatting logic as a renderable value.

A LazyFormat wraps a callable ``func(sink)`` that writes text into a sink.
Nothing runs until the LazyFormat is rendered, and because it keeps no
cursor it can be rendered any number of times.

``lazy_format()`` builds one from a ``str.format`` template. Literal text and
fields are written piecewise at render time, so a field holding a join or
another LazyFormat streams straight into the final sink:

    >>> from join_lazy_fmt import Join, lazy_format
    >>> rows = Join("\\n").join(
    ...     lazy_format("| {} |", Join(" | ").join(f"a{i}{j}" for j in range(1, 3)))
    ...     for i in range(1, 3)
    ... )
    >>> print(rows)
    | a11 | a12 |
    | a21 | a22 |

"""

from __future__ import annotations

import re
import string
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from join_lazy_fmt.protocols import LazyDisplay, Sink, write_display
from join_lazy_fmt.stringbuilder import StringBuilder

_FORMATTER = string.Formatter()

# (literal_text, field_name, format_spec, conversion) with auto-numbered
# field names already resolved.
_Field = tuple[str, str | None, str, str | None]


@dataclass(frozen=True, slots=True)
class LazyFormat(LazyDisplay):
    """Renderable wrapper around a formatting callable.

    Attributes:
        func: Callable receiving the sink. Its return value is passed back
            verbatim by :meth:`render`; exceptions propagate unchanged.

    Example:
        >>> greeting = LazyFormat(lambda sink: sink.write("hello"))
        >>> str(greeting), str(greeting)
        ('hello', 'hello')

    """

    func: Callable[[Sink], object]

    def render(self, sink: Sink) -> object:
        return self.func(sink)

    def __str__(self) -> str:
        sb = StringBuilder()
        self.func(sb)
        return sb.build()

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            raise TypeError(
                f"unsupported format string passed to {type(self).__name__}.__format__"
            )
        return str(self)


class _FieldNumbering:
    """Resolves ``{}`` to positional indexes the way ``str.format`` does."""

    __slots__ = ("_next",)

    def __init__(self) -> None:
        # int while auto-numbering, False once a manual index was seen
        self._next: int | bool = 0

    def resolve(self, field_name: str) -> str:
        """Return ``field_name`` with an automatic index made explicit.

        Raises:
            ValueError: On mixed automatic and manual numbering
        """
        first = re.split(r"[.\[]", field_name, maxsplit=1)[0]

        if first == "":
            if self._next is False:
                raise ValueError(
                    "cannot switch from manual field specification to automatic field numbering"
                )
            index = self._next
            self._next += 1
            return f"{index}{field_name}"

        if first.isdigit():
            if self._next:
                raise ValueError(
                    "cannot switch from automatic field numbering to manual field specification"
                )
            self._next = False
        return field_name

    def resolve_spec(self, format_spec: str) -> str:
        """Rewrite the replacement fields nested in ``format_spec``."""
        if "{" not in format_spec:
            return format_spec
        parts: list[str] = []
        for literal, field_name, spec, conversion in _FORMATTER.parse(format_spec):
            parts.append(literal.replace("{", "{{").replace("}", "}}"))
            if field_name is None:
                continue
            parts.append("{" + self.resolve(field_name))
            if conversion:
                parts.append("!" + conversion)
            if spec:
                parts.append(":" + spec)
            parts.append("}")
        return "".join(parts)


def _parse_template(template: str) -> tuple[_Field, ...]:
    """Split ``template`` and resolve ``{}`` to positional indexes.

    Fields nested in a format spec share the numbering of the template.

    Raises:
        ValueError: On a malformed template or mixed auto/manual numbering
    """
    fields: list[_Field] = []
    numbering = _FieldNumbering()

    for literal, field_name, format_spec, conversion in _FORMATTER.parse(template):
        if field_name is None:
            fields.append((literal, None, "", None))
            continue
        field_name = numbering.resolve(field_name)
        format_spec = numbering.resolve_spec(format_spec or "")
        fields.append((literal, field_name, format_spec, conversion))

    return tuple(fields)


def lazy_format(template: str, /, *args: Any, **kwargs: Any) -> LazyFormat:
    """Build a LazyFormat from a ``str.format`` template.

    Fields are looked up and formatted on every render, never at
    construction. LazyDisplay field values without conversion or format spec
    are rendered directly into the sink.

    Args:
        template: Format string, same syntax as ``str.format``
        *args: Positional field values
        **kwargs: Keyword field values

    Returns:
        A repeatable LazyFormat, provided its arguments render repeatably
        (a DisplayableJoin argument is still single-use).

    Raises:
        ValueError: If the template is malformed

    Example:
        >>> str(lazy_format("{name}={0:03d}", 7, name="x"))
        'x=007'
    """
    fields = _parse_template(template)

    def write(sink: Sink) -> None:
        for literal, field_name, format_spec, conversion in fields:
            if literal:
                sink.write(literal)
            if field_name is None:
                continue
            value, _ = _FORMATTER.get_field(field_name, args, kwargs)
            if conversion:
                value = _FORMATTER.convert_field(value, conversion)
            if "{" in format_spec:
                format_spec = _FORMATTER.vformat(format_spec, args, kwargs)
            write_display(sink, value, format_spec)

    return LazyFormat(write)


__all__ = [
    "LazyFormat",
    "lazy_format",
]
