"""Tests for LazyFormat and lazy_format()."""

from __future__ import annotations

import copy
import io

import pytest

from join_lazy_fmt import Join, LazyDisplay, LazyFormat, Renderable, lazy_format


class TestLazyFormat:
    """LazyFormat delegates rendering to its callable."""

    def test_render_delegates_to_callable(self) -> None:
        buf = io.StringIO()
        LazyFormat(lambda sink: sink.write("hi")).render(buf)
        assert buf.getvalue() == "hi"

    def test_render_returns_callable_result(self) -> None:
        assert LazyFormat(lambda sink: "result").render(io.StringIO()) == "result"

    def test_repeatable(self) -> None:
        fmt = LazyFormat(lambda sink: sink.write("same"))
        assert str(fmt) == "same"
        assert str(fmt) == "same"

    def test_callable_runs_on_every_render(self) -> None:
        calls: list[int] = []

        def write(sink) -> None:
            calls.append(1)
            sink.write("x")

        fmt = LazyFormat(write)
        assert calls == []
        str(fmt)
        str(fmt)
        assert len(calls) == 2

    def test_is_renderable(self) -> None:
        assert isinstance(LazyFormat(lambda sink: None), Renderable)
        assert isinstance(LazyFormat(lambda sink: None), LazyDisplay)

    def test_copy(self) -> None:
        fmt = LazyFormat(lambda sink: sink.write("c"))
        duplicate = copy.copy(fmt)
        assert duplicate == fmt
        assert str(duplicate) == "c"

    def test_inside_fstring(self) -> None:
        fmt = LazyFormat(lambda sink: sink.write("mid"))
        assert f"<{fmt}>" == "<mid>"

    def test_format_spec_rejected(self) -> None:
        with pytest.raises(TypeError):
            format(LazyFormat(lambda sink: sink.write("x")), ">5")

    def test_exception_propagates(self) -> None:
        def fail(sink) -> None:
            raise KeyError("missing")

        with pytest.raises(KeyError):
            str(LazyFormat(fail))


class TestLazyFormatTemplate:
    """lazy_format() builds a LazyFormat from a str.format template."""

    def test_positional(self) -> None:
        assert str(lazy_format("{} + {} = {}", 1, 2, 3)) == "1 + 2 = 3"

    def test_keyword_and_spec(self) -> None:
        assert str(lazy_format("{name}={0:03d}", 7, name="x")) == "x=007"

    def test_conversion(self) -> None:
        assert str(lazy_format("{!r}", "a")) == "'a'"

    def test_attribute_and_index(self) -> None:
        assert str(lazy_format("{0.real} {1[k]}", 3, {"k": "v"})) == "3 v"

    def test_nested_spec(self) -> None:
        assert str(lazy_format("[{0:>{width}}]", "a", width=3)) == "[  a]"

    def test_escaped_braces(self) -> None:
        assert str(lazy_format("{{{}}}", 1)) == "{1}"

    def test_matches_str_format(self) -> None:
        template = "{0}-{1:.2f}-{key!s:^5}"
        args = ("a", 1.5)
        assert str(lazy_format(template, *args, key="k")) == template.format(*args, key="k")

    def test_no_fields(self) -> None:
        assert str(lazy_format("plain")) == "plain"

    def test_malformed_template_fails_early(self) -> None:
        with pytest.raises(ValueError):
            lazy_format("{", 1)

    @pytest.mark.parametrize(
        "template",
        ["{} {0}", "{0} {}", "{} {0.real}", "{0.real} {}", "{} {0[k]}", "{0[k]} {}"],
    )
    def test_mixed_numbering_rejected(self, template: str) -> None:
        with pytest.raises(ValueError):
            lazy_format(template, 1, 2)

    def test_auto_field_with_attribute(self) -> None:
        assert str(lazy_format("{.real}|{}", 3, 4)) == "{.real}|{}".format(3, 4)

    @pytest.mark.parametrize(
        ("template", "args"),
        [
            ("{:>{}}", ("a", 3)),
            ("{:>{}}|{}", ("a", 3, "b")),
            ("{:{}{}}", ("a", ">", 4)),
            ("{0:>{1}}|{2}", ("a", 3, "b")),
        ],
    )
    def test_nested_auto_fields_share_numbering(self, template: str, args: tuple) -> None:
        assert str(lazy_format(template, *args)) == template.format(*args)

    def test_nested_mixed_numbering_rejected(self) -> None:
        with pytest.raises(ValueError):
            lazy_format("{:>{0}}", "a", 3)

    def test_missing_argument_fails_at_render(self) -> None:
        fmt = lazy_format("{} {}", 1)
        with pytest.raises(IndexError):
            str(fmt)

    def test_fields_are_evaluated_at_render(self) -> None:
        state = {"n": 1}
        fmt = lazy_format("{0[n]}", state)
        assert str(fmt) == "1"
        state["n"] = 2
        assert str(fmt) == "2"

    def test_repeatable(self) -> None:
        fmt = lazy_format("row {}", 4)
        assert str(fmt) == str(fmt) == "row 4"

    def test_renderable_field_streams_into_sink(self) -> None:
        writes: list[str] = []

        class Sink:
            def write(self, s: str) -> None:
                writes.append(s)

        lazy_format("[{}]", Join(", ").join(range(3))).render(Sink())
        assert writes == ["[", "0", ", ", "1", ", ", "2", "]"]


class TestComposition:
    """Nested joins and lazy formats."""

    def test_join_of_lazy_formats(self) -> None:
        items = ["x", "y"]
        joined = Join("\n").join(lazy_format("[{}]", item) for item in items)
        assert str(joined) == "[x]\n[y]"

    def test_join_of_closures(self) -> None:
        def bracket(item: str) -> LazyFormat:
            return LazyFormat(lambda sink: sink.write(f"[{item}]"))

        assert str(Join("\n").join(bracket(item) for item in ["x", "y"])) == "[x]\n[y]"

    def test_matrix(self) -> None:
        n = 6
        line = str(lazy_format("+-{}-+", Join("-+-").join("---" for _ in range(1, n))))
        body = Join("\n").join(
            lazy_format(
                "| {row} |",
                row=Join(" | ").join(lazy_format("a{i}{j}", i=i, j=j) for j in range(1, n)),
            )
            for i in range(1, n)
        )
        matrix = str(lazy_format("{line}\n{body}\n{line}\n", line=line, body=body))

        assert matrix == (
            "+-----+-----+-----+-----+-----+\n"
            "| a11 | a12 | a13 | a14 | a15 |\n"
            "| a21 | a22 | a23 | a24 | a25 |\n"
            "| a31 | a32 | a33 | a34 | a35 |\n"
            "| a41 | a42 | a43 | a44 | a45 |\n"
            "| a51 | a52 | a53 | a54 | a55 |\n"
            "+-----+-----+-----+-----+-----+\n"
        )

    def test_lazy_format_holding_join_is_single_use(self) -> None:
        fmt = lazy_format("({})", Join(",").join([1, 2]))
        assert str(fmt) == "(1,2)"
        assert str(fmt) == "()"
