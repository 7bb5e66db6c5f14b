"""Nested lazy formats of joins — one string allocated for the whole table."""

from join_lazy_fmt import Join, lazy_format

N = 6

line = str(lazy_format("+-{}-+", Join("-+-").join("---" for _ in range(1, N))))
body = Join("\n").join(
    lazy_format(
        "| {row} |",
        row=Join(" | ").join(lazy_format("a{i}{j}", i=i, j=j) for j in range(1, N)),
    )
    for i in range(1, N)
)

print(lazy_format("{line}\n{body}\n{line}", line=line, body=body))
