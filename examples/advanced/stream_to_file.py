"""Stream a large join straight into a file, no intermediate string."""

import itertools
import tempfile

from join_lazy_fmt import Join
from join_lazy_fmt.profiling import profiled_render

squares = (n * n for n in itertools.count())

with tempfile.TemporaryFile("w+") as f, profiled_render() as metrics:
    Join("\n").join(itertools.islice(squares, 100_000)).render(f)
    f.seek(0)
    print("First lines:", f.readline().strip(), f.readline().strip(), f.readline().strip())

print(metrics.summary())
