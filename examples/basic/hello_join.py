"""Lazy join in 3 lines — nothing is formatted until print()."""

from join_lazy_fmt import Join

numbers = Join(", ").join(range(5))
print(f"[{numbers}]")
