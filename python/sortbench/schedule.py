"""Size schedule: the ordered input lengths and their iteration counts."""

from __future__ import annotations

from typing import Iterable

from sortbench._schema import LengthSpec

DEFAULT_LENGTHS = (1, 2, 5, 10, 100, 1000, 10000, 100000, 1000000)
DEFAULT_BUDGET = 10_000_000


def iteration_count(size: int, budget: int = DEFAULT_BUDGET) -> int:
    """Number of trials for ``size``: ``budget // size``.

    Both operands are positive, so floor and truncation toward zero agree.
    Sizes larger than the budget get zero trials.
    """
    if size <= 0:
        raise ValueError(f"length must be positive, got {size}")
    if budget < 0:
        raise ValueError(f"budget must be non-negative, got {budget}")
    return budget // size


def build_schedule(
    lengths: Iterable[int] = DEFAULT_LENGTHS,
    budget: int = DEFAULT_BUDGET,
) -> tuple[LengthSpec, ...]:
    schedule = tuple(LengthSpec(size=int(n), iterations=iteration_count(int(n), budget)) for n in lengths)
    if not schedule:
        raise ValueError("schedule must contain at least one length")
    return schedule


def parse_lengths(text: str) -> tuple[int, ...]:
    """Parse a comma-separated length list such as ``"1,10,1000"``."""
    out: list[int] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            out.append(int(part))
        except ValueError:
            raise ValueError(f"invalid length {part!r}") from None
    if not out:
        raise ValueError("no lengths given")
    return tuple(out)
