"""
sortbench: correctness and relative-speed harness for integer sorts.

A candidate sort (any callable that sorts a ``list[int]`` in place) is run
against ``list.sort`` over a fixed schedule of input lengths:

- every length first runs a correctness phase; the first output that differs
  from the reference ends the run
- then the candidate and the reference are timed on fresh random inputs
- the score is the mean over all lengths of candidate time / reference time,
  so values below 1.0 mean the candidate is faster

All input data comes from one seeded MT19937 stream, so two runs with the
same seed sort exactly the same inputs.

Example:
    >>> from sortbench import run_harness
    >>>
    >>> def fast_sort(values):
    ...     values.sort()
    >>>
    >>> outcome = run_harness(fast_sort, lengths=[1, 10, 100], budget=10_000)
    >>> outcome.status
    'completed'
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("sortbench")
except Exception:
    __version__ = "0+unknown"

from sortbench._schema import (
    SENTINEL_FAILURE,
    HarnessOutcome,
    LengthResult,
    LengthSpec,
    Measurement,
    Mismatch,
)
from sortbench.errors import MismatchError, SortbenchError, SorterLoadError
from sortbench.harness import run_harness, run_length
from sortbench.schedule import DEFAULT_BUDGET, DEFAULT_LENGTHS, build_schedule, iteration_count
from sortbench.scoring import ScoreAggregator, contribution, format_score
from sortbench.sorters import REFERENCE, Sorter, as_sorter, load_sorter
from sortbench.stream import DEFAULT_SEED, RandomStream
from sortbench.timing import time_length, time_sorter
from sortbench.verifier import verify_length

__all__ = [
    "DEFAULT_BUDGET",
    "DEFAULT_LENGTHS",
    "DEFAULT_SEED",
    "REFERENCE",
    "SENTINEL_FAILURE",
    "HarnessOutcome",
    "LengthResult",
    "LengthSpec",
    "Measurement",
    "Mismatch",
    "MismatchError",
    "RandomStream",
    "ScoreAggregator",
    "SortbenchError",
    "Sorter",
    "SorterLoadError",
    "as_sorter",
    "build_schedule",
    "contribution",
    "format_score",
    "iteration_count",
    "load_sorter",
    "run_harness",
    "run_length",
    "time_length",
    "time_sorter",
    "verify_length",
]
