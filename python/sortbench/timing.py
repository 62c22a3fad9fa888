"""Timing phase: summed wall-clock cost of single sort calls."""

from __future__ import annotations

import time

from sortbench._schema import LengthSpec, Measurement, Variant
from sortbench.sorters import Sorter
from sortbench.stream import RandomStream


def time_sorter(
    spec: LengthSpec,
    sorter: Sorter,
    stream: RandomStream,
    variant: Variant,
) -> Measurement:
    m = Measurement(size=spec.size, variant=variant)
    clock = time.perf_counter_ns
    for _ in range(spec.iterations):
        # Fill stays outside the timed interval.
        sample = stream.draw(spec.size)
        t0 = clock()
        sorter.sort(sample)
        t1 = clock()
        m.total_ns += t1 - t0
        m.trials += 1
    return m


def time_length(
    spec: LengthSpec,
    candidate: Sorter,
    reference: Sorter,
    stream: RandomStream,
) -> tuple[Measurement, Measurement]:
    """Time all candidate trials, then all reference trials."""
    cand = time_sorter(spec, candidate, stream, "candidate")
    ref = time_sorter(spec, reference, stream, "reference")
    return cand, ref
