"""Core execution engine: one pass per length, three phases per pass."""

from __future__ import annotations

from typing import Callable, Iterable

from sortbench._schema import HarnessOutcome, LengthResult, LengthSpec
from sortbench.errors import MismatchError
from sortbench.schedule import DEFAULT_BUDGET, DEFAULT_LENGTHS, build_schedule
from sortbench.scoring import ScoreAggregator, ratio
from sortbench.sorters import REFERENCE, Sorter, SortFn, as_sorter
from sortbench.stream import DEFAULT_SEED, RandomStream
from sortbench.timing import time_length
from sortbench.verifier import verify_length

ProgressFn = Callable[[str, LengthSpec, LengthResult | None], None]


def run_length(
    spec: LengthSpec,
    candidate: Sorter,
    reference: Sorter,
    stream: RandomStream,
    aggregator: ScoreAggregator,
    progress: ProgressFn | None = None,
) -> LengthResult:
    if progress is not None:
        progress("verify", spec, None)
    verify_length(spec, candidate, reference, stream)

    if progress is not None:
        progress("time", spec, None)
    cand, ref = time_length(spec, candidate, reference, stream)

    contrib = aggregator.add(cand.total_ns, ref.total_ns)
    result = LengthResult(
        spec=spec,
        candidate=cand,
        reference=ref,
        ratio=ratio(cand.total_ns, ref.total_ns),
        contribution=contrib,
    )
    if progress is not None:
        progress("done", spec, result)
    return result


def run_harness(
    candidate: Sorter | SortFn,
    reference: Sorter | SortFn = REFERENCE,
    *,
    lengths: Iterable[int] = DEFAULT_LENGTHS,
    budget: int = DEFAULT_BUDGET,
    seed: int = DEFAULT_SEED,
    schedule: Iterable[LengthSpec] | None = None,
    stream: RandomStream | None = None,
    progress: ProgressFn | None = None,
) -> HarnessOutcome:
    """Evaluate ``candidate`` against ``reference`` over the whole schedule.

    Returns a ``"completed"`` outcome carrying the score, or a ``"mismatch"``
    outcome describing the first failing trial. Lengths after a mismatch are
    not run. Exceptions raised by either sorter propagate unchanged.
    """
    cand = as_sorter(candidate)
    ref = as_sorter(reference)
    specs = list(schedule) if schedule is not None else list(build_schedule(lengths, budget))
    if not specs:
        raise ValueError("schedule must contain at least one length")
    if stream is None:
        stream = RandomStream(seed)

    aggregator = ScoreAggregator(len(specs))
    outcome = HarnessOutcome(status="completed", seed=stream.seed, schedule=specs)

    try:
        for spec in specs:
            outcome.lengths.append(run_length(spec, cand, ref, stream, aggregator, progress))
    except MismatchError as e:
        outcome.status = "mismatch"
        outcome.mismatch = e.mismatch
    else:
        outcome.score = aggregator.score
    finally:
        outcome.values_drawn = stream.drawn

    return outcome
