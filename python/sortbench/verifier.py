"""Correctness phase: candidate output must equal reference output."""

from __future__ import annotations

from sortbench._schema import LengthSpec, Mismatch
from sortbench.errors import MismatchError
from sortbench.sorters import Sorter
from sortbench.stream import RandomStream


def first_difference(got: list[int], expected: list[int]) -> Mismatch | None:
    """Locate the first index where two buffers differ (trial fields unset)."""
    if got == expected:
        return None
    for i, (g, e) in enumerate(zip(got, expected)):
        if g != e:
            return Mismatch(size=len(expected), trial=-1, index=i, expected=e, got=g)
    # Same prefix, different length.
    i = min(len(got), len(expected))
    return Mismatch(
        size=len(expected),
        trial=-1,
        index=i,
        expected=expected[i] if i < len(expected) else None,
        got=got[i] if i < len(got) else None,
    )


def verify_trial(
    spec: LengthSpec,
    trial: int,
    candidate: Sorter,
    reference: Sorter,
    stream: RandomStream,
) -> None:
    candidate_buf = stream.draw(spec.size)
    reference_buf = list(candidate_buf)

    candidate.sort(candidate_buf)
    reference.sort(reference_buf)

    diff = first_difference(candidate_buf, reference_buf)
    if diff is not None:
        diff.size = spec.size
        diff.trial = trial
        raise MismatchError(diff)


def verify_length(
    spec: LengthSpec,
    candidate: Sorter,
    reference: Sorter,
    stream: RandomStream,
) -> int:
    """Run every correctness trial for one length.

    Raises MismatchError on the first disagreement. Returns the number of
    trials verified.
    """
    for trial in range(spec.iterations):
        verify_trial(spec, trial, candidate, reference, stream)
    return spec.iterations
