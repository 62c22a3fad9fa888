"""Score aggregation across the schedule."""

from __future__ import annotations

SCORE_DIGITS = 8


def ratio(candidate_ns: int, reference_ns: int) -> float:
    if reference_ns <= 0:
        return 0.0
    return candidate_ns / reference_ns


def contribution(candidate_ns: int, reference_ns: int, schedule_len: int) -> float:
    """Per-length share of the score: ``candidate / (reference * K)``.

    A zero reference total (zero-iteration length, or a timer that never
    advanced) contributes 0.0.
    """
    if schedule_len <= 0:
        raise ValueError(f"schedule_len must be positive, got {schedule_len}")
    if reference_ns <= 0:
        return 0.0
    return float(candidate_ns) / (float(reference_ns) * schedule_len)


class ScoreAggregator:
    """Running mean of candidate/reference time ratios over ``K`` lengths."""

    def __init__(self, schedule_len: int):
        if schedule_len <= 0:
            raise ValueError(f"schedule_len must be positive, got {schedule_len}")
        self.schedule_len = schedule_len
        self.score = 0.0
        self.updates = 0

    def add(self, candidate_ns: int, reference_ns: int) -> float:
        c = contribution(candidate_ns, reference_ns, self.schedule_len)
        self.score += c
        self.updates += 1
        return c


def format_score(score: float) -> str:
    return f"{score:.{SCORE_DIGITS}f}"
