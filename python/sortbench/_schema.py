"""Schema/types for sortbench harness runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

Variant = Literal["candidate", "reference"]
OutcomeStatus = Literal["completed", "mismatch"]

SENTINEL_FAILURE = -1


@dataclass(frozen=True)
class LengthSpec:
    size: int
    iterations: int


@dataclass
class Measurement:
    size: int
    variant: Variant
    trials: int = 0
    total_ns: int = 0

    @property
    def mean_ns(self) -> float:
        return self.total_ns / self.trials if self.trials > 0 else 0.0


@dataclass
class LengthResult:
    spec: LengthSpec
    candidate: Measurement
    reference: Measurement
    ratio: float
    contribution: float


@dataclass
class Mismatch:
    size: int
    trial: int
    index: int
    expected: int | None
    got: int | None

    def describe(self) -> str:
        return (
            f"length={self.size} trial={self.trial}: first difference at index {self.index} "
            f"(expected {self.expected}, got {self.got})"
        )


@dataclass
class HarnessOutcome:
    status: OutcomeStatus
    seed: int
    schedule: list[LengthSpec]
    lengths: list[LengthResult] = field(default_factory=list)
    score: float | None = None
    mismatch: Mismatch | None = None
    values_drawn: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "completed"

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def to_dict(obj: Any) -> Any:
    """Convert dataclass/object tree to plain JSON-serializable structures."""
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    return obj
