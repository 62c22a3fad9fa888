"""Harness profile definitions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sortbench.schedule import DEFAULT_BUDGET, DEFAULT_LENGTHS, build_schedule
from sortbench.stream import DEFAULT_SEED

QUICK_BUDGET = 100_000

PROFILE_NAMES = ("reference", "quick", "custom")


@dataclass
class BenchmarkProfile:
    name: str
    lengths: list[int]
    budget: int
    seed: int

    def validate(self) -> None:
        # Raises ValueError on bad lengths/budget.
        build_schedule(self.lengths, self.budget)


def default_profile(profile_name: str) -> BenchmarkProfile:
    if profile_name == "quick":
        return BenchmarkProfile(
            name="quick",
            lengths=list(DEFAULT_LENGTHS),
            budget=QUICK_BUDGET,
            seed=DEFAULT_SEED,
        )
    if profile_name in ("reference", "custom"):
        # custom falls back to the reference run unless a config file is given
        return BenchmarkProfile(
            name=profile_name,
            lengths=list(DEFAULT_LENGTHS),
            budget=DEFAULT_BUDGET,
            seed=DEFAULT_SEED,
        )
    raise ValueError(f"unknown profile {profile_name!r} (expected one of {', '.join(PROFILE_NAMES)})")


def load_custom_profile(config_path: Path) -> BenchmarkProfile:
    with config_path.open(encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: profile config must be a JSON object")

    try:
        profile = BenchmarkProfile(
            name=str(raw.get("name", "custom")),
            lengths=[int(n) for n in raw.get("lengths", DEFAULT_LENGTHS)],
            budget=int(raw.get("budget", DEFAULT_BUDGET)),
            seed=int(raw.get("seed", DEFAULT_SEED)),
        )
        profile.validate()
    except (TypeError, ValueError) as e:
        raise ValueError(f"{config_path}: invalid profile config: {e}") from e
    return profile


def profile_to_dict(profile: BenchmarkProfile) -> dict[str, Any]:
    return {
        "name": profile.name,
        "lengths": profile.lengths,
        "budget": profile.budget,
        "seed": profile.seed,
    }
