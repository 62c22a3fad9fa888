"""Reporting helpers for harness run artifacts."""

from __future__ import annotations

import json
import os
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

import psutil

from sortbench._schema import HarnessOutcome, to_dict
from sortbench.scoring import format_score

SCHEMA_VERSION = "sortbench_v1"


def get_system_info() -> dict[str, Any]:
    """Capture system information for benchmark context."""
    info: dict[str, Any] = {
        "python_version": sys.version,
        "platform": platform.platform(),
        "processor": platform.processor(),
        "cpu_count": os.cpu_count(),
        "machine": platform.machine(),
        "psutil_version": psutil.__version__,
    }
    try:
        vm = psutil.virtual_memory()
    except OSError:
        return info
    info.update(
        {
            "mem_total_gb": round(vm.total / (1024 ** 3), 2),
            "mem_available_gb": round(vm.available / (1024 ** 3), 2),
            "mem_percent": vm.percent,
        }
    )
    return info


def build_payload(
    outcome: HarnessOutcome,
    candidate_name: str,
    reference_name: str,
    config: dict[str, Any],
) -> dict[str, Any]:
    lengths = []
    for r in outcome.lengths:
        lengths.append(
            {
                "size": r.spec.size,
                "iterations": r.spec.iterations,
                "candidate_ns": r.candidate.total_ns,
                "reference_ns": r.reference.total_ns,
                "candidate_mean_ns": r.candidate.mean_ns,
                "reference_mean_ns": r.reference.mean_ns,
                "ratio": r.ratio,
                "contribution": r.contribution,
            }
        )

    return {
        "schema_version": SCHEMA_VERSION,
        "timestamp": datetime.now().isoformat(),
        "platform": platform.platform(),
        "python_version": sys.version,
        "system": get_system_info(),
        "config": config,
        "candidate": candidate_name,
        "reference": reference_name,
        "status": outcome.status,
        "exit_code": outcome.exit_code,
        "score": outcome.score,
        "score_text": format_score(outcome.score) if outcome.score is not None else None,
        "mismatch": to_dict(outcome.mismatch) if outcome.mismatch is not None else None,
        "values_drawn": outcome.values_drawn,
        "schedule": [to_dict(s) for s in outcome.schedule],
        "lengths": lengths,
    }


def write_json_report(payload: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def build_markdown_report(payload: dict[str, Any]) -> str:
    ts = payload.get("timestamp", datetime.now().isoformat())
    system = payload.get("system", {})
    config = payload.get("config", {})

    lines: list[str] = []
    lines.append("# Sort Benchmark Report")
    lines.append("")
    lines.append(f"- Timestamp: `{ts}`")
    lines.append(f"- Profile: `{config.get('profile', 'unknown')}`")
    lines.append(f"- Candidate: `{payload.get('candidate', 'unknown')}`")
    lines.append(f"- Reference: `{payload.get('reference', 'unknown')}`")
    lines.append(f"- Seed: `{config.get('seed', 'unknown')}`")
    lines.append(f"- Platform: `{payload.get('platform', 'unknown')}`")
    lines.append(f"- CPU Count: `{system.get('cpu_count', 'unknown')}`")
    lines.append("")

    lines.append("## Result")
    lines.append("")
    if payload.get("status") == "completed":
        lines.append("- Status: `PASS`")
        lines.append(f"- Score: `{payload.get('score_text')}`")
    else:
        mm = payload.get("mismatch") or {}
        lines.append("- Status: `FAIL`")
        lines.append(
            f"- Mismatch: length `{mm.get('size')}`, trial `{mm.get('trial')}`, index `{mm.get('index')}` "
            f"(expected `{mm.get('expected')}`, got `{mm.get('got')}`)"
        )
    lines.append("")

    lines.append("## Lengths")
    lines.append("")
    lines.append("| Length | Iterations | Candidate (ns) | Reference (ns) | Ratio | Contribution |")
    lines.append("|---:|---:|---:|---:|---:|---:|")
    for r in payload.get("lengths", []):
        lines.append(
            f"| {r.get('size')} | {r.get('iterations'):,} | {r.get('candidate_ns'):,} | {r.get('reference_ns'):,} "
            f"| {r.get('ratio', 0.0):.4f} | {r.get('contribution', 0.0):.8f} |"
        )
    lines.append("")
    return "\n".join(lines)


def write_markdown_report(payload: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_markdown_report(payload), encoding="utf-8")
