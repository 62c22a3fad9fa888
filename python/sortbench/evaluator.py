#!/usr/bin/env python3
"""Evaluate a directory of candidate solutions with the harness.

Each solution ``<id>.py`` is run through ``python -m sortbench <path>`` in a
subprocess; the first stdout line is its score, anything after it is kept as
a comment. Results are stored next to the solution as ``<id>.meta.json`` and
solutions that already carry metadata are not re-run.

Lower scores are better (the score is candidate time over reference time).
Failed solutions are recorded with score ``-1`` (wrong output) or ``-inf``
(could not be evaluated) and never count as best.
"""

from __future__ import annotations

import argparse
import json
import math
import shlex
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sortbench._schema import SENTINEL_FAILURE

DEFAULT_EXTENSION = ".py"
META_SUFFIX = ".meta.json"
DEFAULT_TIMEOUT_S = 3600


@dataclass
class SolutionMeta:
    score: float
    comment: str = ""


@dataclass
class Solution:
    solution_id: str
    path: Path
    meta: SolutionMeta | None = None

    @property
    def meta_path(self) -> Path:
        return self.path.with_name(self.solution_id + META_SUFFIX)


def default_command(python_exe: str = sys.executable) -> list[str]:
    return [python_exe, "-m", "sortbench"]


def is_valid_score(score: float) -> bool:
    return math.isfinite(score) and score >= 0.0


def parse_result(text: str) -> tuple[float, str]:
    """Split harness output into ``(score, comment)``.

    The first line must be a float; the rest, trimmed, is the comment.
    """
    first, sep, rest = text.partition("\n")
    try:
        score = float(first.strip())
    except ValueError as e:
        return -math.inf, f"parse score failed: {e}"
    if not sep:
        return score, ""
    return score, rest.strip(" \n")


def evaluate_solution(
    path: Path,
    command: list[str] | None = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
) -> SolutionMeta:
    cmd = list(command if command is not None else default_command()) + [str(path)]
    try:
        proc = subprocess.run(
            cmd,
            text=True,
            capture_output=True,
            check=False,
            timeout=timeout_s,
        )
    except subprocess.TimeoutExpired:
        return SolutionMeta(score=-math.inf, comment=f"evaluation timed out after {timeout_s}s")
    except OSError as e:
        return SolutionMeta(score=-math.inf, comment=f"run evaluator failed: {e}")

    score, comment = parse_result(proc.stdout)
    if proc.returncode != 0:
        if score == SENTINEL_FAILURE:
            return SolutionMeta(score=float(SENTINEL_FAILURE), comment=comment or "correctness mismatch")
        detail = proc.stderr.strip().splitlines()[-1:] or [""]
        return SolutionMeta(
            score=-math.inf,
            comment=f"run evaluator failed: exit status {proc.returncode} {detail[0]}".rstrip(),
        )
    return SolutionMeta(score=score, comment=comment)


def _load_meta(path: Path) -> SolutionMeta:
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    return SolutionMeta(score=float(raw["score"]), comment=str(raw.get("comment", "")))


def save_meta(solution: Solution) -> None:
    if solution.meta is None:
        raise ValueError(f"solution {solution.solution_id} has no metadata")
    # json.dump writes -inf as "-Infinity", which json.load reads back.
    payload = {"score": solution.meta.score, "comment": solution.meta.comment}
    solution.meta_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def load_solutions(directory: Path, extension: str = DEFAULT_EXTENSION) -> list[Solution]:
    out: list[Solution] = []
    for path in sorted(directory.iterdir()):
        if not path.is_file() or not path.name.endswith(extension):
            continue
        solution_id = path.name[: -len(extension)]
        solution = Solution(solution_id=solution_id, path=path)
        if solution.meta_path.exists():
            try:
                solution.meta = _load_meta(solution.meta_path)
            except (OSError, ValueError, KeyError) as e:
                print(f"[evaluate] warning: load solution {solution_id} meta failed: {e}", file=sys.stderr)
        out.append(solution)
    return out


def best_solution(solutions: list[Solution]) -> Solution | None:
    scored = [s for s in solutions if s.meta is not None and is_valid_score(s.meta.score)]
    if not scored:
        return None
    return min(scored, key=lambda s: s.meta.score)  # type: ignore[union-attr]


def evaluate_directory(
    directory: Path,
    command: list[str] | None = None,
    extension: str = DEFAULT_EXTENSION,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    force: bool = False,
) -> list[Solution]:
    solutions = load_solutions(directory, extension)
    for solution in solutions:
        if solution.meta is not None and not force:
            continue
        print(f"[evaluate] running {solution.solution_id}", file=sys.stderr)
        solution.meta = evaluate_solution(solution.path, command, timeout_s)
        print(
            f"[evaluate] solution {solution.solution_id} score {solution.meta.score} "
            f'comment "{solution.meta.comment}"',
            file=sys.stderr,
        )
        save_meta(solution)
    return solutions


def summarize(solutions: list[Solution]) -> dict[str, Any]:
    best = best_solution(solutions)
    return {
        "solutions": [
            {
                "id": s.solution_id,
                "score": s.meta.score if s.meta is not None else None,
                "comment": s.meta.comment if s.meta is not None else None,
            }
            for s in solutions
        ],
        "best": best.solution_id if best is not None else None,
        "best_score": best.meta.score if best is not None and best.meta is not None else None,
    }


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sortbench-evaluate",
        description="Score every candidate solution in a directory",
    )
    parser.add_argument("directory", type=str)
    parser.add_argument("--extension", type=str, default=DEFAULT_EXTENSION)
    parser.add_argument("--command", type=str, default=None,
                        help="Evaluator command line; the solution path is appended (default: python -m sortbench)")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_S)
    parser.add_argument("--force", action="store_true", help="Re-evaluate solutions that already have metadata")
    parser.add_argument("--export-json", type=str, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"[evaluate] error: not a directory: {directory}", file=sys.stderr)
        return 2

    solutions = evaluate_directory(
        directory,
        command=shlex.split(args.command) if args.command else None,
        extension=args.extension,
        timeout_s=args.timeout,
        force=args.force,
    )
    summary = summarize(solutions)

    if args.export_json:
        out = Path(args.export_json)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(summary, indent=2) + "\n", encoding="utf-8")

    print(f"[evaluate] solutions={len(solutions)} best={summary['best']}", file=sys.stderr)
    if summary["best"] is None:
        return 2
    print(f"{summary['best']} {summary['best_score']:.8f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
