"""Command-line driver for the sort benchmark harness.

stdout carries exactly one line: the score with 8 decimals on success, or
the sentinel ``-1`` when the candidate produced a wrong result. Progress
and diagnostics go to stderr.

Exit codes: 0 completed, 1 correctness mismatch, 2 usage/config error.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from sortbench._schema import SENTINEL_FAILURE, LengthResult, LengthSpec
from sortbench.errors import SorterLoadError
from sortbench.harness import run_harness
from sortbench.profiles import PROFILE_NAMES, BenchmarkProfile, default_profile, load_custom_profile, profile_to_dict
from sortbench.report import build_payload, write_json_report, write_markdown_report
from sortbench.schedule import build_schedule, parse_lengths
from sortbench.scoring import format_score
from sortbench.sorters import DEFAULT_ATTRIBUTE, REFERENCE, load_sorter

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_USAGE = 2


def _log(msg: str) -> None:
    print(f"[sortbench] {msg}", file=sys.stderr)


def _resolve_profile(args: argparse.Namespace) -> BenchmarkProfile:
    if args.profile == "custom" and args.config is not None:
        profile = load_custom_profile(Path(args.config))
    else:
        if args.config is not None:
            _log(f"warning: --config ignored without --profile custom (profile={args.profile})")
        profile = default_profile(args.profile)

    if args.lengths:
        profile.lengths = list(parse_lengths(args.lengths))
    if args.budget is not None:
        profile.budget = args.budget
    if args.seed is not None:
        profile.seed = args.seed
    profile.validate()
    return profile


def _progress(phase: str, spec: LengthSpec, result: LengthResult | None) -> None:
    if phase == "verify":
        _log(f"length={spec.size} iterations={spec.iterations}: verifying")
    elif phase == "done" and result is not None:
        _log(
            f"length={spec.size} candidate_ns={result.candidate.total_ns} "
            f"reference_ns={result.reference.total_ns} ratio={result.ratio:.4f}"
        )


def run(args: argparse.Namespace) -> tuple[int, dict[str, Any] | None]:
    try:
        profile = _resolve_profile(args)
        candidate = load_sorter(args.candidate, default_attribute=args.attribute)
    except (ValueError, OSError, SorterLoadError) as e:
        _log(f"error: {e}")
        return EXIT_USAGE, None

    schedule = build_schedule(profile.lengths, profile.budget)
    if args.verbose:
        _log(f"candidate={candidate.name} reference={REFERENCE.name} profile={profile.name} seed={profile.seed}")

    outcome = run_harness(
        candidate,
        REFERENCE,
        schedule=schedule,
        seed=profile.seed,
        progress=_progress if args.verbose else None,
    )

    if outcome.ok:
        print(format_score(outcome.score))
    else:
        print(SENTINEL_FAILURE)
        _log(f"correctness mismatch: {outcome.mismatch.describe()}")

    payload = None
    if args.export_json or args.export_md:
        config = profile_to_dict(profile)
        config["profile"] = config.pop("name")
        payload = build_payload(outcome, candidate.name, REFERENCE.name, config)
        if args.export_json:
            write_json_report(payload, Path(args.export_json))
            if args.verbose:
                _log(f"JSON exported: {args.export_json}")
        if args.export_md:
            write_markdown_report(payload, Path(args.export_md))
            if args.verbose:
                _log(f"Markdown exported: {args.export_md}")

    return (EXIT_OK if outcome.ok else EXIT_MISMATCH), payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Check a candidate sort against list.sort and score its relative speed",
    )
    parser.add_argument("candidate", help="Candidate sort: FILE.py, FILE.py:FUNC or MODULE:FUNC")
    parser.add_argument("--attribute", default=DEFAULT_ATTRIBUTE,
                        help=f"Function name used when the reference has no ':FUNC' (default: {DEFAULT_ATTRIBUTE})")
    parser.add_argument("--profile", choices=PROFILE_NAMES, default="reference")
    parser.add_argument("--config", type=str, help="Path to custom profile JSON config")
    parser.add_argument("--lengths", type=str, help="Comma-separated length schedule override")
    parser.add_argument("--budget", type=int, default=None, help="Per-length element budget override")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--export-json", type=str, default=None)
    parser.add_argument("--export-md", type=str, default=None)
    parser.add_argument("--verbose", action="store_true", help="Print per-length progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    code, _payload = run(args)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
