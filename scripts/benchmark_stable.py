#!/usr/bin/env python3
"""
Declension throughput benchmark with a median gate.

Every measurement runs in a fresh subprocess with a fixed PYTHONHASHSEED.
The parent collects one JSON line per run and prints median/mean/CV of
full names declined per second. `--min-median-names-per-sec` turns the run
into a CI gate. Run it against an installed package (`pip install -e .`).
"""

from __future__ import annotations

import argparse
import gc
import json
import os
import random
import statistics
import subprocess
import sys
import time

from namecase import NameCaseEngine
from namecase.languages.russian_data import MAN_GIVEN_NAMES, WOMAN_GIVEN_NAMES

_MAN_FAMILY_STEMS = ["иван", "петр", "смирн", "кузнец", "поп", "сокол", "волк", "козл", "новик", "мороз"]
_PATRONYMIC_STEMS = ["ивано", "петро", "сергее", "андрее", "николае", "алексее", "дмитрие", "павло"]
_INDECLINABLE = ["Шевченко", "Черных", "Джугашвили", "Живаго", "Мельник", "Отто"]


def build_names(count: int, seed: int) -> list[str]:
    """Deterministic mix of full names, single words and indeclinables."""
    rng = random.Random(seed)
    men = sorted(MAN_GIVEN_NAMES)
    women = sorted(WOMAN_GIVEN_NAMES)
    names = []
    for index in range(count):
        family = rng.choice(_MAN_FAMILY_STEMS) + "ов"
        patronymic = rng.choice(_PATRONYMIC_STEMS)
        kind = index % 5
        if kind == 0:
            parts = [family, rng.choice(men), patronymic + "вич"]
        elif kind == 1:
            parts = [family + "а", rng.choice(women), patronymic + "вна"]
        elif kind == 2:
            parts = [rng.choice(women), rng.choice(_INDECLINABLE)]
        elif kind == 3:
            parts = [rng.choice(men).upper()]
        else:
            parts = [rng.choice(men), family]
        names.append(" ".join(part[:1].upper() + part[1:] for part in parts))
    return names


def _run_worker(names_count: int, warmup_count: int, seed: int) -> dict[str, float | int]:
    """Time one pass over the name list inside this process."""
    engine = NameCaseEngine()
    names = build_names(names_count, seed)

    for name in names[: min(warmup_count, len(names))]:
        engine.decline(name)

    gc.collect()
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        start = time.perf_counter()
        for name in names:
            engine.decline(name)
        elapsed = time.perf_counter() - start
    finally:
        if gc_was_enabled:
            gc.enable()

    return {
        "elapsed_seconds": elapsed,
        "names_per_second": len(names) / elapsed if elapsed > 0 else 0.0,
        "name_count": len(names),
    }


def _run_subprocess_worker(args: argparse.Namespace, run_idx: int) -> dict[str, float | int]:
    env = os.environ.copy()
    env["PYTHONHASHSEED"] = str(args.hash_seed)
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [
        sys.executable,
        __file__,
        "--worker",
        f"--names={args.names}",
        f"--warmup={args.warmup}",
        f"--seed={args.seed}",
    ]
    result = subprocess.run(  # noqa: S603
        cmd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
        env=env,
    )
    if result.returncode != 0:
        message = (
            f"Worker {run_idx} exited with code {result.returncode}.\n"
            f"STDOUT:\n{result.stdout}\nSTDERR:\n{result.stderr}"
        )
        raise RuntimeError(message)

    json_lines = [line.strip() for line in result.stdout.splitlines() if line.strip().startswith("{")]
    if not json_lines:
        message = f"Worker {run_idx} printed no JSON.\nSTDOUT:\n{result.stdout}"
        raise RuntimeError(message)
    return json.loads(json_lines[-1])


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Declension throughput benchmark with median gate.")
    parser.add_argument("--runs", type=int, default=5, help="Number of isolated runs.")
    parser.add_argument("--names", type=int, default=5000, help="Number of generated full names.")
    parser.add_argument("--warmup", type=int, default=500, help="Names declined before timing starts.")
    parser.add_argument("--seed", type=int, default=7, help="Seed for the generated name list.")
    parser.add_argument("--hash-seed", type=int, default=42, help="PYTHONHASHSEED for each worker.")
    parser.add_argument(
        "--min-median-names-per-sec",
        type=float,
        default=0.0,
        help="Fail (exit 1) when the median names/sec is below this value.",
    )
    parser.add_argument("--worker", action="store_true", help=argparse.SUPPRESS)
    return parser


def _print_summary(rates: list[float], elapsed: list[float]) -> float:
    median_rate = statistics.median(rates)
    mean_rate = statistics.mean(rates)
    stdev_rate = statistics.stdev(rates) if len(rates) > 1 else 0.0

    print()
    print("Summary")
    print("-" * 72)
    print(f"rate_median_names_per_second={median_rate:.2f}")
    print(f"rate_mean_names_per_second={mean_rate:.2f}")
    print(f"rate_cv_percent={(stdev_rate / mean_rate * 100.0) if mean_rate else 0.0:.2f}")
    print(f"elapsed_median_seconds={statistics.median(elapsed):.6f}")
    print()
    print(f"MEDIAN_NAMES_PER_SECOND={median_rate:.2f}")
    return median_rate


def main() -> int:
    args = _build_arg_parser().parse_args()

    if args.worker:
        print(json.dumps(_run_worker(args.names, args.warmup, args.seed)))
        return 0

    if args.runs < 1:
        message = "--runs must be >= 1"
        raise ValueError(message)

    print("=" * 72)
    print(f"NAMECASE BENCHMARK  v{NameCaseEngine.version}")
    print("=" * 72)
    print(f"runs={args.runs} names={args.names} warmup={args.warmup} seed={args.seed}")

    payloads = [_run_subprocess_worker(args, run_idx) for run_idx in range(1, args.runs + 1)]
    for run_idx, payload in enumerate(payloads, start=1):
        print(f"run {run_idx}: {payload['elapsed_seconds']:.6f}s | {payload['names_per_second']:.0f} names/sec")

    median_rate = _print_summary(
        [float(payload["names_per_second"]) for payload in payloads],
        [float(payload["elapsed_seconds"]) for payload in payloads],
    )

    gate = args.min_median_names_per_sec
    if gate > 0 and median_rate < gate:
        print(f"GATE=FAIL (median {median_rate:.2f} < required {gate:.2f})")
        return 1
    print("GATE=PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
