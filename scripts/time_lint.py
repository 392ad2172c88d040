#!/usr/bin/env python3
"""Quick perf benchmark for changelog parse + lint."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from changelogpy.pipeline import read_source, run_check

DEFAULT_PATTERNS = ("CHANGELOG.md", "CHANGES.md", "*.changelog.md")


def _collect_changelogs(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    files = sorted({path for pattern in DEFAULT_PATTERNS for path in root.rglob(pattern)})
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[tuple[Path, str]],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_releases = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for path, text in iterator:
        result = run_check(text, path=path)
        total_releases += len(result.parse.changelog.releases)
        total_diagnostics += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, len(sources), total_releases, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark changelog parse + lint throughput")
    parser.add_argument(
        "root",
        type=Path,
        help="Changelog file, or directory searched for CHANGELOG.md/CHANGES.md files",
    )
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Lint each file this many times per run (useful for a single small file)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_changelogs(root)
    if not files:
        raise SystemExit(f"No changelog files found under {root}")
    sources = [(path, read_source(path)) for path in files] * max(args.repeat, 1)

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        files_count = 0
        releases_count = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, releases_count, diagnostics_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, releases_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, releases_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, releases_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {files_count}")
    print(f"Releases: {releases_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):    {files_count / mean:.1f}")
    print(f"Releases/s (mean): {releases_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
