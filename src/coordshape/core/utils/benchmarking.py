# src/coordshape/core/utils/benchmarking.py

import time
from dataclasses import dataclass, field
from statistics import median
from typing import Dict, List


@dataclass
class Timer:
    """Context manager measuring wall-clock time of a search stage or task."""

    name: str
    start_time: float = field(default=0.0)
    end_time: float = field(default=0.0)

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.end_time = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since entering, or the full duration once exited."""
        if self.end_time == 0.0:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time


@dataclass
class TimingStats:
    """Accumulated timings of one named operation."""

    name: str
    times: List[float] = field(default_factory=list)
    evaluations: int = 0

    def add_timing(self, elapsed: float, evaluations: int = 0) -> None:
        """Record one run.

        Args:
            elapsed: Duration in seconds
            evaluations: Shape measure evaluations performed during the run
        """
        self.times.append(elapsed)
        self.evaluations += evaluations

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    @property
    def evaluation_rate(self) -> float:
        """Shape measure evaluations per second."""
        if self.total_time > 0 and self.evaluations > 0:
            return self.evaluations / self.total_time
        return 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: no runs"

        parts = [f"{self.total_time:.3f}s over {self.count} run(s)"]
        if self.count > 1:
            parts.append(f"median {self.median_time:.3f}s")
        if self.evaluations:
            parts.append(f"{self.evaluations} evals ({self.evaluation_rate:.0f}/s)")
        return f"{self.name}: " + ", ".join(parts)


class PerformanceStats:
    """Timings keyed by stage or geometry code."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def add_timing(self, name: str, elapsed: float, evaluations: int = 0) -> None:
        """Record one run of ``name``."""
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        self.stats[name].add_timing(elapsed, evaluations)

    def report(self) -> str:
        """One line per operation, in insertion order, with its share of the total."""
        if not self.stats:
            return "No timings recorded"

        total = sum(s.total_time for s in self.stats.values())
        lines = []
        for stats in self.stats.values():
            share = 100.0 * stats.total_time / total if total > 0 else 0.0
            lines.append(f"{stats} ({share:.1f}%)")
        return "\n".join(lines)
