# smp/dataprocess/parallel.py
"""
Simulated workload comparing concurrent and sequential task execution.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class ParallelReport:
    tasks: int
    duration: float
    sequential: bool
    elapsed: float
    results: List[str] = field(default_factory=list)

    @property
    def theoretical(self) -> float:
        if self.tasks == 0:
            return 0.0
        return self.tasks * self.duration if self.sequential else self.duration

    @property
    def efficiency(self) -> float:
        """Theoretical over measured time, as a percentage."""
        if self.elapsed <= 0:
            return 100.0
        return self.theoretical / self.elapsed * 100


async def _simulated_task(index: int, duration: float, emit: Callable[[str], None]) -> str:
    emit(f"Task {index} started")
    await asyncio.sleep(duration)
    emit(f"Task {index} completed")
    return f"Result of task {index}"


async def run_tasks(
    tasks: int,
    duration: float,
    sequential: bool = False,
    emit: Optional[Callable[[str], None]] = None,
) -> ParallelReport:
    """
    Run `tasks` simulated jobs of `duration` seconds each.

    Concurrent mode gathers all jobs on the running loop; sequential mode
    awaits them one by one. `emit` receives progress lines.
    """
    if tasks < 0:
        raise ValueError(f"tasks must be non-negative, got {tasks}")
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")
    emit = emit or (lambda _line: None)

    start = time.perf_counter()
    if sequential:
        results = []
        for i in range(1, tasks + 1):
            results.append(await _simulated_task(i, duration, emit))
    else:
        results = list(await asyncio.gather(
            *(_simulated_task(i, duration, emit) for i in range(1, tasks + 1))
        ))
    elapsed = time.perf_counter() - start

    return ParallelReport(
        tasks=tasks,
        duration=duration,
        sequential=sequential,
        elapsed=elapsed,
        results=results,
    )
