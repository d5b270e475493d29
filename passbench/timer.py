from __future__ import annotations
import time
from typing import Callable, Tuple, TypeVar

T = TypeVar("T")


class PerformanceTimer:
    """Mierzy czas wykonania zadania (zegar monotoniczny, wynik w ms)."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock

    def timed(self, task: Callable[[], T]) -> Tuple[T, float]:
        """Uruchamia zadanie dokładnie raz i zwraca (wynik, czas w ms)."""
        start = self._clock()
        result = task()
        elapsed = self._clock() - start
        return result, max(elapsed, 0.0) * 1000.0

    def measure(self, task: Callable[[], object]) -> float:
        _, elapsed_ms = self.timed(task)
        return elapsed_ms
