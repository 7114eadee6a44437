from __future__ import annotations

import time
from typing import Sequence

import numpy as np


def _as_array(trial_times: Sequence[float]) -> np.ndarray:
    times = np.asarray(trial_times, dtype=float)
    if times.size == 0:
        raise ValueError("At least one trial time is required")
    return times


def run_average(trial_times: Sequence[float]) -> float:
    """Population mean of a series of trial times."""
    return float(np.mean(_as_array(trial_times)))


def run_standard_deviation(trial_times: Sequence[float]) -> float:
    """Population standard deviation of a series of trial times."""
    return float(np.std(_as_array(trial_times)))


def run_percentage_difference(bigger: float, smaller: float) -> float:
    """Percentage difference ``|a - b| / mean(a, b) * 100``.

    Argument order does not matter. Two zero times differ by 0%.
    """
    mean = (bigger + smaller) / 2
    if mean == 0:
        return 0.0
    return abs(bigger - smaller) / mean * 100


class Timekeeper:
    """Wall-clock timer for a single race.

    The start time is taken at construction and can be reset with ``start()``.
    """

    def __init__(self):
        self._start = time.perf_counter()
        self._elapsed = 0.0

    def start(self) -> None:
        self._start = time.perf_counter()

    def end(self) -> None:
        self._elapsed = time.perf_counter() - self._start

    def race_time(self) -> float:
        """Seconds between the last ``start()`` and ``end()``."""
        return self._elapsed
