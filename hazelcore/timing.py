"""Frame timesteps and a simple elapsed-time timer."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter_ns


@dataclass(frozen=True)
class Timestep:
    """Duration of one frame, stored in seconds."""

    time: float = 0.0

    @property
    def seconds(self) -> float:
        return float(self.time)

    @property
    def milliseconds(self) -> float:
        return self.time * 1000.0

    def __float__(self) -> float:
        return float(self.time)

    def __mul__(self, other):
        if isinstance(other, (int, float, Timestep)):
            return self.time * float(other)
        return NotImplemented

    __rmul__ = __mul__


class Timer:
    """Measures time since creation or the last reset."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._start = perf_counter_ns()

    def elapsed(self) -> float:
        """Seconds since the last reset."""
        return (perf_counter_ns() - self._start) / 1e9

    def elapsed_millis(self) -> float:
        """Milliseconds since the last reset."""
        return self.elapsed() * 1000.0