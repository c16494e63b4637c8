"""Frame time step."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeStep:
    """A span of time in seconds."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    @property
    def seconds(self) -> float:
        return self.time

    @property
    def milliseconds(self) -> float:
        return self.time * 1000.0