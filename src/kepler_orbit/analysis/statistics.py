from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional


@dataclass
class RunningStat:
    """
    Running total / count / extremes of a stream of values.
    Nothing is stored per sample, so it can sit inside long sweeps.
    """
    total: float = 0.0
    count: int = 0
    max: float = -sys.float_info.max
    min: float = sys.float_info.max

    def entry(self, value: float, count: Optional[int] = None) -> None:
        """
        Record a value. `count` lets one entry stand for several samples
        whose sum is `value` (default 1).
        """
        self.total += value
        self.count += 1 if count is None else count
        if value > self.max:
            self.max = value
        if value < self.min:
            self.min = value

    def mean(self) -> float:
        if self.count == 0:
            raise ValueError("No entries recorded.")
        return self.total / self.count
