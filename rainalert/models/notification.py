"""Rain events derived from the lookahead window."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RainEvent:
    formatted_time: str
    probability_percent: float
