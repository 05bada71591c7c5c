"""Per-invocation reporting model."""

from dataclasses import asdict, dataclass, field

from rainalert.models.notification import RainEvent


@dataclass
class RunSummary:
    timezone: str = ""
    window_start: str = ""
    window_end: str = ""
    start_index: int = 0
    end_index: int = -1
    hours_evaluated: int = 0
    rain_events: list[RainEvent] = field(default_factory=list)
    message: str = ""
    notified: bool = False
    dry_run: bool = False
    duration_seconds: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)
