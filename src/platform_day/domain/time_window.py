# src/platform_day/domain/time_window.py
from dataclasses import dataclass
from datetime import datetime
from .instants import ONE_MS, ensure_utc, to_ms, to_iso_z

@dataclass(frozen=True)
class BoundaryWindow:
    """
    Operating day/week [start, next_start). `end` is the last valid millisecond
    (start + span - 1ms), the way counters and API queries display it.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"window end {self.end} before start {self.start}")

    @property
    def next_start(self) -> datetime:
        return self.end + ONE_MS

    def contains(self, instant: datetime) -> bool:
        instant = ensure_utc(instant)
        return self.start <= instant < self.next_start

    @property
    def start_ms(self) -> int:
        return to_ms(self.start)

    @property
    def end_ms(self) -> int:
        return to_ms(self.end)

    @property
    def start_iso(self) -> str:
        return to_iso_z(self.start)

    @property
    def end_iso(self) -> str:
        return to_iso_z(self.end)
