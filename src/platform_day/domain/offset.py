# src/platform_day/domain/offset.py
import re
from dataclasses import dataclass
from datetime import timedelta
from ..errors import InvalidOffsetFormat

SECONDS_PER_DAY = 24 * 60 * 60

# ASCII only: \d would also accept non-latin digits
_HHMMSS = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")

@dataclass(frozen=True)
class OffsetValue:
    """
    Daily cutover time: seconds after UTC midnight at which a platform day starts.
    """
    seconds: int

    def __post_init__(self):
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise InvalidOffsetFormat(f"offset seconds must be int, got {self.seconds!r}")
        if not 0 <= self.seconds < SECONDS_PER_DAY:
            raise InvalidOffsetFormat(f"offset seconds out of range: {self.seconds}")

    @classmethod
    def parse(cls, raw: str) -> "OffsetValue":
        if not isinstance(raw, str):
            raise InvalidOffsetFormat(f"expected HH:MM:SS string, got {type(raw).__name__}")
        m = _HHMMSS.fullmatch(raw)
        if m is None:
            raise InvalidOffsetFormat(f"expected HH:MM:SS, got {raw!r}")
        hh, mm, ss = (int(g) for g in m.groups())
        if hh > 23 or mm > 59 or ss > 59:
            raise InvalidOffsetFormat(f"time out of range: {raw!r}")
        return cls(hh * 3600 + mm * 60 + ss)

    @property
    def hours(self) -> int:
        return self.seconds // 3600

    @property
    def minutes(self) -> int:
        return self.seconds % 3600 // 60

    def format(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds % 60:02d}"

    def as_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def __str__(self) -> str:
        return self.format()

DEFAULT_OFFSET = OffsetValue(0)
