# src/platform_day/domain/instants.py
import time
from datetime import datetime, timedelta, timezone
from typing import Optional
from ..errors import InvalidInstant

ONE_MS = timedelta(milliseconds=1)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# boundary math steps up to a week around the instant; keep clear of datetime.min/max
MIN_YEAR = 2
MAX_YEAR = 9998

def now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)

def now_ms() -> int:
    return int(time.time() * 1000)

def check_supported_year(year: int, lowest: int = MIN_YEAR) -> None:
    if not lowest <= year <= MAX_YEAR:
        raise InvalidInstant(f"year {year} outside supported range {lowest}..{MAX_YEAR}")

def ensure_utc(value) -> datetime:
    """
    Normalizes an aware datetime to UTC.
    Naive datetimes are rejected: guessing the process timezone would shift every boundary.
    """
    if not isinstance(value, datetime):
        raise InvalidInstant(f"expected datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidInstant(f"datetime must be timezone-aware: {value!r}")
    try:
        utc = value.astimezone(timezone.utc)
    except OverflowError as e:
        raise InvalidInstant(f"instant out of range: {value!r}") from e
    check_supported_year(utc.year)
    return utc

def parse_instant(raw: Optional[str]) -> Optional[datetime]:
    """
    ISO-8601 instant with an explicit offset or "Z" -> UTC datetime.
    None means "not given"; anything else that is not such a string raises InvalidInstant.
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise InvalidInstant(f"expected ISO-8601 string, got {type(raw).__name__}")
    text = raw.strip()
    if not text:
        raise InvalidInstant("empty instant")
    # fromisoformat() only takes a trailing "Z" from 3.11 on
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidInstant(f"not an ISO-8601 instant: {raw!r}") from e
    return ensure_utc(parsed)

def from_ms(ts_ms: int) -> datetime:
    try:
        instant = _EPOCH + timedelta(milliseconds=int(ts_ms))
    except OverflowError as e:
        raise InvalidInstant(f"timestamp out of range: {ts_ms!r}") from e
    check_supported_year(instant.year)
    return instant

def to_ms(instant: datetime) -> int:
    return (ensure_utc(instant) - _EPOCH) // ONE_MS

def to_iso_z(instant: datetime) -> str:
    # 2025-06-10T03:00:00.000Z
    return ensure_utc(instant).isoformat(timespec="milliseconds").replace("+00:00", "Z")
