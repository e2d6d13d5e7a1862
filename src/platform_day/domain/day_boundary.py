# src/platform_day/domain/day_boundary.py
"""
Operating-day boundaries.

A platform day starts at the configured cutover (OffsetValue) after UTC midnight
and lasts 24h. All arithmetic is on UTC calendar dates; the process timezone
is never consulted.
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional
from .instants import ONE_MS, check_supported_year, ensure_utc, from_ms, now_utc
from .offset import OffsetValue
from .time_window import BoundaryWindow

ONE_DAY = timedelta(days=1)

def day_start_for_date(day: date, offset: OffsetValue) -> datetime:
    """Cutover instant on the given UTC calendar date (no containment shift)."""
    check_supported_year(day.year, lowest=1)
    midnight = datetime.combine(day, time(0), tzinfo=timezone.utc)
    return midnight + offset.as_timedelta()

def day_window_for_date(day: date, offset: OffsetValue) -> BoundaryWindow:
    start = day_start_for_date(day, offset)
    return BoundaryWindow(start, start + ONE_DAY - ONE_MS)

def day_start_containing(instant: datetime, offset: OffsetValue) -> datetime:
    """
    Start of the platform day containing `instant`:
    start <= instant < start + 24h.
    Before today's cutover the instant still belongs to yesterday's day.
    """
    instant = ensure_utc(instant)
    candidate = day_start_for_date(instant.date(), offset)
    if instant < candidate:
        return candidate - ONE_DAY
    return candidate

def day_window_containing(instant: datetime, offset: OffsetValue) -> BoundaryWindow:
    start = day_start_containing(instant, offset)
    return BoundaryWindow(start, start + ONE_DAY - ONE_MS)

def day_key(instant: datetime, offset: OffsetValue) -> str:
    """YYYY-MM-DD of the day start; equal for all instants of one platform day."""
    return day_start_containing(instant, offset).date().isoformat()

def day_key_from_ms(ts_ms: int, offset: OffsetValue) -> str:
    return day_key(from_ms(ts_ms), offset)

def apply_offset(instant: datetime, offset: OffsetValue) -> datetime:
    # shifted instant's UTC date == day_key date
    return ensure_utc(instant) - offset.as_timedelta()

def current_day_window(
    offset: OffsetValue,
    *,
    now_provider: Callable[[], datetime] = now_utc,
) -> BoundaryWindow:
    return day_window_containing(now_provider(), offset)

def is_within_current_day(
    instant: datetime,
    offset: OffsetValue,
    *,
    now_provider: Callable[[], datetime] = now_utc,
) -> bool:
    return current_day_window(offset, now_provider=now_provider).contains(instant)

def next_reset_instant(
    offset: OffsetValue,
    reference: Optional[datetime] = None,
    *,
    now_provider: Callable[[], datetime] = now_utc,
) -> datetime:
    ref = reference if reference is not None else now_provider()
    return day_window_containing(ref, offset).end + ONE_MS

def millis_until_reset(
    offset: OffsetValue,
    reference: Optional[datetime] = None,
    *,
    now_provider: Callable[[], datetime] = now_utc,
) -> int:
    ref = ensure_utc(reference if reference is not None else now_provider())
    return (next_reset_instant(offset, ref) - ref) // ONE_MS
