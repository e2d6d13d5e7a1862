# src/platform_day/domain/week_boundary.py
from datetime import datetime, timedelta
from typing import Callable
from .day_boundary import day_start_containing, day_start_for_date
from .instants import ONE_MS, now_utc
from .offset import OffsetValue
from .time_window import BoundaryWindow

ONE_WEEK = timedelta(days=7)

def week_start_containing(instant: datetime, offset: OffsetValue) -> datetime:
    """
    Monday cutover of the platform week containing `instant`.

    The Monday is taken from the operating day (after the cutover shift), so
    Monday 01:00 with a 03:00 cutover still belongs to the previous week.
    """
    day_start = day_start_containing(instant, offset)
    # weekday(): Monday=0 .. Sunday=6
    monday = day_start.date() - timedelta(days=day_start.weekday())
    return day_start_for_date(monday, offset)

def week_window_containing(instant: datetime, offset: OffsetValue) -> BoundaryWindow:
    start = week_start_containing(instant, offset)
    return BoundaryWindow(start, start + ONE_WEEK - ONE_MS)

def week_key(instant: datetime, offset: OffsetValue) -> str:
    iso_year, iso_week, _ = week_start_containing(instant, offset).isocalendar()
    return f"{iso_year}-W{iso_week:02d}"

def current_week_window(
    offset: OffsetValue,
    *,
    now_provider: Callable[[], datetime] = now_utc,
) -> BoundaryWindow:
    return week_window_containing(now_provider(), offset)
