from datetime import datetime
from typing import Any, Callable, Dict, Optional
from ..domain.day_boundary import day_key, day_window_containing, millis_until_reset, next_reset_instant
from ..domain.instants import ensure_utc, now_utc, to_iso_z
from ..domain.week_boundary import week_key, week_window_containing
from ..presenters.duration_presenter import format_duration
from ..services.offset_cache import OffsetCache

def run(cache: OffsetCache, at: Optional[datetime] = None,
        now_provider: Callable[[], datetime] = now_utc) -> Dict[str, Any]:
    """Day/week boundaries for `at` (default: now) under the current day start."""
    offset = cache.get_current_offset()
    instant = ensure_utc(at if at is not None else now_provider())

    day = day_window_containing(instant, offset)
    week = week_window_containing(instant, offset)
    until_ms = millis_until_reset(offset, instant)

    return {
        "at": to_iso_z(instant),
        "day_start_utc": offset.format(),
        "day_key": day_key(instant, offset),
        "day": {"start": day.start_iso, "end": day.end_iso},
        "week_key": week_key(instant, offset),
        "week": {"start": week.start_iso, "end": week.end_iso},
        "next_reset": to_iso_z(next_reset_instant(offset, instant)),
        "ms_until_reset": until_ms,
        "until_reset": format_duration(until_ms),
    }
