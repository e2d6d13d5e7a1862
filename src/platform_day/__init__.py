from .domain.offset import OffsetValue, DEFAULT_OFFSET
from .domain.time_window import BoundaryWindow
from .domain.day_boundary import (
    day_start_containing, day_window_containing, day_key,
    next_reset_instant, millis_until_reset,
)
from .domain.week_boundary import week_start_containing, week_window_containing
from .presenters.duration_presenter import format_duration
from .services.offset_cache import OffsetCache, CachedOffset
from .errors import InvalidOffsetFormat, ConfigFetchFailed, InvalidInstant
