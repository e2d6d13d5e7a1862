class InvalidOffsetFormat(ValueError):
    """Day start is not a valid HH:MM:SS time between 00:00:00 and 23:59:59."""
    pass

class ConfigFetchFailed(RuntimeError):
    pass

class InvalidInstant(ValueError):
    """Instant is not a timezone-aware datetime."""
    pass
