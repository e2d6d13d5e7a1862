def format_duration(millis: int) -> str:
    """
    Countdown text: "5h 23m", "30m" or "45s".
    Truncates to the coarsest unit reached; negative durations read as "0s".
    """
    seconds = max(0, int(millis)) // 1000
    minutes = seconds // 60
    hours = minutes // 60

    if hours > 0:
        return f"{hours}h {minutes % 60}m"
    if minutes > 0:
        return f"{minutes}m"
    return f"{seconds}s"
