# src/platform_day/ports/offset_source.py
from abc import ABC, abstractmethod

class OffsetSource(ABC):
    """Where the platform day start ("HH:MM:SS") is read from."""
    @abstractmethod
    def fetch_raw(self) -> str:
        """Raises ConfigFetchFailed on any transport/payload failure."""
        ...
