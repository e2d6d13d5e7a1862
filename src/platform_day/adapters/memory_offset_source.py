from typing import Optional
from ..errors import ConfigFetchFailed
from ..ports.offset_source import OffsetSource

class MemoryOffsetSource(OffsetSource):
    """Settings held in process; `value=None` behaves like an unreachable backend."""
    def __init__(self, value: Optional[str] = "00:00:00"):
        self.value = value
        self.calls = 0

    def set(self, value: Optional[str]) -> None:
        self.value = value

    def fetch_raw(self) -> str:
        self.calls += 1
        if self.value is None:
            raise ConfigFetchFailed("no platform day start configured")
        return self.value
