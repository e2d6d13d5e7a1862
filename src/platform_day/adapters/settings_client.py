# src/platform_day/adapters/settings_client.py
from typing import Optional
import httpx

API_PREFIX = "/api/v1"

class SettingsClient:
    """Minimal client for the public settings endpoint (GET /api/v1/settings/public/<key>)."""
    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.BaseTransport] = None):
        base = base_url.rstrip("/")
        # accept both "https://host" and "https://host/api/v1"
        if base.endswith(API_PREFIX):
            base = base[: -len(API_PREFIX)]
        self._base = base
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def url_for(self, key: str) -> str:
        return f"{self._base}{API_PREFIX}/settings/public/{key}"

    def get_public_setting(self, key: str, timeout: Optional[float] = None) -> httpx.Response:
        if timeout is None:
            return self._client.get(self.url_for(key))
        return self._client.get(self.url_for(key), timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self): return self
    def __exit__(self, exc_type, exc, tb): self.close()
