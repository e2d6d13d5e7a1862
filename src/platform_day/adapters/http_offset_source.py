# src/platform_day/adapters/http_offset_source.py
import random, time, logging
from typing import Any, Callable, Optional
import httpx
from ..errors import ConfigFetchFailed
from ..ports.offset_source import OffsetSource
from .settings_client import SettingsClient

DAY_START_KEY = "platform_day_start_utc"
RETRY_STATUSES = {429, 500, 502, 503, 504}

class HttpOffsetSource(OffsetSource):
    """
    Reads the day start from the settings API.
    Response envelope: {"success": true, "data": {"key": "...", "value": "03:00:00"}}
    """
    def __init__(
        self,
        client: SettingsClient,
        *,
        key: str = DAY_START_KEY,
        retries: int = 2,
        timeout_sec: Optional[float] = None,
        sleep_cap: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.key = key
        self.retries = max(1, retries)
        self.timeout_sec = timeout_sec
        self.sleep_cap = sleep_cap
        self._sleep = sleep

    def fetch_raw(self) -> str:
        last_err = None
        for a in range(self.retries):
            try:
                r = self.client.get_public_setting(self.key, timeout=self.timeout_sec)
            except httpx.HTTPError as e:
                last_err = f"{type(e).__name__}: {e}"
                logging.warning("settings key=%s attempt=%d transport error: %s", self.key, a + 1, last_err)
                self._backoff(a)
                continue

            status = r.status_code
            if 200 <= status < 300:
                return self._extract_value(r)
            if status in RETRY_STATUSES:
                last_err = f"http {status}"
                logging.warning("settings key=%s attempt=%d http %d", self.key, a + 1, status)
                self._backoff(a)
                continue
            raise ConfigFetchFailed(f"HTTP {status}: {r.text[:200]}")
        raise ConfigFetchFailed(last_err or "request failed")

    def _backoff(self, attempt: int) -> None:
        if attempt + 1 >= self.retries:
            return  # no sleep after the last attempt
        self._sleep(min(2 ** attempt * 0.25, self.sleep_cap) + random.random() * 0.1)

    def _extract_value(self, r: httpx.Response) -> str:
        try:
            body: Any = r.json()
        except ValueError as e:
            raise ConfigFetchFailed(f"non-JSON settings response: {r.text[:200]}") from e

        data = body.get("data") if isinstance(body, dict) else None
        value = data.get("value") if isinstance(data, dict) else None
        if not isinstance(value, str):
            raise ConfigFetchFailed(f"settings response has no data.value: {str(body)[:200]}")
        return value
