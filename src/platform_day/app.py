import json, logging
from typing import Optional
from .config import load_config
from .adapters.settings_client import SettingsClient
from .adapters.http_offset_source import HttpOffsetSource
from .domain.instants import parse_instant
from .services.offset_cache import OffsetCache
from .orchestrators.platform_day_usecase import run

# built on the first invocation, reused while the container stays warm
_default_cache: Optional[OffsetCache] = None

def build_cache(cfg, client: Optional[SettingsClient] = None) -> OffsetCache:
    client = client or SettingsClient(cfg.api_base_url, timeout=cfg.http_timeout_sec)
    source = HttpOffsetSource(
        client,
        key=cfg.day_start_key,
        retries=cfg.http_retries,
        timeout_sec=cfg.http_timeout_sec,
    )
    return OffsetCache(source, ttl_ms=cfg.cache_ttl_ms, default=cfg.default_offset)

def default_cache() -> OffsetCache:
    global _default_cache
    if _default_cache is None:
        cfg = load_config()
        logging.basicConfig(level=cfg.log_level)
        _default_cache = build_cache(cfg)
    return _default_cache

def close_default_cache() -> None:
    """Closes the HTTP client behind the process cache and forgets the cache."""
    global _default_cache
    cache, _default_cache = _default_cache, None
    if cache is not None and isinstance(cache.source, HttpOffsetSource):
        cache.source.client.close()

def lambda_handler(event, _context=None, cache: Optional[OffsetCache] = None):
    """
    event:
      {
        "at": "2025-06-10T02:00:00Z",   # optional, default now
        "invalidate": false              # drop the cached day start first
      }
    """
    if cache is None:
        cache = default_cache()

    event = event or {}
    if event.get("invalidate"):
        cache.invalidate()

    try:
        at = parse_instant(event.get("at"))
        res = run(cache, at)
    except ValueError as e:
        return {"statusCode": 400, "body": json.dumps({"error": str(e)}, ensure_ascii=False)}

    return {"statusCode": 200, "body": json.dumps(res, ensure_ascii=False)}

if __name__ == "__main__":
    # local run: pipe the event JSON to stdin
    import sys
    raw = sys.stdin.read().strip()
    try:
        out = lambda_handler(json.loads(raw) if raw else {}, None)
    finally:
        close_default_cache()
    print(out["body"])
