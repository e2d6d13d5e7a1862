# scripts/show_platform_day.py
import argparse, logging

from platform_day.adapters.memory_offset_source import MemoryOffsetSource
from platform_day.adapters.settings_client import SettingsClient
from platform_day.app import build_cache
from platform_day.config import load_config
from platform_day.domain.instants import parse_instant
from platform_day.orchestrators.platform_day_usecase import run
from platform_day.presenters.json_presenter import JsonPresenter
from platform_day.services.offset_cache import OffsetCache

def main():
    cfg = load_config()
    p = argparse.ArgumentParser(description="Show platform day/week boundaries")
    p.add_argument("--at", default=None, help="UTC instant, e.g. 2025-06-10T02:00:00Z. Default=now")
    p.add_argument("--day-start", default=None, help="Use this HH:MM:SS instead of fetching the setting")
    p.add_argument("--base-url", default=cfg.api_base_url, help="Settings API URL")
    p.add_argument("--timeout", type=float, default=cfg.http_timeout_sec)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else cfg.log_level)
    at = parse_instant(args.at)

    if args.day_start is not None:
        cache = OffsetCache(MemoryOffsetSource(args.day_start), default=cfg.default_offset)
        JsonPresenter(indent=2).render(run(cache, at))
        return

    with SettingsClient(args.base_url, timeout=args.timeout) as client:
        cache = build_cache(cfg, client)
        JsonPresenter(indent=2).render(run(cache, at))

if __name__ == "__main__":
    main()
