# tests/unit/test_app.py
import io, json
import httpx
import pytest
from platform_day import app
from platform_day.adapters.settings_client import SettingsClient
from datetime import datetime, timezone
from platform_day.adapters.memory_offset_source import MemoryOffsetSource
from platform_day.app import lambda_handler
from platform_day.orchestrators.platform_day_usecase import run
from platform_day.presenters.json_presenter import JsonPresenter
from platform_day.services.offset_cache import OffsetCache

def _cache(value="03:00:00"):
    source = MemoryOffsetSource(value)
    return OffsetCache(source, now_ms_provider=lambda: 0), source

def test_run_summary():
    cache, _ = _cache()
    res = run(cache, datetime(2025, 6, 10, 2, tzinfo=timezone.utc))
    assert res["day_start_utc"] == "03:00:00"
    assert res["day_key"] == "2025-06-09"
    assert res["day"] == {"start": "2025-06-09T03:00:00.000Z", "end": "2025-06-10T02:59:59.999Z"}
    assert res["week"]["start"] == "2025-06-09T03:00:00.000Z"
    assert res["next_reset"] == "2025-06-10T03:00:00.000Z"
    assert res["ms_until_reset"] == 3600 * 1000
    assert res["until_reset"] == "1h 0m"

def test_run_defaults_to_clock():
    cache, _ = _cache("00:00:00")
    res = run(cache, now_provider=lambda: datetime(2025, 6, 11, 15, tzinfo=timezone.utc))
    assert res["week_key"] == "2025-W24"
    assert res["week"]["start"] == "2025-06-09T00:00:00.000Z"

def test_lambda_handler_ok():
    cache, _ = _cache()
    out = lambda_handler({"at": "2025-06-08T01:00:00Z"}, None, cache=cache)
    assert out["statusCode"] == 200
    body = json.loads(out["body"])
    assert body["day_key"] == "2025-06-07"
    assert body["week"]["start"] == "2025-06-02T03:00:00.000Z"

def test_lambda_handler_invalidate_refetches():
    cache, source = _cache()
    lambda_handler({"at": "2025-06-10T04:00:00Z"}, None, cache=cache)
    source.set("05:00:00")
    out = lambda_handler({"at": "2025-06-10T04:00:00Z", "invalidate": True}, None, cache=cache)
    body = json.loads(out["body"])
    assert body["day_start_utc"] == "05:00:00"
    assert body["day_key"] == "2025-06-09"
    assert source.calls == 2

def test_lambda_handler_rejects_naive_instant():
    cache, _ = _cache()
    out = lambda_handler({"at": "2025-06-10T04:00:00"}, None, cache=cache)
    assert out["statusCode"] == 400

def test_json_presenter_writes_one_document():
    buf = io.StringIO()
    JsonPresenter(out=buf).render({"day_key": "2025-06-09", "ms_until_reset": 5})
    assert json.loads(buf.getvalue()) == {"day_key": "2025-06-09", "ms_until_reset": 5}
    assert buf.getvalue().endswith("\n")

def _settings_backend(monkeypatch, value="03:00:00"):
    """Routes the default cache's SettingsClient to an in-process transport."""
    calls, clients = [], []
    def handler(request):
        calls.append(str(request.url))
        return httpx.Response(200, json={"success": True, "data": {"value": value}})
    def make_client(base_url, timeout=10.0):
        c = SettingsClient(base_url, timeout=timeout, transport=httpx.MockTransport(handler))
        clients.append(c)
        return c
    monkeypatch.setattr(app, "SettingsClient", make_client)
    monkeypatch.setattr(app, "_default_cache", None)
    return calls, clients

def test_lambda_handler_reuses_cache_across_invocations(monkeypatch):
    calls, clients = _settings_backend(monkeypatch)
    try:
        first = lambda_handler({"at": "2025-06-10T02:00:00Z"}, None)
        second = lambda_handler({"at": "2025-06-10T04:00:00Z"}, None)
        assert first["statusCode"] == second["statusCode"] == 200
        assert json.loads(second["body"])["day_key"] == "2025-06-10"
        assert len(calls) == 1
        assert len(clients) == 1
    finally:
        app.close_default_cache()
    assert clients[0]._client.is_closed
    assert app._default_cache is None

def test_lambda_handler_invalidate_hits_process_cache(monkeypatch):
    calls, _ = _settings_backend(monkeypatch)
    try:
        lambda_handler({"at": "2025-06-10T04:00:00Z"}, None)
        lambda_handler({"at": "2025-06-10T04:00:00Z", "invalidate": True}, None)
        assert len(calls) == 2
    finally:
        app.close_default_cache()

@pytest.mark.parametrize("at", [1749520800000, "", "   ", "yesterday", ["2025-06-10T02:00:00Z"], "0001-01-01T00:00:00Z"])
def test_lambda_handler_rejects_bad_instant(at):
    cache, source = _cache()
    out = lambda_handler({"at": at}, None, cache=cache)
    assert out["statusCode"] == 400
    assert "error" in json.loads(out["body"])

def test_missing_instant_means_now():
    cache, _ = _cache()
    out = lambda_handler({"at": None}, None, cache=cache)
    assert out["statusCode"] == 200
