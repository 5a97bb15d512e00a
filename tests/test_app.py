import time

import pytest

from conftest import BASE_URL, TINTABLE_SVG, FakeHttp

from iconify_proxy.app import create_app, parse_presentation
from iconify_proxy.infrastructure.loop import BackgroundLoop
from iconify_proxy.service import PLACEHOLDER_SVG, IconService


@pytest.fixture
def http():
    return FakeHttp(responses={"mdi/palette": (200, TINTABLE_SVG), "mdi/missing": (200, "404")})


@pytest.fixture
def client(tmp_path, http):
    runner = BackgroundLoop()
    service = IconService(http=http, cache_dir=tmp_path, base_url=BASE_URL)
    app = create_app(service, runner)
    app.testing = True
    yield app.test_client()
    runner.stop()


def test_parse_presentation_defaults_to_minimum_edge():
    assert parse_presentation({}) == (32, 32, None)


def test_parse_presentation_reads_size_and_color():
    assert parse_presentation({"w": "64", "h": "16", "color": "F00"}) == (64, 16, "#ff0000")


@pytest.mark.parametrize("args", [{"w": "wide"}, {"color": "blue"}])
def test_parse_presentation_rejects_garbage(args):
    with pytest.raises(ValueError):
        parse_presentation(args)


def test_icon_is_fetched_then_served_from_cache(client, http):
    first = client.get("/icons/mdi:home.svg?w=10&h=10")

    assert first.status_code == 200
    assert first.mimetype == "image/svg+xml"
    assert first.headers["X-Icon-Cache"] == "MISS"
    assert first.headers["X-Icon-Path"] == "mdi/home.svg?w=32&h=32"
    assert first.data.startswith(b"<svg")

    second = client.get("/icons/mdi:home.svg?w=10&h=10")

    assert second.headers["X-Icon-Cache"] == "HIT"
    assert len(http.calls) == 1


def test_tintable_icon_path_includes_color(client):
    response = client.get("/icons/mdi:palette/path?w=48&h=48&color=00ff00")

    assert response.status_code == 200
    assert response.get_json() == {
        "key": "mdi:palette",
        "path": "mdi/palette.t.svg?color=#00ff00&w=48&h=48",
        "tintable": True,
    }


def test_missing_icon_serves_placeholder(client):
    response = client.get("/icons/mdi:missing.svg")

    assert response.status_code == 200
    assert response.headers["X-Icon-Cache"] == "PLACEHOLDER"
    assert response.data == PLACEHOLDER_SVG


def test_missing_icon_path_is_not_found(client):
    response = client.get("/icons/mdi:missing/path")

    assert response.status_code == 404
    assert response.get_json()["path"] is None


def test_malformed_key_is_rejected(client, http):
    assert client.get("/icons/no-separator.svg").status_code == 400
    assert client.get("/icons/mdi:home/path?w=big").status_code == 400
    assert http.calls == []


def test_health_reports_in_flight_count(client):
    payload = client.get("/health").get_json()

    assert payload["ok"] is True
    assert payload["in_flight"] == 0
    assert payload["api_url"] == BASE_URL


def test_health_reports_cache_dir(client, tmp_path):
    assert client.get("/health").get_json()["cache_dir"] == str(tmp_path.resolve())


def test_svg_suffix_is_not_part_of_the_key(client, http, tmp_path):
    response = client.get("/icons/mdi:home.svg")

    assert response.status_code == 200
    assert http.calls == ["https://icons.test/mdi/home.svg?width=100%25"]
    assert (tmp_path / "mdi" / "home.svg").is_file()
    assert not (tmp_path / "mdi" / "home.svg.svg").exists()


def test_slow_fetch_serves_placeholder_and_keeps_fetching(tmp_path, http):
    runner = BackgroundLoop()
    service = IconService(http=http, cache_dir=tmp_path, base_url=BASE_URL)
    client = create_app(service, runner, resolve_timeout=0.1).test_client()
    http.gate.clear()

    try:
        response = client.get("/icons/mdi:home.svg")

        assert response.headers["X-Icon-Cache"] == "PLACEHOLDER"
        assert response.data == PLACEHOLDER_SVG

        http.gate.set()
        deadline = time.monotonic() + 5
        while time.monotonic() < deadline and service.coordinator.in_flight_count:
            time.sleep(0.01)

        assert service.coordinator.in_flight_count == 0
        assert (tmp_path / "mdi" / "home.svg").is_file()
        assert client.get("/icons/mdi:home.svg").headers["X-Icon-Cache"] == "HIT"
        assert len(http.calls) == 1
    finally:
        http.gate.set()
        runner.stop()


def test_main_runs_module_app(monkeypatch):
    from iconify_proxy import __main__ as entry
    from iconify_proxy.config import SETTINGS

    calls = []
    monkeypatch.setattr(entry.app, "run", lambda **kwargs: calls.append(kwargs))

    entry.main()

    assert calls == [{"host": "0.0.0.0", "port": SETTINGS.port, "debug": False}]
