import logging

import pytest
from fastapi.testclient import TestClient

from eveplanner_api.app.main import create_app

INDEX_HTML = "<!doctype html><title>EvePlanner</title>"


@pytest.fixture
def site_dir(tmp_path):
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (site / "app.js").write_text("console.log('planner');", encoding="utf-8")
    return site


def test_static_front_end_is_served_at_root(settings, site_dir):
    settings.static_dir = str(site_dir)
    with TestClient(create_app(settings)) as client:
        r = client.get("/")
        assert r.status_code == 200
        assert r.text == INDEX_HTML
        assert r.headers["content-type"].startswith("text/html")

        r = client.get("/index.html")
        assert r.status_code == 200
        assert r.text == INDEX_HTML

        assert client.get("/app.js").text == "console.log('planner');"


def test_static_mount_does_not_shadow_api_routes(settings, site_dir):
    settings.static_dir = str(site_dir)
    with TestClient(create_app(settings)) as client:
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["status"] == "Server is running"

        r = client.post("/api/users", json={"fullName": "Jane D."})
        assert r.status_code == 201


def test_missing_static_dir_is_logged_and_not_mounted(settings, tmp_path, caplog):
    missing = tmp_path / "no-site"
    settings.static_dir = str(missing)
    with caplog.at_level(logging.WARNING, logger="eveplanner_api.app.main"):
        app = create_app(settings)
    assert any(
        "does not exist" in record.getMessage() and str(missing) in record.getMessage()
        for record in caplog.records
    )
    with TestClient(app) as client:
        assert client.get("/").status_code == 404
        assert client.get("/api/health").status_code == 200


def test_static_dir_unset_serves_nothing_at_root(client):
    r = client.get("/")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}
