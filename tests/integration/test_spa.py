"""Integration tests for the frontend host"""

from pathlib import Path
from fastapi.testclient import TestClient

from revolving_sim.api.main import create_app
from revolving_sim.api.spa import resolve_static_path


def test_root_serves_index(client: TestClient, static_bundle: Path):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == (static_bundle / "index.html").read_text(encoding="utf-8")
    assert response.headers["content-type"].startswith("text/html")


def test_unknown_path_falls_back_to_index(client: TestClient, static_bundle: Path):
    """Client-side routes get the root document"""
    response = client.get("/scenarios/compare?mode=embed")
    assert response.status_code == 200
    assert response.text == (static_bundle / "index.html").read_text(encoding="utf-8")


def test_existing_asset_is_served(client: TestClient, static_bundle: Path):
    response = client.get("/assets/app.js")
    assert response.status_code == 200
    assert response.text == (static_bundle / "assets" / "app.js").read_text(encoding="utf-8")


def test_api_routes_take_precedence(client: TestClient):
    response = client.get("/health")
    assert response.json()["status"] == "ok"


def test_path_outside_bundle_is_not_served(static_bundle: Path):
    """Escaping the bundle directory falls back to the index document"""
    secret = static_bundle.parent / "secret.txt"
    secret.write_text("do not serve", encoding="utf-8")

    resolved = resolve_static_path(static_bundle, "../secret.txt")
    assert resolved == (static_bundle / "index.html").resolve()


def test_missing_bundle_returns_404(tmp_path: Path):
    """No index document to fall back to"""
    client = TestClient(create_app(static_dir=tmp_path / "missing"))

    response = client.get("/anything")
    assert response.status_code == 404
    assert response.json() == {"detail": "Frontend bundle not found"}


def test_null_byte_path_falls_back_to_index(client: TestClient, static_bundle: Path):
    """Paths the filesystem rejects still get the root document"""
    response = client.get("/%00")
    assert response.status_code == 200
    assert response.text == (static_bundle / "index.html").read_text(encoding="utf-8")


def test_resolve_rejected_path_returns_index(static_bundle: Path):
    resolved = resolve_static_path(static_bundle, "assets/app\x00.js")
    assert resolved == (static_bundle / "index.html").resolve()
