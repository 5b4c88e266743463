import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

INDEX_HTML = b"<!DOCTYPE html><html><body><div id=\"app\"></div></body></html>"


@pytest.fixture
def dist(tmp_path):
    """A small built SPA tree plus a file outside it."""
    root = tmp_path / "dist"
    (root / "assets").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "docs").mkdir()

    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "assets" / "app.js").write_bytes(b"console.log('app');\n")
    (root / "assets" / "style.css").write_bytes(b"body { margin: 0; }\n")
    (root / "img" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (root / "docs" / "index.html").write_bytes(b"<h1>docs</h1>")
    (root / ".env").write_bytes(b"SECRET=1\n")

    (tmp_path / "secret.txt").write_bytes(b"outside the static root")
    return root


@pytest.fixture
def settings(dist):
    return Settings(static_dir=dist)


@pytest.fixture
def client(settings):
    """Create a test client for the gateway app."""
    return TestClient(create_app(settings))


@pytest.fixture
def index_html():
    return INDEX_HTML
