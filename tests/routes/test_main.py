from fastapi.testclient import TestClient

from config.settings import settings
from main import app


def test_root_lists_endpoints():
    with TestClient(app) as client:
        resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["version"] == "1.0.0"
    assert body["endpoints"]["simulate"] == "/api/v1/simulate"


def test_startup_creates_reports_dir():
    assert settings.REPORTS_DIR.is_dir()
