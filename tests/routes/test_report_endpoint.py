import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import report as report_endpoint
from api.routes import simulation as simulation_endpoint


@pytest.fixture(scope="module")
def client():
    app = FastAPI()
    app.include_router(simulation_endpoint.router)
    app.include_router(report_endpoint.router)

    with TestClient(app) as c:
        yield c


def test_report_download(client: TestClient):
    sim = client.post("/api/v1/zones/abids-road/simulate", json={"selections": {"banOpenBurning": True}})
    assert sim.status_code == 200
    result = sim.json()

    resp = client.post("/api/v1/report", json={"result": result})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.content.startswith(b"%PDF")

    date = result["generatedAt"][:10]
    assert f'filename="Air_Quality_Report_abids-road_{date}.pdf"' in resp.headers["content-disposition"]


def test_report_filename_header_is_sanitized(client: TestClient):
    result = client.post("/api/v1/zones/charminar/simulate", json={"selections": {}}).json()
    result["zoneId"] = 'old "city" 7'

    resp = client.post("/api/v1/report", json={"result": result})
    assert resp.status_code == 200
    date = result["generatedAt"][:10]
    assert resp.headers["content-disposition"] == f'attachment; filename="Air_Quality_Report_old__city__7_{date}.pdf"'


def test_report_without_result(client: TestClient):
    resp = client.post("/api/v1/report", json={"result": None})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please run a simulation first by selecting interventions"


def test_report_empty_body_field(client: TestClient):
    resp = client.post("/api/v1/report", json={})
    assert resp.status_code == 400
