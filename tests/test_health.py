import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
from salesdoc.core.config import Settings
from salesdoc.main import create_app


@pytest.fixture(scope="module")
def client():
    app = create_app(Settings(_env_file=None, log_json=False))
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/v1/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_version_reports_formatting_defaults(client):
    data = client.get("/v1/version").json()
    assert data["name"] == "salesdoc-engine"
    assert data["default_locale"] == "en-IN"
    assert data["default_currency"] == "INR"


def test_request_id_is_echoed(client):
    response = client.get("/v1/health", headers={"X-Request-Id": "req-42"})
    assert response.headers["X-Request-Id"] == "req-42"


def test_request_id_is_generated(client):
    response = client.get("/v1/health")
    assert response.headers["X-Request-Id"]


def test_root_serves_json_links(client):
    response = client.get("/", headers={"Accept": "application/json"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "available"
    assert data["links"]["tax_options"].endswith("/v1/tax-options")


def test_root_serves_html(client):
    response = client.get("/", headers={"Accept": "text/html"})
    assert response.status_code == 200
    assert "salesdoc-engine" in response.text


def test_api_key_is_enforced_when_configured():
    app = create_app(Settings(_env_file=None, log_json=False, api_key="secret"))
    with TestClient(app) as client:
        denied = client.get("/v1/health")
        allowed = client.get("/v1/health", headers={"X-API-Key": "secret"})
    assert denied.status_code == 401
    assert denied.json()["error"]["code"] == "HTTP_ERROR"
    assert allowed.status_code == 200
