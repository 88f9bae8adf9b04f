"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cssmodules.config import CssModulesConfig, ModulesConfig
from cssmodules.models import LocalsConvention
from cssmodules.service import create_app


@pytest.fixture
def client() -> TestClient:
    config = CssModulesConfig(
        modules=ModulesConfig(
            local_ident_name="[name]_[local]",
            locals_convention=LocalsConvention.from_name("camelCase"),
        )
    )
    return TestClient(create_app(lambda: config))


GRAPH = {
    "app.css": {
        "id": "./app.css",
        "dependencies": [{"request": "./other.css", "module": "other.css"}],
    },
    "other.css": {"id": "./other.css"},
}


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ident_endpoint(client: TestClient) -> None:
    response = client.post("/ident", json={"file": "src/card.css", "locals": ["title", "body"]})
    assert response.status_code == 200
    assert response.json() == {"identifiers": {"title": "card_title", "body": "card_body"}}


def test_exports_endpoint_uses_configured_convention(client: TestClient) -> None:
    response = client.post(
        "/exports",
        json={"module": "app.css", "exports": {"btn-main": ["x"]}, "graph": GRAPH},
    )
    assert response.status_code == 200
    assert response.json()["code"] == (
        'module.exports = {\n  "btn-main": "x",\n  "btnMain": "x",\n};\n'
    )


def test_exports_endpoint_reports_internal_error(client: TestClient) -> None:
    response = client.post(
        "/exports",
        json={
            "module": "app.css",
            "exports": {"a": [{"import": "b", "from": "./gone.css"}]},
            "graph": GRAPH,
        },
    )
    assert response.status_code == 500
    assert "./gone.css" in response.json()["detail"]


def test_exports_endpoint_rejects_unknown_convention(client: TestClient) -> None:
    response = client.post(
        "/exports",
        json={"module": "app.css", "exports": {}, "graph": GRAPH, "convention": "snake"},
    )
    assert response.status_code == 400


def test_normalize_url_endpoint(client: TestClient) -> None:
    response = client.post(
        "/normalize-url", json={"values": ["foo%20bar", "data:a,%20", " \\41 .png "]}
    )
    assert response.status_code == 200
    assert response.json() == {"values": ["foo bar", "data:a,%20", "A.png"]}
