"""Tests for the REST API."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import pytest
from fastapi.testclient import TestClient

from fences.application.factory import ServiceFactory, reset_factory, set_factory
from fences.domain import Catalogue
from fences.domain.catalogue import GATE_PANELS_8MM, POSTS, STANDARD_PANELS
from fences.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


# =============================================================================
# POST /api/v1/calculate
# =============================================================================


class TestCalculate:
    def test_inline_fence(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"config": {"schema_version": "1.0", "shape": {"shape": "inline", "length": 3000}}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [p["width"] for p in data["fitting_results"][0]["panels"]] == [1400, 1400]
        assert data["bom"]["total"] == pytest.approx(266.75)

    def test_gated_fence(self, client: TestClient, inline_config_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/calculate", json={"config": inline_config_data})

        data = response.json()
        result = data["fitting_results"][0]
        assert result["gate"]["start"] == 2000
        assert len(result["posts"]) == 6
        assert data["runs"][0]["gate"]["width"] == 900

    def test_rectangle_run_ids(
        self, client: TestClient, rectangle_config_data: dict[str, Any]
    ) -> None:
        response = client.post("/api/v1/calculate", json={"config": rectangle_config_data})

        run_ids = [run["run_id"] for run in response.json()["runs"]]
        assert run_ids == ["side-1", "side-2", "side-3", "side-4"]

    def test_non_compliant_is_still_200(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "shape": {"shape": "inline", "length": 3000},
            "settings": {"max_gap_width": 50},
        }
        response = client.post("/api/v1/calculate", json={"config": config})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["bom"]["warnings"][0]["type"] == "NO_VALID_FIT"

    def test_invalid_config_returns_422(self, client: TestClient) -> None:
        config = {"schema_version": "1.0", "shape": {"shape": "inline", "length": -1}}
        response = client.post("/api/v1/calculate", json={"config": config})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "shape.length"

    def test_missing_config_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={})
        assert response.status_code == 422


# =============================================================================
# POST /api/v1/calculate/bom
# =============================================================================


class TestCalculateBom:
    @pytest.fixture
    def body(self) -> dict[str, Any]:
        return {"config": {"schema_version": "1.0", "shape": {"shape": "inline", "length": 3000}}}

    def test_text_by_default(self, client: TestClient, body: dict[str, Any]) -> None:
        response = client.post("/api/v1/calculate/bom", json=body)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "BILL OF MATERIALS" in response.text

    def test_csv(self, client: TestClient, body: dict[str, Any]) -> None:
        response = client.post("/api/v1/calculate/bom?format=csv", json=body)

        assert response.headers["content-type"].startswith("text/csv")
        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[-1][-1] == "266.75"

    def test_json(self, client: TestClient, body: dict[str, Any]) -> None:
        response = client.post("/api/v1/calculate/bom?format=json", json=body)

        assert response.headers["content-type"].startswith("application/json")
        assert json.loads(response.text)["subtotal"] == 242.50

    def test_unsupported_format(self, client: TestClient, body: dict[str, Any]) -> None:
        response = client.post("/api/v1/calculate/bom?format=pdf", json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["text", "csv", "json"]


# =============================================================================
# POST /api/v1/validate
# =============================================================================


class TestValidate:
    def test_valid(self, client: TestClient, inline_config_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"config": inline_config_data})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_schema_errors_reported_in_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"schema_version": "9.9"}}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        paths = [e["path"] for e in data["errors"]]
        assert "shape" in paths

    def test_gate_past_end(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "shape": {
                "shape": "inline",
                "length": 3000,
                "gate": {"position": 2500, "width": 900},
            },
        }
        data = client.post("/api/v1/validate", json={"config": config}).json()

        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "shape.gate.width"

    def test_warnings_carry_suggestion(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "shape": {"shape": "inline", "length": 150},
        }
        data = client.post("/api/v1/validate", json={"config": config}).json()

        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "shape.length"
        assert data["warnings"][0]["suggestion"]


# =============================================================================
# GET /api/v1/catalogue
# =============================================================================


def test_catalogue(client: TestClient) -> None:
    response = client.get("/api/v1/catalogue")

    assert response.status_code == 200
    data = response.json()
    assert len(data["standard_panels"]) == 39
    assert data["standard_panels"][0] == {
        "handle": "gp-12mm-0100mm",
        "width": 100.0,
        "height": 1200.0,
        "price": 31.05,
    }
    assert data["gate_panels"][-1]["handle"] == "gg-8mm-1000mm"
    assert data["posts"][0]["mount_type"] == "core-drilled"


class TestFactoryOverride:
    @pytest.fixture
    def only_1000mm(self) -> Catalogue:
        return Catalogue(
            standard_panels=[p for p in STANDARD_PANELS if p.width == 1000],
            gate_panels=GATE_PANELS_8MM,
            posts=POSTS,
        )

    def teardown_method(self) -> None:
        reset_factory()

    def test_catalogue_follows_set_factory(
        self, client: TestClient, only_1000mm: Catalogue
    ) -> None:
        assert len(client.get("/api/v1/catalogue").json()["standard_panels"]) == 39

        set_factory(ServiceFactory(catalogue=only_1000mm))
        data = client.get("/api/v1/catalogue").json()

        assert [p["handle"] for p in data["standard_panels"]] == ["gp-12mm-1000mm"]

    def test_calculate_follows_set_factory(
        self, client: TestClient, only_1000mm: Catalogue
    ) -> None:
        body = {"config": {"schema_version": "1.0", "shape": {"shape": "inline", "length": 2250}}}
        client.post("/api/v1/calculate", json=body)

        set_factory(ServiceFactory(catalogue=only_1000mm))
        data = client.post("/api/v1/calculate", json=body).json()

        assert [p["width"] for p in data["fitting_results"][0]["panels"]] == [1000, 1000]
