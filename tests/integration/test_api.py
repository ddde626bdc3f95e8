"""Integration tests for operational endpoints and cross-cutting behavior"""

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "collection-gateway"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.get("/api/student")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "collection_appointment" in response.text
    assert "http_request_duration_seconds" in response.text


def test_request_id_header_is_generated(client: TestClient):
    response = client.get("/api/collector")
    assert response.headers["X-Request-ID"]


def test_request_id_header_is_propagated(client: TestClient):
    response = client.get("/api/collector", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_validation_errors_answer_400(client: TestClient):
    response = client.post("/api/collector", json={"name": "Sam"})
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert any(error["loc"][-1] == "seniority" for error in errors)


def test_empty_store_lists(client: TestClient):
    for path in ("/api/student", "/api/collector", "/api/debt", "/api/appointment"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == []
