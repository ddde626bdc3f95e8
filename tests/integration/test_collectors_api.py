"""Integration tests for /api/collector"""

import pytest
from fastapi.testclient import TestClient


def test_create_collector(client: TestClient):
    response = client.post("/api/collector", json={"name": "Sam Kushi", "seniority": 2})

    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["name"] == "Sam Kushi"
    assert data["seniority"] == 2


@pytest.mark.parametrize("seniority", [1, 11, "senior", None])
def test_create_collector_rejects_out_of_range_seniority(client: TestClient, seniority):
    response = client.post("/api/collector", json={"name": "Sam", "seniority": seniority})
    assert response.status_code == 400


def test_create_collector_requires_name(client: TestClient):
    response = client.post("/api/collector", json={"name": "", "seniority": 5})
    assert response.status_code == 400


def test_list_collectors_in_insertion_order(client: TestClient, create_collector):
    ids = [create_collector(name, seniority)["id"] for name, seniority in [("A", 10), ("B", 2), ("C", 4)]]

    response = client.get("/api/collector")

    assert [c["id"] for c in response.json()] == ids


def test_get_collector(client: TestClient, create_collector):
    collector = create_collector("Peter", 10)

    assert client.get(f"/api/collector/{collector['id']}").json() == collector
    response = client.get("/api/collector/missing")
    assert response.status_code == 404
    assert response.json() == {"detail": "Collector not found"}


def test_replace_collector(client: TestClient, create_collector):
    collector = create_collector("Peter", 10)

    response = client.put(f"/api/collector/{collector['id']}", json={"name": "Peter S.", "seniority": 8})

    assert response.status_code == 200
    assert response.json() == {"id": collector["id"], "name": "Peter S.", "seniority": 8}


def test_replace_collector_validates_seniority(client: TestClient, create_collector):
    collector = create_collector("Peter", 10)
    response = client.put(f"/api/collector/{collector['id']}", json={"name": "Peter", "seniority": 12})
    assert response.status_code == 400


def test_replace_unknown_collector(client: TestClient):
    response = client.put("/api/collector/missing", json={"name": "X", "seniority": 5})
    assert response.status_code == 404
    assert response.json()["detail"] == "Collector not found"


def test_delete_collector(client: TestClient, create_collector):
    collector = create_collector("Peter", 10)

    assert client.delete(f"/api/collector/{collector['id']}").status_code == 204
    assert client.get(f"/api/collector/{collector['id']}").status_code == 404
    assert client.delete(f"/api/collector/{collector['id']}").status_code == 404
