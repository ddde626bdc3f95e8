"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from typing import Callable
from fastapi.testclient import TestClient
from collection_gateway.api.dependencies import get_clock
from collection_gateway.api.main import create_app
from collection_gateway.config import Settings
from collection_gateway.utils.clock import FixedClock


# Noon UTC so +/- a few hours stays on the same calendar day
FIXED_NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at FIXED_NOW; tests move it with clock.advance()"""
    return FixedClock(FIXED_NOW)


@pytest.fixture(params=["memory", "sqlalchemy"])
def app_settings(request) -> Settings:
    """Empty store on each backend"""
    return Settings(storage_backend=request.param, database_url="sqlite://", seed_sample_data=False)


@pytest.fixture
def client(app_settings: Settings, clock: FixedClock) -> TestClient:
    """Create FastAPI test client with a fixed clock"""
    app = create_app(app_settings)
    app.dependency_overrides[get_clock] = lambda: clock
    return TestClient(app)


@pytest.fixture
def seeded_client(clock: FixedClock) -> TestClient:
    """Client over the in-memory store with sample data loaded"""
    app = create_app(Settings(storage_backend="memory", seed_sample_data=True))
    app.dependency_overrides[get_clock] = lambda: clock
    return TestClient(app)


@pytest.fixture
def create_student(client: TestClient) -> Callable[..., dict]:
    """POST a student and return the response body"""

    def _create(name: str = "Alice", age: int = 17, sex: bool = True, fear_factor: float = 1) -> dict:
        response = client.post(
            "/api/student",
            json={"name": name, "age": age, "sex": sex, "fearFactor": fear_factor},
        )
        assert response.status_code == 201
        return response.json()

    return _create


@pytest.fixture
def create_collector(client: TestClient) -> Callable[..., dict]:
    """POST a collector and return the response body"""

    def _create(name: str, seniority: int) -> dict:
        response = client.post("/api/collector", json={"name": name, "seniority": seniority})
        assert response.status_code == 201
        return response.json()

    return _create

