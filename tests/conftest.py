import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.llm.client import get_model_client
from app.main import app


@pytest.fixture
def profile_payload():
    return {
        "name": "Jo",
        "age": 16,
        "position": "Guard",
        "level": "Intermediate",
        "improvement": "ball handling",
        "availableDays": [{"day": "monday", "hours": 1, "timeOfDay": ["Evening"]}],
    }


@pytest.fixture
def api():
    """TestClient factory: `api(model_client, timeout_seconds=...)`."""

    def make(model_client, timeout_seconds: float = 50.0) -> TestClient:
        app.dependency_overrides[get_model_client] = lambda: model_client
        app.dependency_overrides[get_settings] = lambda: Settings(api_timeout_seconds=timeout_seconds)
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()
