import pytest
from fastapi.testclient import TestClient

from saute.api.analysis import get_analysis_service
from saute.main import app
from saute.services.analysis_service import AnalysisService

from tests.helpers import FakeVisionClient


@pytest.fixture
def fake_vision() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def client(fake_vision: FakeVisionClient):
    service = AnalysisService(client=fake_vision)
    app.dependency_overrides[get_analysis_service] = lambda: service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
