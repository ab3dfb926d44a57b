"""Shared pytest fixtures"""
import pytest
from fastapi.testclient import TestClient
from munsell_api.main import app


@pytest.fixture
def client():
    """Test client with the app lifespan (reference table loaded)"""
    with TestClient(app) as test_client:
        yield test_client
