"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Test settings (fixed session secret)
- Application and test client setup
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from payload_guard.api.main import create_app
from payload_guard.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment's secrets."""
    return Settings(session_secret_key="test-secret", debug=False)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create the full application."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
