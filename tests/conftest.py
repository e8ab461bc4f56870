"""Pytest fixtures for API and service tests."""

import os
import pytest
from unittest.mock import AsyncMock

# Settings require a key at import time
os.environ.setdefault("GROQ_API_KEY", "test-groq-key-for-unit-tests")

from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402
from app.core.config import Settings  # noqa: E402
from app.core.interfaces.completion_service import CompletionService  # noqa: E402
from app.services.ai.learning_service import LearningContentService  # noqa: E402
from app.utils.dependencies import get_learning_service, clear_service_cache  # noqa: E402


@pytest.fixture
def test_settings():
    """Settings with defaults and a dummy key."""
    return Settings(groq_api_key="test-groq-key")


@pytest.fixture
def mock_completion():
    """Completion gateway stub; set complete.return_value or side_effect per test."""
    return AsyncMock(spec=CompletionService)


@pytest.fixture
def learning_service(mock_completion, test_settings):
    """Learning service backed by the completion stub."""
    return LearningContentService(mock_completion, test_settings)


@pytest.fixture
def client(learning_service):
    """TestClient with the learning service wired to the completion stub."""
    app.dependency_overrides[get_learning_service] = lambda: learning_service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    clear_service_cache()
