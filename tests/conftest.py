"""
Pytest fixtures for the Workout Suggestion API tests.

Provides the test app/client with auth overridden, and fake repositories
wired into the SuggestWorkout use case through dependency_overrides.
"""

from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_current_user,
    get_equipment_repo,
    get_exercise_repo,
    get_history_repo,
    get_injury_repo,
    get_preference_repo,
    get_profile_repo,
    get_supabase_client_required,
)
from backend.main import create_app
from backend.settings import Settings, get_settings
from tests.fakes import (
    FakeEquipmentRepository,
    FakeExerciseRepository,
    FakeHistoryRepository,
    FakeInjuryRepository,
    FakePreferenceRepository,
    FakeProfileRepository,
    create_catalog,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables and drop cached settings between tests."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


# ---------------------------------------------------------------------------
# Fake Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    return FakeExerciseRepository(create_catalog())


@pytest.fixture
def history_repo() -> FakeHistoryRepository:
    return FakeHistoryRepository()


@pytest.fixture
def equipment_repo() -> FakeEquipmentRepository:
    return FakeEquipmentRepository()


@pytest.fixture
def injury_repo() -> FakeInjuryRepository:
    return FakeInjuryRepository()


@pytest.fixture
def preference_repo() -> FakePreferenceRepository:
    return FakePreferenceRepository()


@pytest.fixture
def profile_repo() -> FakeProfileRepository:
    return FakeProfileRepository()


@pytest.fixture
def client(
    app,
    exercise_repo,
    history_repo,
    equipment_repo,
    injury_repo,
    preference_repo,
    profile_repo,
) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient with auth and every repository faked.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    app.dependency_overrides[get_history_repo] = lambda: history_repo
    app.dependency_overrides[get_equipment_repo] = lambda: equipment_repo
    app.dependency_overrides[get_injury_repo] = lambda: injury_repo
    app.dependency_overrides[get_preference_repo] = lambda: preference_repo
    app.dependency_overrides[get_profile_repo] = lambda: profile_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unauthenticated_client(app) -> Generator[TestClient, None, None]:
    """TestClient with real auth; only the database client is mocked."""
    app.dependency_overrides.clear()
    app.dependency_overrides[get_supabase_client_required] = lambda: MagicMock()
    yield TestClient(app)
    app.dependency_overrides.clear()
