"""
Shared pytest fixtures for lingualearner tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_lingualearner",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_timeout_ms = 1000
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.allowed_origins = ["*"]
    mock.environment = "test"
    mock.is_development = False
    mock.log_level = "WARNING"
    mock.api_base_url = "http://testserver"
    mock.session_file = str(tmp_path / "session.json")

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("lingualearner.core.config.get_settings", return_value=mock), patch(
        "lingualearner.core.security.get_settings", return_value=mock
    ), patch("lingualearner.client.session_store.get_settings", return_value=mock), patch(
        "lingualearner.client.api_client.get_settings", return_value=mock
    ):
        yield mock
