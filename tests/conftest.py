"""
Shared pytest fixtures for bloglist tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from bloglist.domain.models.principal import Principal
from bloglist.infrastructure.security import BcryptCredentialHasher, JwtTokenCodec
from tests.fakes import InMemoryBlogRepository, InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_bloglist_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_server_selection_timeout_ms = 100
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:3000"]

    with patch("bloglist.core.config.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def blog_repo():
    return InMemoryBlogRepository()


@pytest.fixture
def hasher(mock_settings):
    return BcryptCredentialHasher(rounds=mock_settings.bcrypt_rounds)


@pytest.fixture
def token_codec(mock_settings):
    return JwtTokenCodec(
        secret_key=mock_settings.jwt_secret_key,
        algorithm=mock_settings.jwt_algorithm,
        expire_minutes=mock_settings.access_token_expire_minutes,
    )


@pytest.fixture
def principal():
    return Principal(user_id="usr-1", username="mluukkai")
