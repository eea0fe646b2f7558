"""
Fixtures for API integration tests.

The app runs with a container whose repositories are the in-memory fakes;
hashing and token signing are the real implementations under test settings.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from bloglist.di.base_container import BaseContainer
from bloglist.di.providers import AuthProvider, BlogProvider, UserProvider
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.user_repository import UserRepository
from bloglist.domain.services.credential_hasher import CredentialHasher
from bloglist.domain.services.token_codec import TokenCodec

# Every module that imported get_container by name
CONTAINER_USERS = (
    "bloglist.main",
    "bloglist.api.v1.dependencies",
    "bloglist.api.v1.auth_controller",
    "bloglist.api.v1.user_controller",
    "bloglist.api.v1.blog_controller",
)


@pytest.fixture
def test_container(user_repo, blog_repo, hasher, token_codec):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(BlogRepository, blog_repo)
    container.register_singleton(CredentialHasher, hasher)
    container.register_singleton(TokenCodec, token_codec)
    AuthProvider.register(container)
    UserProvider.register(container)
    BlogProvider.register(container)
    return container


@pytest.fixture
def client(test_container):
    """Create test client backed by the in-memory container."""
    from bloglist.main import app

    patches = [patch(f"{module}.get_container", return_value=test_container) for module in CONTAINER_USERS]
    for p in patches:
        p.start()
    try:
        with TestClient(app) as c:
            yield c
    finally:
        for p in patches:
            p.stop()
