"""
Fixtures for HTTP-level tests.

The app is built without running its lifespan, and the container dependency
is replaced by one wired to in-memory repositories, so no MongoDB is needed.
"""
import pytest
from fastapi.testclient import TestClient

from lingualearner.api.v1.dependencies import get_container
from lingualearner.di.base_container import BaseContainer
from lingualearner.di.providers import AuthProvider, PostProvider, UserProvider
from lingualearner.domain.repositories import PostRepository, UserRepository
from lingualearner.main import create_application
from tests.fakes import InMemoryPostRepository, InMemoryUserRepository


@pytest.fixture
def container():
    container = BaseContainer()
    container.register_singleton(UserRepository, InMemoryUserRepository())
    container.register_singleton(PostRepository, InMemoryPostRepository())
    AuthProvider.register(container)
    UserProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """Create test client with the in-memory container."""
    app = create_application()
    app.dependency_overrides[get_container] = lambda: container
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(name="Alice", email="alice@lingua.io", password="secret123"):
        response = client.post("/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()["user"]

    return _register


@pytest.fixture
def login(client):
    def _login(email="alice@lingua.io", password="secret123"):
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
