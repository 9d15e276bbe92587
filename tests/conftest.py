"""Common fixtures for the API tests."""
import itertools

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from core.roles import Role

User = get_user_model()


@pytest.fixture
def api_client():
    """Unauthenticated client."""
    return APIClient()


@pytest.fixture
def make_user(db):
    """Factory creating users with the given roles (Contributor by default)."""
    counter = itertools.count(1)

    def _make(username=None, roles=None, password="secret1", **extra):
        username = username or f"user{next(counter)}"
        return User.objects.create_user(
            username=username,
            email=f"{username}@example.com",
            password=password,
            first_name=username.capitalize(),
            last_name="Test",
            roles=roles or [Role.CONTRIBUTOR.value],
            **extra,
        )

    return _make


@pytest.fixture
def client_for():
    """Return an APIClient already authenticated as the given user."""

    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _client


@pytest.fixture
def admin(make_user):
    return make_user("admin", roles=[Role.ADMIN.value])


@pytest.fixture
def lead_editor(make_user):
    return make_user("lead", roles=[Role.LEAD_EDITOR.value])


@pytest.fixture
def editor(make_user):
    return make_user("editor", roles=[Role.EDITOR.value])


@pytest.fixture
def contributor(make_user):
    return make_user("contrib")


@pytest.fixture
def other_contributor(make_user):
    return make_user("outsider")


@pytest.fixture
def create_note(client_for):
    """Create a note through the API as the given user and return its JSON."""

    def _create(user, **payload):
        payload.setdefault("title", "T")
        response = client_for(user).post("/api/notes/", payload)
        assert response.status_code == 201, response.data
        return response.data

    return _create
