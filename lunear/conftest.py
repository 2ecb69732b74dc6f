import pytest
from rest_framework.test import APIClient

from accounts.models import User

ORIGIN = "http://testserver"


@pytest.fixture
def make_user(db):
    def _make(username, first_name="Test", last_name="User", password="pass"):
        return User.objects.create_user(
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name
        )
    return _make


@pytest.fixture
def user(make_user):
    return make_user("alice", "Alice", "Anders")


@pytest.fixture
def other_user(make_user):
    return make_user("bob", "Bob", "Brown")


@pytest.fixture
def anon_client():
    """Client sending a same-origin Origin header, as a browser form post would"""
    return APIClient(HTTP_ORIGIN=ORIGIN)


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient(HTTP_ORIGIN=ORIGIN)
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def api(client_for, user):
    return client_for(user)
