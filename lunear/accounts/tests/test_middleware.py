import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import Session
from accounts.services.auth import Authenticator
from lunear.middleware import verify_request_origin


@pytest.fixture
def signed_in_client(user, anon_client):
    session = Authenticator.from_settings().create_session(user)
    anon_client.cookies["auth_session"] = session.id
    return anon_client, session


def test_verify_request_origin():
    assert verify_request_origin("https://lunear.app", ["lunear.app"])
    assert not verify_request_origin("https://evil.example", ["lunear.app"])
    assert not verify_request_origin(None, ["lunear.app"])
    assert not verify_request_origin("null", ["lunear.app"])


@pytest.mark.django_db
def test_post_without_origin_is_forbidden(user):
    resp = APIClient().post("/auth/sign-in", {"userName": "alice", "password": "pass"})
    assert resp.status_code == 403


@pytest.mark.django_db
def test_post_with_foreign_origin_is_forbidden(user):
    client = APIClient(HTTP_ORIGIN="https://evil.example")
    resp = client.post("/auth/sign-in", {"userName": "alice", "password": "pass"})
    assert resp.status_code == 403


@pytest.mark.django_db
def test_post_with_same_origin_passes(user):
    client = APIClient(HTTP_ORIGIN="http://testserver")
    resp = client.post("/auth/sign-in", {"userName": "alice", "password": "pass"})
    assert resp.status_code == 302
    assert resp["Location"] == "/"


@pytest.mark.django_db
def test_get_skips_origin_check(user):
    assert APIClient().get("/").status_code == 200


@pytest.mark.django_db
def test_session_cookie_signs_in(signed_in_client, user):
    client, _ = signed_in_client
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["isSignedIn"] is True
    assert body["user"]["userName"] == "alice"
    # not in the refresh window: no cookie re-issued
    assert "auth_session" not in resp.cookies


@pytest.mark.django_db
def test_fresh_session_reissues_cookie(signed_in_client):
    client, session = signed_in_client
    Session.objects.filter(id=session.id).update(expires_at=timezone.now() + timedelta(days=2))

    resp = client.get("/")
    assert resp.json()["isSignedIn"] is True
    assert resp.cookies["auth_session"].value == session.id
    assert resp.cookies["auth_session"]["httponly"]


@pytest.mark.django_db
def test_expired_session_is_anonymous(signed_in_client):
    client, session = signed_in_client
    Session.objects.filter(id=session.id).update(expires_at=timezone.now() - timedelta(minutes=1))

    resp = client.get("/")
    assert resp.json()["isSignedIn"] is False
    assert resp.cookies["auth_session"].value == ""
    assert not Session.objects.filter(id=session.id).exists()


@pytest.mark.django_db
def test_unknown_token_gets_blank_cookie(anon_client):
    anon_client.cookies["auth_session"] = "does-not-exist"
    resp = anon_client.get("/")
    assert resp.json()["isSignedIn"] is False
    assert resp.cookies["auth_session"].value == ""


@pytest.mark.django_db
def test_protected_route_redirects_to_sign_in(anon_client):
    resp = anon_client.get("/app/projects/")
    assert resp.status_code == 302
    assert resp["Location"] == "/auth/sign-in"

    resp = anon_client.post("/app/projects/", {"intent": "create_project", "name": "Web"})
    assert resp.status_code == 302
