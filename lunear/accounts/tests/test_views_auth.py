import pytest

from accounts.models import Session, User


@pytest.mark.django_db
def test_sign_up_creates_user_and_session(anon_client):
    resp = anon_client.post("/auth/sign-up", {
        "userName": "carol",
        "password": "secret",
        "confirmPassword": "secret",
        "firstName": "Carol",
        "lastName": "Chen",
    })
    assert resp.status_code == 302, resp.content
    assert resp["Location"] == "/"

    user = User.objects.get(username="carol")
    assert user.check_password("secret")
    assert user.password.startswith("argon2")
    assert Session.objects.filter(user=user, id=resp.cookies["auth_session"].value).exists()


@pytest.mark.django_db
def test_sign_up_password_mismatch(anon_client):
    resp = anon_client.post("/auth/sign-up", {
        "userName": "carol",
        "password": "secret",
        "confirmPassword": "other",
        "firstName": "Carol",
        "lastName": "Chen",
    })
    assert resp.status_code == 400
    assert "confirmPassword" in resp.json()["errors"]
    assert not User.objects.filter(username="carol").exists()


@pytest.mark.django_db
def test_sign_up_duplicate_username(anon_client, user):
    resp = anon_client.post("/auth/sign-up", {
        "userName": "alice",
        "password": "x",
        "confirmPassword": "x",
        "firstName": "Other",
        "lastName": "Alice",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "error"
    assert "already taken" in body["toast"]["message"]
    # first user is still there, unchanged
    assert User.objects.get(username="alice").first_name == "Alice"


@pytest.mark.django_db
def test_sign_in(anon_client, user):
    resp = anon_client.post("/auth/sign-in", {"userName": "alice", "password": "pass"})
    assert resp.status_code == 302
    assert resp["Location"] == "/"
    assert Session.objects.filter(user=user).count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("username,password", [("alice", "wrong"), ("nobody", "pass")])
def test_sign_in_rejected(anon_client, user, username, password):
    resp = anon_client.post("/auth/sign-in", {"userName": username, "password": password})
    assert resp.status_code == 200
    assert resp.json()["toast"]["message"] == "Incorrect username or password"
    assert not Session.objects.exists()


@pytest.mark.django_db
def test_sign_out(anon_client, user):
    anon_client.post("/auth/sign-in", {"userName": "alice", "password": "pass"})
    assert Session.objects.count() == 1

    resp = anon_client.post("/sign-out")
    assert resp.status_code == 302
    assert resp["Location"] == "/"
    assert resp.cookies["auth_session"].value == ""
    assert not Session.objects.exists()


@pytest.mark.django_db
def test_sign_out_without_session(anon_client):
    resp = anon_client.post("/sign-out")
    assert resp.status_code == 302
    assert resp["Location"] == "/auth/sign-in"


@pytest.mark.django_db
def test_root_loader_anonymous(anon_client):
    resp = anon_client.get("/")
    assert resp.json() == {
        "appName": "Lunear",
        "isSignedIn": False,
        "user": None,
        "requestInfo": {"userPrefs": {"theme": None}},
    }


@pytest.mark.django_db
def test_root_loader_never_exposes_password(api):
    body = api.get("/").json()
    assert body["isSignedIn"] is True
    assert "password" not in body["user"]


@pytest.mark.django_db
def test_theme_switch(anon_client):
    resp = anon_client.post("/resources/theme-switch", {"theme": "dark"})
    assert resp.status_code == 200
    assert resp.json() == {"theme": "dark"}
    assert resp.cookies["en_theme"].value == "dark"
    assert resp.cookies["en_theme"]["max-age"] == 31536000

    assert anon_client.get("/").json()["requestInfo"]["userPrefs"]["theme"] == "dark"


@pytest.mark.django_db
def test_theme_switch_system_clears_cookie(anon_client):
    anon_client.cookies["en_theme"] = "light"
    resp = anon_client.post("/resources/theme-switch", {"theme": "system", "redirectTo": "/app/issues"})
    assert resp.status_code == 302
    assert resp["Location"] == "/app/issues"
    assert resp.cookies["en_theme"].value == ""


@pytest.mark.django_db
def test_theme_switch_invalid(anon_client):
    resp = anon_client.post("/resources/theme-switch", {"theme": "sepia"})
    assert resp.status_code == 400
    assert "theme" in resp.json()["errors"]
