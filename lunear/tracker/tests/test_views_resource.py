import pytest
from datetime import timedelta
from django.utils import timezone

from tracker.models import Project, ProjectMember


@pytest.mark.django_db
def test_filter_users(api, user, other_user, carol, project, member):
    resp = api.get("/resources/filter-users?q=o")
    assert resp.status_code == 200
    names = sorted(u["firstName"] for u in resp.json())
    assert names == ["Bob", "Carol"]
    assert all("password" not in u for u in resp.json())

    # members of the project are left out
    resp = api.get(f"/resources/filter-users?q=o&projectId={project.id}")
    assert [u["userName"] for u in resp.json()] == ["carol"]


@pytest.mark.django_db
def test_filter_users_empty_query(api, carol):
    assert api.get("/resources/filter-users").json() == []
    assert api.get("/resources/filter-users?q=").json() == []


@pytest.mark.django_db
def test_filter_projects(api, user, carol):
    now = timezone.now()
    for i in range(7):
        project = Project.objects.create(id=f"web-{i}", name=f"Web {i}", created_by=user)
        ProjectMember.objects.create(project=project, user=user, role="ADMIN")
        Project.objects.filter(id=project.id).update(created_at=now - timedelta(days=i))
    Project.objects.create(id="web-x", name="Web X", created_by=carol)

    resp = api.get("/resources/filter-projects?q=web")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == ["web-0", "web-1", "web-2", "web-3", "web-4"]
    assert set(resp.json()[0]) == {"id", "name"}

    assert api.get("/resources/filter-projects?q=").json() == []


@pytest.mark.django_db
def test_resources_require_sign_in(anon_client):
    resp = anon_client.get("/resources/filter-users?q=a")
    assert resp.status_code == 302
    assert resp["Location"] == "/auth/sign-in"


@pytest.mark.django_db
def test_app_index(api, anon_client):
    assert api.get("/app/").json()["user"]["userName"] == "alice"
    assert anon_client.get("/app").status_code == 302


@pytest.mark.django_db
def test_openapi_schema(api):
    resp = api.get("/api/schema/?format=json")
    assert resp.status_code == 200
