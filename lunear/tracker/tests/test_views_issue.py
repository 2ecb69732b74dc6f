import pytest
from datetime import timedelta
from django.utils import timezone

from tracker.models import Comment, Issue, Project, ProjectMember


@pytest.fixture
def backlog(make_issue, project):
    """Three issues in `project` with distinct priorities and creation times"""
    now = timezone.now()
    rows = [
        make_issue(id="low", title="Low", priority=Issue.Priority.LOW, status=Issue.Status.TODO),
        make_issue(id="urgent", title="Urgent", priority=Issue.Priority.URGENT, status=Issue.Status.DONE),
        make_issue(id="none", title="None", priority=Issue.Priority.NONE, status=Issue.Status.BACKLOG),
    ]
    for age, issue in enumerate(rows):
        Issue.objects.filter(id=issue.id).update(created_at=now - timedelta(days=3 - age))
    return rows


def _ids(resp):
    return [row["id"] for row in resp.json()["issues"]]


@pytest.mark.django_db
def test_issues_default_newest_first(api, backlog):
    resp = api.get("/app/issues/")
    assert resp.status_code == 200
    assert _ids(resp) == ["none", "urgent", "low"]
    assert resp.json()["projects"] == []

    row = resp.json()["issues"][0]
    assert set(row) == {"id", "createdAt", "projectId", "priority", "status", "title", "creator"}
    assert row["creator"] == "Alice Anders"


@pytest.mark.django_db
def test_issues_sort_by_priority(api, backlog):
    assert _ids(api.get("/app/issues/?sortBy=priority&order=asc")) == ["none", "low", "urgent"]
    assert _ids(api.get("/app/issues/?sortBy=priority")) == ["urgent", "low", "none"]


@pytest.mark.django_db
def test_issues_filters(api, backlog):
    assert _ids(api.get("/app/issues/?status=2&status=4&sortBy=status&order=asc")) == ["low", "urgent"]
    assert _ids(api.get("/app/issues/?status=4&exclusive=status&sortBy=created&order=asc")) == ["low", "none"]
    assert _ids(api.get("/app/issues/?priority=0&exclusive=priority&order=asc")) == ["low", "urgent"]


@pytest.mark.django_db
def test_issues_only_from_own_projects(api, backlog, carol):
    foreign = Project.objects.create(id="foreign", name="Foreign", created_by=carol)
    ProjectMember.objects.create(project=foreign, user=carol, role="ADMIN")
    Issue.objects.create(id="secret", project=foreign, created_by=carol, title="Secret")

    assert "secret" not in _ids(api.get("/app/issues/"))
    assert _ids(api.get("/app/issues/?project=foreign")) == []


@pytest.mark.django_db
def test_issues_project_options(api, user, project, backlog):
    older = Project.objects.create(id="older", name="Older", created_by=user)
    ProjectMember.objects.create(project=older, user=user, role="ADMIN")
    Project.objects.filter(id="older").update(created_at=timezone.now() - timedelta(days=30))
    newest = Project.objects.create(id="newest", name="Newest", created_by=user)
    ProjectMember.objects.create(project=newest, user=user, role="ADMIN")

    body = api.get("/app/issues/?project=older").json()
    assert body["issues"] == []
    # the selected project first, then the newest one; at least two options
    assert [p["id"] for p in body["projects"]] == ["older", "newest"]


@pytest.mark.django_db
@pytest.mark.parametrize("query", ["sortBy=title", "order=up", "status=7", "exclusive=project", "project=bad id"])
def test_issues_bad_params(api, query):
    assert api.get(f"/app/issues/?{query}").status_code == 400


@pytest.mark.django_db
def test_create_issue_action(api, project):
    resp = api.post("/app/issues/", {
        "intent": "create_issue", "id": "client-1", "projectId": project.id,
        "status": "1", "priority": "0", "title": "New one",
    })
    assert resp.status_code == 200, resp.content
    assert resp.json()["status"] == "success"
    assert _ids_from_data(resp) == ["client-1"]

    issue = Issue.objects.get(id="client-1")
    assert (issue.status, issue.priority) == (Issue.Status.BACKLOG, Issue.Priority.NONE)


def _ids_from_data(resp):
    return [row["id"] for row in resp.json()["data"]["issues"]]


@pytest.mark.django_db
def test_create_issue_outside_membership(client_for, carol, project):
    resp = client_for(carol).post("/app/issues/", {
        "intent": "create_issue", "projectId": project.id, "status": 1, "priority": 0, "title": "x",
    })
    assert resp.status_code == 401
    assert not Issue.objects.exists()


@pytest.mark.django_db
def test_update_and_delete_issue_actions(api, project, issue):
    resp = api.post("/app/issues/", {
        "intent": "update_issue", "id": issue.id, "projectId": project.id, "priority": "3",
    })
    assert resp.status_code == 200
    issue.refresh_from_db()
    assert issue.priority == Issue.Priority.HIGH
    assert issue.title == "Login fails"

    resp = api.post("/app/issues/", {"intent": "delete_issue", "id": issue.id, "projectId": project.id})
    assert resp.status_code == 200
    assert resp.json()["data"]["issues"] == []


@pytest.mark.django_db
def test_issue_detail_loader(api, user, other_user, issue, member):
    Comment.objects.create(id="c-old", issue=issue, created_by=user, content="first")
    Comment.objects.create(id="c-new", issue=issue, created_by=other_user, content="second")
    Comment.objects.filter(id="c-old").update(created_at=timezone.now() - timedelta(hours=1))

    resp = api.get(f"/app/issues/{issue.id}/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["issue"]["title"] == "Login fails"
    assert body["issue"]["project"] == {"id": "proj-web", "name": "Web", "role": "ADMIN"}
    assert body["issue"]["creator"] == "Alice Anders"
    assert body["comments"] == [
        {"id": "c-new", "content": "second", "createdBy": other_user.pk, "creator": "Bob Brown"},
        {"id": "c-old", "content": "first", "createdBy": user.pk, "creator": "Alice Anders"},
    ]


@pytest.mark.django_db
def test_issue_detail_not_visible(client_for, carol, issue):
    assert client_for(carol).get(f"/app/issues/{issue.id}/").status_code == 404
    assert client_for(carol).get("/app/issues/missing/").status_code == 404


@pytest.mark.django_db
def test_issue_detail_edits(api, issue):
    url = f"/app/issues/{issue.id}"

    resp = api.post(url, {"intent": "update_title", "title": "Login broken"})
    assert resp.json()["data"]["issue"]["title"] == "Login broken"

    resp = api.post(url, {"intent": "update_description"})
    assert resp.status_code == 200
    issue.refresh_from_db()
    assert issue.description == ""

    resp = api.post(url, {"intent": "update_issue", "status": "3"})
    assert resp.json()["data"]["issue"]["status"] == Issue.Status.IN_PROGRESS

    resp = api.post(url, {"intent": "update_title", "title": ""})
    assert resp.status_code == 400


@pytest.mark.django_db
def test_issue_detail_comments(api, issue):
    url = f"/app/issues/{issue.id}/"

    resp = api.post(url, {"intent": "create_comment", "id": "cm-1", "content": "On it"})
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()["data"]["comments"]] == ["cm-1"]

    resp = api.post(url, {"intent": "delete_comment", "id": "cm-1"})
    assert resp.json()["data"]["comments"] == []


@pytest.mark.django_db
def test_issue_detail_delete_redirects(api, user, issue):
    Comment.objects.create(issue=issue, created_by=user, content="bye")

    resp = api.post(f"/app/issues/{issue.id}/", {"intent": "delete_issue"})
    assert resp.status_code == 302
    assert resp["Location"] == "/app/issues"
    assert not Issue.objects.filter(id=issue.id).exists()
    assert not Comment.objects.exists()

    # the redirect target resolves without a trailing slash
    assert api.get("/app/issues").status_code == 200


@pytest.mark.django_db
def test_issue_detail_unauthorized_edit(client_for, carol, issue):
    resp = client_for(carol).post(f"/app/issues/{issue.id}/", {"intent": "update_title", "title": "x"})
    assert resp.status_code == 401


@pytest.mark.django_db
def test_delete_comment_of_another_issue(api, user, issue, make_issue):
    other = make_issue(id="issue-2", title="Signup fails")
    Comment.objects.create(id="cm-2", issue=other, created_by=user, content="Elsewhere")

    resp = api.post(f"/app/issues/{issue.id}/", {"intent": "delete_comment", "id": "cm-2"})
    assert resp.status_code == 200
    assert resp.json()["toast"]["message"] == "Comment not found"
    assert Comment.objects.filter(id="cm-2").exists()
