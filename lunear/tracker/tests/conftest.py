import pytest

from tracker.models import Issue, Project, ProjectMember


@pytest.fixture
def carol(make_user):
    return make_user("carol", "Carol", "Chen")


@pytest.fixture
def project(db, user):
    """Project created by `user` (alice), who is its ADMIN"""
    project = Project.objects.create(id="proj-web", name="Web", created_by=user)
    ProjectMember.objects.create(project=project, user=user, role=ProjectMember.Role.ADMIN)
    return project


@pytest.fixture
def member(project, other_user, user):
    """`other_user` (bob) as a plain MEMBER of `project`"""
    return ProjectMember.objects.create(
        project=project,
        user=other_user,
        role=ProjectMember.Role.MEMBER,
        invited_by=user
    )


@pytest.fixture
def make_issue(project, user):
    def _make(title="Bug", **kwargs):
        kwargs.setdefault("project", project)
        kwargs.setdefault("created_by", user)
        return Issue.objects.create(title=title, **kwargs)
    return _make


@pytest.fixture
def issue(make_issue):
    return make_issue(id="issue-1", title="Login fails")
