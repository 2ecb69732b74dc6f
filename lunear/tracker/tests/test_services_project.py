import pytest
from unittest import mock
from django.core.exceptions import PermissionDenied
from django.db import IntegrityError

from tracker.models import Comment, Issue, Project, ProjectMember
from tracker.services.comment import CommentService
from tracker.services.issue import IssueService
from tracker.services.membership import MembershipService
from tracker.services.project import ProjectService


@pytest.mark.django_db
def test_create_project_makes_creator_admin(user):
    project, error = ProjectService.create_project(user=user, name="Web", id="client-id-1")
    assert error is None
    assert project.id == "client-id-1"

    membership = ProjectMember.objects.get(project=project, user=user)
    assert membership.role == ProjectMember.Role.ADMIN
    assert membership.invited_by is None


@pytest.mark.django_db
def test_create_project_generates_id(user):
    project, error = ProjectService.create_project(user=user, name="Web")
    assert error is None
    assert project.id
    assert Project.objects.filter(id=project.id).count() == 1


@pytest.mark.django_db
def test_create_project_is_atomic(user):
    with mock.patch.object(
        ProjectMember.objects, "create", side_effect=IntegrityError("membership insert failed")
    ):
        result = ProjectService.create_project(user=user, name="Web", id="atomic")

    assert not result.ok
    assert isinstance(result.error, IntegrityError)
    assert not Project.objects.filter(id="atomic").exists()


@pytest.mark.django_db
def test_create_project_duplicate_id_is_data_error(user, project):
    project_again, error = ProjectService.create_project(user=user, name="Other", id=project.id)
    assert project_again is None
    assert error is not None
    assert Project.objects.get(id=project.id).name == "Web"


@pytest.mark.django_db
def test_update_project_only_supplied_fields(user, project):
    Project.objects.filter(id=project.id).update(description="Frontend")

    updated, error = ProjectService.update_project(user=user, project_id=project.id, name="Website")
    assert error is None
    project.refresh_from_db()
    assert project.name == "Website"
    assert project.description == "Frontend"
    assert project.created_by == user


@pytest.mark.django_db
def test_update_project_requires_admin(project, member, other_user):
    with pytest.raises(PermissionDenied):
        ProjectService.update_project(user=other_user, project_id=project.id, name="Hacked")
    project.refresh_from_db()
    assert project.name == "Web"


@pytest.mark.django_db
def test_delete_project_creator_only_and_cascades(user, other_user, project, member, make_issue):
    issue = make_issue()
    Comment.objects.create(issue=issue, created_by=user, content="hi")

    # bob is a member but not the creator
    with pytest.raises(PermissionDenied):
        ProjectService.delete_project(user=other_user, project_id=project.id)
    assert Project.objects.filter(id=project.id).exists()

    _, error = ProjectService.delete_project(user=user, project_id=project.id)
    assert error is None
    assert not Project.objects.filter(id=project.id).exists()
    assert not Issue.objects.filter(project_id=project.id).exists()
    assert not ProjectMember.objects.filter(project_id=project.id).exists()
    assert not Comment.objects.exists()


@pytest.mark.django_db
def test_delete_project_even_by_promoted_admin_is_rejected(user, other_user, project, member):
    ProjectMember.objects.filter(id=member.id).update(role=ProjectMember.Role.ADMIN)
    with pytest.raises(PermissionDenied):
        ProjectService.delete_project(user=other_user, project_id=project.id)


@pytest.mark.django_db
def test_delete_missing_project_is_data_error(user):
    _, error = ProjectService.delete_project(user=user, project_id="missing")
    assert str(error.messages[0]) == "Project not found"


@pytest.mark.django_db
def test_scenario_invite_then_delete(user, other_user):
    """Creator invites a member; only the creator can delete the project"""
    project, _ = ProjectService.create_project(user=user, name="P")
    _, error = MembershipService.add_member(user=user, project_id=project.id, member_id=other_user.pk)
    assert error is None
    issue, _ = IssueService.create_issue(user=other_user, project_id=project.id, title="T")
    CommentService.create_comment(user=user, issue_id=issue.id, content="c")

    with pytest.raises(PermissionDenied):
        ProjectService.delete_project(user=other_user, project_id=project.id)

    _, error = ProjectService.delete_project(user=user, project_id=project.id)
    assert error is None
    assert not Project.objects.filter(id=project.id).exists()
    assert not Issue.objects.filter(id=issue.id).exists()
    assert not ProjectMember.objects.filter(user=other_user).exists()
