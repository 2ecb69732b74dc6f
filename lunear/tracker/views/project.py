# ============================================
# tracker/views/project.py
# ============================================
from django.http import Http404

from tracker.intents import (
    PROJECT_SETTINGS_SCHEMA,
    PROJECTS_SCHEMA,
    AddNewMember,
    CreateProject,
    DeleteProject,
    RemoveMember,
    UpdateMemberRole,
    UpdateProject,
    UpdateProjectDetails,
)
from tracker.selectors.membership import MembershipSelector
from tracker.selectors.project import ProjectSelector
from tracker.serializers.project import (
    ProjectListOutputSerializer,
    ProjectMemberOutputSerializer,
    ProjectOutputSerializer,
)
from tracker.services.membership import MembershipService
from tracker.services.project import ProjectService
from tracker.views.base import RouteAPIView
from .utils import (
    action_responses, extend_schema, extend_schema_view, intent_request,
    loader_responses, path_str,
)


@extend_schema_view(
    get=extend_schema(
        tags=["Projects"],
        summary="Projects of the caller with role and issue counts",
        responses=loader_responses("{projects: [...]}"),
    ),
    post=extend_schema(
        tags=["Projects"],
        summary="create_project / delete_project / update_project",
        request=intent_request("ProjectsIntent", PROJECTS_SCHEMA),
        responses=action_responses(),
    ),
)
class ProjectListAPIView(RouteAPIView):
    """
    GET: List the caller's projects, oldest first
    POST: Create, delete or rename a project

    Request body (POST), by intent:
    - create_project: id (optional), name
    - delete_project: id
    - update_project: id, name (optional)
    """
    intents = PROJECTS_SCHEMA

    def load(self, request):
        projects = ProjectSelector.get_projects_for_user(request.user.pk)
        return {"projects": ProjectListOutputSerializer(projects, many=True).data}

    def perform(self, request, payload):
        if isinstance(payload, CreateProject):
            result = ProjectService.create_project(
                user=request.user,
                name=payload.name,
                id=payload.id
            )
        elif isinstance(payload, DeleteProject):
            result = ProjectService.delete_project(user=request.user, project_id=payload.id)
        elif isinstance(payload, UpdateProject):
            result = ProjectService.update_project(
                user=request.user,
                project_id=payload.id,
                name=payload.name or None
            )
        else:
            return self.invalid_intent()

        return self.respond(request, result)


@extend_schema_view(
    get=extend_schema(
        tags=["Projects"],
        summary="Project settings: details and members (admins only)",
        parameters=[path_str("project_id", "Project ID")],
        responses=loader_responses("{projectId, project, projectMember}"),
    ),
    post=extend_schema(
        tags=["Projects"],
        summary="update_project / add_new_member / update_member_role / remove_member",
        parameters=[path_str("project_id", "Project ID")],
        request=intent_request("ProjectSettingsIntent", PROJECT_SETTINGS_SCHEMA),
        responses=action_responses(),
    ),
)
class ProjectSettingsAPIView(RouteAPIView):
    """
    GET: Project details with members; 404 unless the caller is an ADMIN
    POST: Edit the project or manage its members (ADMIN only)

    Path params:
    - project_id: string

    Request body (POST), by intent:
    - update_project: name, description (optional)
    - add_new_member: userId, firstName (optional), lastName (optional)
    - update_member_role: userId, role (ADMIN/MEMBER)
    - remove_member: userId
    """
    intents = PROJECT_SETTINGS_SCHEMA

    def load(self, request, project_id):
        project = ProjectSelector.get_project_with_members(project_id)
        membership = MembershipSelector.get_membership(
            project_id=project_id,
            user_id=request.user.pk
        )
        if project is None or membership is None or not membership.is_admin:
            raise Http404("Project not found")

        return {
            "projectId": project_id,
            "project": ProjectOutputSerializer(project).data,
            "projectMember": ProjectMemberOutputSerializer(membership).data,
        }

    def perform(self, request, payload, project_id):
        if isinstance(payload, UpdateProjectDetails):
            result = ProjectService.update_project(
                user=request.user,
                project_id=project_id,
                name=payload.name,
                description=payload.description
            )
        elif isinstance(payload, AddNewMember):
            result = MembershipService.add_member(
                user=request.user,
                project_id=project_id,
                member_id=payload.user_id
            )
        elif isinstance(payload, UpdateMemberRole):
            result = MembershipService.update_member_role(
                user=request.user,
                project_id=project_id,
                member_id=payload.user_id,
                role=payload.role
            )
        elif isinstance(payload, RemoveMember):
            result = MembershipService.remove_member(
                user=request.user,
                project_id=project_id,
                member_id=payload.user_id
            )
        else:
            return self.invalid_intent()

        return self.respond(request, result, project_id=project_id)
