# ============================================
# tracker/views/issue.py
# ============================================
from django.http import Http404
from drf_spectacular.types import OpenApiTypes

from lunear.responses import redirect
from tracker.intents import (
    ISSUE_DETAIL_SCHEMA,
    ISSUES_SCHEMA,
    CreateComment,
    CreateIssue,
    DeleteComment,
    DeleteCurrentIssue,
    DeleteIssue,
    UpdateDescription,
    UpdateIssue,
    UpdateIssueFields,
    UpdateTitle,
)
from tracker.selectors.comment import CommentSelector
from tracker.selectors.issue import IssueSelector
from tracker.selectors.project import ProjectSelector
from tracker.serializers.comment import CommentOutputSerializer
from tracker.serializers.issue import (
    IssueFilterSerializer,
    IssueListOutputSerializer,
    IssueOutputSerializer,
)
from tracker.serializers.project import ProjectOptionSerializer
from tracker.services.comment import CommentService
from tracker.services.issue import IssueService
from tracker.services.membership import require_member
from tracker.views.base import RouteAPIView
from .utils import (
    action_responses, extend_schema, extend_schema_view, intent_request,
    loader_responses, path_str, q_list, q_str,
)

ISSUES_URL = "/app/issues"

FILTER_PARAMETERS = [
    q_list("status", "Status values to keep (or drop, see exclusive)", OpenApiTypes.INT),
    q_list("priority", "Priority values to keep (or drop, see exclusive)", OpenApiTypes.INT),
    q_list("project", "Project IDs to keep"),
    q_list("exclusive", "Turn the status and/or priority filter into NOT IN"),
    q_str("sortBy", "priority | status | created | updated (default created)"),
    q_str("order", "asc | desc (default desc)"),
]


@extend_schema_view(
    get=extend_schema(
        tags=["Issues"],
        summary="Issues in the caller's projects, filtered and sorted",
        parameters=FILTER_PARAMETERS,
        responses=loader_responses("{issues: [...], projects: [...]}"),
    ),
    post=extend_schema(
        tags=["Issues"],
        summary="create_issue / delete_issue / update_issue",
        parameters=FILTER_PARAMETERS,
        request=intent_request("IssuesIntent", ISSUES_SCHEMA),
        responses=action_responses(),
    ),
)
class IssueListAPIView(RouteAPIView):
    """
    GET: List issues with filters
    POST: Create, delete or update an issue

    Query params:
    - status, priority, project: repeated keys (optional)
    - exclusive: status and/or priority, repeated (optional)
    - sortBy: priority | status | created | updated
    - order: asc | desc

    Request body (POST), by intent:
    - create_issue: id (optional), projectId, status, priority, title, description (optional)
    - delete_issue: projectId, id
    - update_issue: id, projectId, priority, status, title, description (all optional but id/projectId)
    """
    intents = ISSUES_SCHEMA

    def load(self, request):
        serializer = IssueFilterSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        filters = serializer.validated_data

        issues = IssueSelector.get_issues_list(
            user_id=request.user.pk,
            statuses=filters['status'],
            priorities=filters['priority'],
            project_ids=filters['project'],
            exclusive=filters['exclusive'],
            sort_by=filters['sort_by'],
            order=filters['order']
        )
        projects = ProjectSelector.get_project_options(
            user_id=request.user.pk,
            selected_ids=filters['project']
        )
        return {
            "issues": IssueListOutputSerializer(issues, many=True).data,
            "projects": ProjectOptionSerializer(projects, many=True).data,
        }

    def perform(self, request, payload):
        require_member(project_id=payload.project_id, user=request.user)

        if isinstance(payload, CreateIssue):
            result = IssueService.create_issue(
                user=request.user,
                project_id=payload.project_id,
                title=payload.title,
                status=payload.status,
                priority=payload.priority,
                description=payload.description or '',
                id=payload.id
            )
        elif isinstance(payload, DeleteIssue):
            result = IssueService.delete_issue(user=request.user, issue_id=payload.id)
        elif isinstance(payload, UpdateIssue):
            result = IssueService.update_issue(
                user=request.user,
                issue_id=payload.id,
                project_id=payload.project_id,
                title=payload.title,
                description=payload.description,
                status=payload.status,
                priority=payload.priority
            )
        else:
            return self.invalid_intent()

        return self.respond(request, result)


@extend_schema_view(
    get=extend_schema(
        tags=["Issues"],
        summary="Issue with its comments, newest first",
        parameters=[path_str("issue_id", "Issue ID")],
        responses=loader_responses("{issue, comments: [...]}"),
    ),
    post=extend_schema(
        tags=["Issues"],
        summary="delete_issue / update_title / update_description / create_comment / delete_comment / update_issue",
        parameters=[path_str("issue_id", "Issue ID")],
        request=intent_request("IssueDetailIntent", ISSUE_DETAIL_SCHEMA),
        responses=action_responses(),
    ),
)
class IssueDetailAPIView(RouteAPIView):
    """
    GET: Retrieve issue details and comments
    POST: Edit the issue, delete it, or add/remove comments

    Path params:
    - issue_id: string
    """
    intents = ISSUE_DETAIL_SCHEMA

    def load(self, request, issue_id):
        issue = IssueSelector.get_issue_for_user(issue_id=issue_id, user_id=request.user.pk)
        if issue is None:
            raise Http404("Issue not found")

        comments = CommentSelector.get_comments_for_issue(
            issue_id=issue_id,
            user_id=request.user.pk
        )
        return {
            "issue": IssueOutputSerializer(issue).data,
            "comments": CommentOutputSerializer(comments, many=True).data,
        }

    def perform(self, request, payload, issue_id):
        if isinstance(payload, DeleteCurrentIssue):
            result = IssueService.delete_issue(user=request.user, issue_id=issue_id)
            if result.ok:
                return redirect(ISSUES_URL)
        elif isinstance(payload, UpdateTitle):
            result = IssueService.update_issue(
                user=request.user,
                issue_id=issue_id,
                title=payload.title
            )
        elif isinstance(payload, UpdateDescription):
            result = IssueService.update_issue(
                user=request.user,
                issue_id=issue_id,
                description=payload.description or ''
            )
        elif isinstance(payload, CreateComment):
            result = CommentService.create_comment(
                user=request.user,
                issue_id=issue_id,
                content=payload.content,
                id=payload.id
            )
        elif isinstance(payload, DeleteComment):
            result = CommentService.delete_comment(
                user=request.user,
                issue_id=issue_id,
                comment_id=payload.id
            )
        elif isinstance(payload, UpdateIssueFields):
            result = IssueService.update_issue(
                user=request.user,
                issue_id=issue_id,
                status=payload.status,
                priority=payload.priority,
                project_id=payload.project_id
            )
        else:
            return self.invalid_intent()

        return self.respond(request, result, issue_id=issue_id)
