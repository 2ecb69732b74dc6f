# ============================================
# tracker/views/resource.py
# ============================================
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.guards import require_auth
from accounts.serializers.auth import UserOutputSerializer
from tracker.selectors.project import ProjectSelector
from tracker.selectors.user import MemberCandidateSelector
from tracker.serializers.project import ProjectOptionSerializer
from .utils import OpenApiResponse, extend_schema, q_str, std_errors


class FilterUsersAPIView(APIView):
    """
    GET: Users whose first name contains `q`

    Query params:
    - q: string (empty returns [])
    - projectId: string (optional, excludes the project's members)
    """

    @extend_schema(
        tags=["Resources"],
        parameters=[
            q_str("q", "Part of the first name"),
            q_str("projectId", "Leave out members of this project"),
        ],
        responses={200: OpenApiResponse(UserOutputSerializer(many=True)), **std_errors()},
    )
    def get(self, request):
        require_auth(request)

        users = MemberCandidateSelector.filter_users(
            q=request.query_params.get('q', ''),
            project_id=request.query_params.get('projectId') or None
        )
        return Response(UserOutputSerializer(users, many=True).data)


class FilterProjectsAPIView(APIView):
    """
    GET: The caller's newest projects whose name contains `q`, at most 5

    Query params:
    - q: string (empty returns [])
    """

    @extend_schema(
        tags=["Resources"],
        parameters=[q_str("q", "Part of the project name")],
        responses={200: OpenApiResponse(ProjectOptionSerializer(many=True)), **std_errors()},
    )
    def get(self, request):
        require_auth(request)

        projects = ProjectSelector.search_projects(
            user_id=request.user.pk,
            q=request.query_params.get('q', '')
        )
        return Response(ProjectOptionSerializer(projects, many=True).data)


class AppIndexAPIView(APIView):
    """
    GET: Signed-in landing loader
    """

    @extend_schema(tags=["Resources"], responses={200: OpenApiResponse(description="{user}"), **std_errors()})
    def get(self, request):
        require_auth(request)
        return Response({"user": UserOutputSerializer(request.user).data})
