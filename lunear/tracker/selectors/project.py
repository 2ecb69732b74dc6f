# ============================================
# tracker/selectors/project.py
# ============================================
from typing import List, Optional
from django.db.models import (
    Case, Count, Exists, IntegerField, OuterRef, Prefetch, Q, QuerySet, Subquery, Value, When
)
from tracker.models import Issue, Project, ProjectMember

ACTIVE_STATUSES = [s for s in Issue.Status.values if s != Issue.Status.CANCELED]
SEARCH_LIMIT = 5


def _memberships(user_id: str) -> QuerySet:
    return ProjectMember.objects.filter(project=OuterRef('pk'), user_id=user_id)


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id: str) -> Optional[Project]:
        """Get single project by ID"""
        try:
            return Project.objects.get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_projects_for_user(user_id: str) -> QuerySet:
        """
        Projects the user belongs to, oldest first, annotated with
        `role`, `total_issues_count` (not canceled) and `done_issues_count`.
        """
        memberships = _memberships(user_id)
        return (
            Project.objects
            .filter(Exists(memberships))
            .annotate(
                role=Subquery(memberships.values('role')[:1]),
                total_issues_count=Count(
                    'issues',
                    filter=Q(issues__status__in=ACTIVE_STATUSES),
                    distinct=True
                ),
                done_issues_count=Count(
                    'issues',
                    filter=Q(issues__status=Issue.Status.DONE),
                    distinct=True
                ),
            )
            .order_by('created_at')
        )

    @staticmethod
    def get_project_with_members(project_id: str) -> Optional[Project]:
        """Project with its members and their names prefetched"""
        queryset = Project.objects.prefetch_related(
            Prefetch('members', queryset=ProjectMember.objects.select_related('user'))
        )
        try:
            return queryset.get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def search_projects(*, user_id: str, q: str) -> List[Project]:
        """Newest projects of the user whose name contains `q`"""
        if not q:
            return []
        return list(
            Project.objects
            .filter(Exists(_memberships(user_id)), name__icontains=q)
            .order_by('-created_at')[:SEARCH_LIMIT]
        )

    @staticmethod
    def get_project_options(*, user_id: str, selected_ids: List[str]) -> List[Project]:
        """
        Options for the project filter: the user's projects with the selected
        ones first, then newest. Empty when nothing is selected.
        """
        if not selected_ids:
            return []
        return list(
            Project.objects
            .filter(Exists(_memberships(user_id)))
            .annotate(
                selected=Case(
                    When(id__in=selected_ids, then=Value(1)),
                    default=Value(0),
                    output_field=IntegerField()
                )
            )
            .order_by('-selected', '-created_at')[:max(len(selected_ids), 2)]
        )
