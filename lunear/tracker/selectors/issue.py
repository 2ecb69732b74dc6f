# ============================================
# tracker/selectors/issue.py
# ============================================
from typing import Iterable, Optional
from django.db.models import Exists, OuterRef, QuerySet, Subquery
from tracker.models import Issue, ProjectMember

SORT_COLUMNS = {
    'created': 'created_at',
    'priority': 'priority',
    'status': 'status',
    'updated': 'updated_at',
}


def _visible_to(user_id: str) -> Exists:
    return Exists(
        ProjectMember.objects.filter(project=OuterRef('project_id'), user_id=user_id)
    )


class IssueSelector:

    @staticmethod
    def get_issue_by_id(issue_id: str) -> Optional[Issue]:
        try:
            return Issue.objects.get(id=issue_id)
        except Issue.DoesNotExist:
            return None

    @staticmethod
    def get_issues_list(
        *,
        user_id: str,
        statuses: Iterable[int] = (),
        priorities: Iterable[int] = (),
        project_ids: Iterable[str] = (),
        exclusive: Iterable[str] = (),
        sort_by: str = 'created',
        order: str = 'desc'
    ) -> QuerySet:
        """
        Issues in the user's projects.

        `statuses` / `priorities` are IN filters, or NOT IN when named in
        `exclusive`. `project_ids` always narrows.
        """
        queryset = Issue.objects.filter(_visible_to(user_id)).select_related('created_by')

        if statuses:
            if 'status' in exclusive:
                queryset = queryset.exclude(status__in=statuses)
            else:
                queryset = queryset.filter(status__in=statuses)

        if priorities:
            if 'priority' in exclusive:
                queryset = queryset.exclude(priority__in=priorities)
            else:
                queryset = queryset.filter(priority__in=priorities)

        if project_ids:
            queryset = queryset.filter(project_id__in=project_ids)

        column = SORT_COLUMNS[sort_by]
        return queryset.order_by(column if order == 'asc' else f'-{column}')

    @staticmethod
    def get_issue_for_user(*, issue_id: str, user_id: str) -> Optional[Issue]:
        """Issue with project, creator and the caller's `role`; None when not visible"""
        memberships = ProjectMember.objects.filter(
            project=OuterRef('project_id'),
            user_id=user_id
        )
        queryset = (
            Issue.objects
            .filter(Exists(memberships))
            .select_related('project', 'created_by')
            .annotate(role=Subquery(memberships.values('role')[:1]))
        )
        try:
            return queryset.get(id=issue_id)
        except Issue.DoesNotExist:
            return None
