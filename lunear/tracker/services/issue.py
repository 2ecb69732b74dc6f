# ============================================
# tracker/services/issue.py
# ============================================
import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from accounts.models import generate_id
from lunear.results import returns_result
from tracker.models import Issue
from tracker.selectors.issue import IssueSelector
from tracker.services.membership import require_member

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'description', 'status', 'priority')


class IssueService:

    @staticmethod
    def _get_issue(issue_id: str) -> Issue:
        issue = IssueSelector.get_issue_by_id(issue_id)
        if issue is None:
            raise ValidationError("Issue not found")
        return issue

    @staticmethod
    @returns_result
    @transaction.atomic
    def create_issue(
        *,
        user,
        project_id: str,
        title: str,
        status: int = Issue.Status.BACKLOG,
        priority: int = Issue.Priority.NONE,
        description: str = '',
        id: Optional[str] = None
    ) -> Issue:
        """Create an issue in a project the caller belongs to"""

        require_member(project_id=project_id, user=user)

        issue = Issue.objects.create(
            id=id or generate_id(),
            project_id=project_id,
            created_by=user,
            title=title,
            description=description or '',
            status=status,
            priority=priority
        )
        logger.info("[issue] created id=%s project=%s by=%s", issue.pk, project_id, user.pk)
        return issue

    @staticmethod
    @returns_result
    @transaction.atomic
    def update_issue(*, user, issue_id: str, project_id: Optional[str] = None, **changes) -> Issue:
        """
        Update the supplied fields only. Moving the issue to another project
        requires membership there too.
        """
        issue = IssueService._get_issue(issue_id)
        require_member(project_id=issue.project_id, user=user)

        update_fields = []
        if project_id is not None and project_id != issue.project_id:
            require_member(project_id=project_id, user=user)
            issue.project_id = project_id
            update_fields.append('project')

        for field in UPDATABLE_FIELDS:
            value = changes.get(field)
            if value is not None:
                setattr(issue, field, value)
                update_fields.append(field)

        if update_fields:
            issue.save(update_fields=update_fields + ['updated_at'])
        return issue

    @staticmethod
    @returns_result
    @transaction.atomic
    def delete_issue(*, user, issue_id: str) -> None:
        """Delete issue and its comments"""

        issue = IssueService._get_issue(issue_id)
        require_member(project_id=issue.project_id, user=user)

        issue.delete()
        logger.info("[issue] deleted id=%s by=%s", issue_id, user.pk)
