# ============================================
# tracker/services/comment.py
# ============================================
import logging
from typing import Optional

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from accounts.models import generate_id
from lunear.results import returns_result
from tracker.models import Comment
from tracker.selectors.comment import CommentSelector
from tracker.selectors.membership import MembershipSelector
from tracker.services.issue import IssueService
from tracker.services.membership import require_member

logger = logging.getLogger(__name__)


class CommentService:

    @staticmethod
    @returns_result
    @transaction.atomic
    def create_comment(
        *,
        user,
        issue_id: str,
        content: str,
        id: Optional[str] = None
    ) -> Comment:
        """Create a comment on an issue"""

        issue = IssueService._get_issue(issue_id)
        require_member(project_id=issue.project_id, user=user)

        comment = Comment.objects.create(
            id=id or generate_id(),
            issue=issue,
            created_by=user,
            content=content
        )
        return comment

    @staticmethod
    @returns_result
    @transaction.atomic
    def delete_comment(*, user, issue_id: str, comment_id: str) -> None:
        """Delete a comment on `issue_id`"""

        comment = CommentSelector.get_comment_by_id(comment_id)
        if comment is None or comment.issue_id != issue_id:
            raise ValidationError("Comment not found")

        # Author or project admin can delete
        if comment.created_by_id != user.pk:
            membership = MembershipSelector.get_membership(
                project_id=comment.issue.project_id,
                user_id=user.pk
            )
            if membership is None or not membership.is_admin:
                raise PermissionDenied("Only the author or a project admin can delete a comment")

        comment.delete()
        logger.info("[comment] deleted id=%s by=%s", comment_id, user.pk)
