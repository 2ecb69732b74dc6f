# ============================================
# tracker/selectors/comment.py
# ============================================
from typing import Optional
from django.db.models import Exists, OuterRef, QuerySet
from tracker.models import Comment, ProjectMember


class CommentSelector:

    @staticmethod
    def get_comment_by_id(comment_id: str) -> Optional[Comment]:
        try:
            return Comment.objects.select_related('issue').get(id=comment_id)
        except Comment.DoesNotExist:
            return None

    @staticmethod
    def get_comments_for_issue(*, issue_id: str, user_id: str) -> QuerySet:
        """Comments of an issue the user can see, newest first"""
        return (
            Comment.objects
            .filter(
                Exists(ProjectMember.objects.filter(
                    project=OuterRef('issue__project_id'),
                    user_id=user_id
                )),
                issue_id=issue_id
            )
            .select_related('created_by')
            .order_by('-created_at')
        )
