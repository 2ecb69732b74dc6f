# ============================================
# tracker/models/comment.py
# ============================================
from django.conf import settings
from django.db import models

from accounts.models import generate_id


class Comment(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=generate_id)
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['issue', 'created_at'], name='comments_issue_created_idx'),
        ]

    def __str__(self):
        return f"Comment on {self.issue_id}"
