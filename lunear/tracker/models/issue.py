# ============================================
# tracker/models/issue.py
# ============================================
from django.conf import settings
from django.db import models

from accounts.models import generate_id


class Issue(models.Model):
    class Status(models.IntegerChoices):
        CANCELED = 0, 'Canceled'
        BACKLOG = 1, 'Backlog'
        TODO = 2, 'Todo'
        IN_PROGRESS = 3, 'In Progress'
        DONE = 4, 'Done'

    class Priority(models.IntegerChoices):
        NONE = 0, 'No priority'
        LOW = 1, 'Low'
        MEDIUM = 2, 'Medium'
        HIGH = 3, 'High'
        URGENT = 4, 'Urgent'

    id = models.CharField(primary_key=True, max_length=64, default=generate_id)
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='issues'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='created_issues'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    status = models.IntegerField(choices=Status.choices, default=Status.BACKLOG)
    priority = models.IntegerField(choices=Priority.choices, default=Priority.NONE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'issues'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['project', 'status'], name='issues_project_status_idx'),
            models.Index(fields=['created_by'], name='issues_created_by_idx'),
        ]

    def __str__(self):
        return self.title
