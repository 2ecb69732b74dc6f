# ============================================
# tracker/models/__init__.py
# ============================================
from .project import Project, ProjectMember
from .issue import Issue
from .comment import Comment

__all__ = [
    'Project',
    'ProjectMember',
    'Issue',
    'Comment',
]
