from .issue import IssueDetailAPIView, IssueListAPIView
from .project import ProjectListAPIView, ProjectSettingsAPIView
from .resource import AppIndexAPIView, FilterProjectsAPIView, FilterUsersAPIView

__all__ = [
    "AppIndexAPIView",
    "ProjectListAPIView",
    "ProjectSettingsAPIView",
    "IssueListAPIView",
    "IssueDetailAPIView",
    "FilterUsersAPIView",
    "FilterProjectsAPIView",
]
