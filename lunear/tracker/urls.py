# ============================================
# tracker/urls.py
# ============================================
from django.urls import path, re_path
from tracker.views.project import (
    ProjectListAPIView,
    ProjectSettingsAPIView
)
from tracker.views.issue import (
    IssueListAPIView,
    IssueDetailAPIView
)
from tracker.views.resource import (
    AppIndexAPIView,
    FilterProjectsAPIView,
    FilterUsersAPIView
)

app_name = 'tracker'

# Trailing slashes are optional on page routes
urlpatterns = [
    re_path(r'^app/?$', AppIndexAPIView.as_view(), name='app-index'),

    # Projects
    re_path(r'^app/projects/?$', ProjectListAPIView.as_view(), name='project-list'),
    re_path(r'^app/projects/(?P<project_id>[A-Za-z0-9_-]{1,64})/?$', ProjectSettingsAPIView.as_view(), name='project-settings'),

    # Issues
    re_path(r'^app/issues/?$', IssueListAPIView.as_view(), name='issue-list'),
    re_path(r'^app/issues/(?P<issue_id>[A-Za-z0-9_-]{1,64})/?$', IssueDetailAPIView.as_view(), name='issue-detail'),

    # Resources
    path('resources/filter-users', FilterUsersAPIView.as_view(), name='filter-users'),
    path('resources/filter-projects', FilterProjectsAPIView.as_view(), name='filter-projects'),
]
