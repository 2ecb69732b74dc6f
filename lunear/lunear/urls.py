"""
URL configuration for lunear project.

Page routes pair a loader (GET) with an action (POST):
    /                         root loader (session + theme)
    /auth/...                 sign-up / sign-in actions
    /sign-out                 sign-out action
    /resources/...            search resources and theme switch
    /app/...                  projects, issues, comments, members
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from accounts.views import RootAPIView

urlpatterns = [
    path("", RootAPIView.as_view(), name="root"),
    path("", include("accounts.urls")),
    path("", include("tracker.urls")),

    # OpenAPI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
]
