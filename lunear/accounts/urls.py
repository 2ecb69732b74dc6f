from django.urls import path

from accounts.views import (
    SignInAPIView,
    SignOutAPIView,
    SignUpAPIView,
    ThemeSwitchAPIView,
)

urlpatterns = [
    path("auth/sign-up", SignUpAPIView.as_view(), name="sign-up"),
    path("auth/sign-in", SignInAPIView.as_view(), name="sign-in"),
    path("sign-out", SignOutAPIView.as_view(), name="sign-out"),
    path("resources/theme-switch", ThemeSwitchAPIView.as_view(), name="theme-switch"),
]
