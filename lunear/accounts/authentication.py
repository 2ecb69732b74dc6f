from rest_framework.authentication import BaseAuthentication


class SessionCookieAuthentication(BaseAuthentication):
    """
    Expose the user resolved by SessionAuthMiddleware to DRF views.

    No CSRF token check here: state-changing requests are already filtered by
    OriginCheckMiddleware.
    """

    def authenticate(self, request):
        user = getattr(request._request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return user, getattr(request._request, "auth_session", None)
