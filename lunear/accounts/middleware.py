from django.contrib.auth.models import AnonymousUser

from accounts.services.auth import Authenticator


class SessionAuthMiddleware:
    """
    Resolve the session cookie into `request.user` / `request.auth_session`.

    Re-issues the cookie when the session was extended, and blanks it when the
    presented token no longer resolves to a session.
    """

    def __init__(self, get_response, authenticator: Authenticator | None = None):
        self.get_response = get_response
        self.authenticator = authenticator or Authenticator.from_settings()

    def __call__(self, request):
        request.authenticator = self.authenticator
        request.user = AnonymousUser()
        request.auth_session = None

        session_id = self.authenticator.read_session_cookie(request)
        session = None
        if session_id:
            session, user = self.authenticator.validate_session(session_id)
            if session is not None:
                request.user = user
                request.auth_session = session

        response = self.get_response(request)

        # views that sign in or out manage the cookie themselves
        if getattr(response, "session_cookie_handled", False):
            return response
        if session is not None and session.fresh:
            self.authenticator.set_session_cookie(response, session)
        elif session_id and session is None:
            self.authenticator.set_blank_session_cookie(response)
        return response
