class SignInRequired(Exception):
    """No valid (user, session) pair on the request; answered with a redirect."""


def require_auth(request) -> None:
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        raise SignInRequired()
