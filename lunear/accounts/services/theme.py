from typing import Optional

from django.conf import settings

THEMES = ("light", "dark")
ONE_YEAR = 31536000


def _cookie_name() -> str:
    return getattr(settings, "THEME_COOKIE_NAME", "en_theme")


def get_theme(request) -> Optional[str]:
    """Theme preference from the cookie, None means follow the system."""
    value = request.COOKIES.get(_cookie_name())
    return value if value in THEMES else None


def set_theme(response, theme: str) -> None:
    if theme == "system":
        response.delete_cookie(_cookie_name(), path="/")
        return
    response.set_cookie(_cookie_name(), theme, max_age=ONE_YEAR, path="/")
