from .auth import SignInAPIView, SignOutAPIView, SignUpAPIView
from .root import RootAPIView
from .theme import ThemeSwitchAPIView

__all__ = [
    "RootAPIView",
    "SignUpAPIView",
    "SignInAPIView",
    "SignOutAPIView",
    "ThemeSwitchAPIView",
]
