"""
Django settings for lunear project.

Configuration comes from the environment (optionally a local `.env` file):
    DATABASE_URL, DATABASE_AUTH_TOKEN, APP_ENV, SECRET_KEY, ALLOWED_HOSTS, LOG_LEVEL
"""
import os
from datetime import timedelta
from pathlib import Path
from urllib.parse import urlparse, unquote

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

APP_NAME = "Lunear"
APP_ENV = os.getenv("APP_ENV", "development")
IS_PRODUCTION = APP_ENV == "production"

SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-lunear-dev-key")
DEBUG = not IS_PRODUCTION
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]


INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "drf_spectacular",
    "accounts",
    "tracker",
]

MIDDLEWARE = [
    "django.middleware.gzip.GZipMiddleware",
    "lunear.middleware.RequestLogMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "lunear.middleware.OriginCheckMiddleware",
    "accounts.middleware.SessionAuthMiddleware",
]

ROOT_URLCONF = "lunear.urls"
WSGI_APPLICATION = "lunear.wsgi.application"
ASGI_APPLICATION = "lunear.asgi.application"

APPEND_SLASH = False


# ---- Database
def _database_from_url(url: str, auth_token: str | None = None) -> dict:
    parsed = urlparse(url)
    if parsed.scheme in ("sqlite", "file"):
        name = unquote(parsed.path)
        # sqlite:///relative.db -> "/relative.db"; sqlite:////abs.db -> "//abs.db"
        if name.startswith("//"):
            name = name[1:]
        elif name.startswith("/"):
            name = str(BASE_DIR / name[1:])
        return {"ENGINE": "django.db.backends.sqlite3", "NAME": name or ":memory:"}

    engines = {
        "postgres": "django.db.backends.postgresql",
        "postgresql": "django.db.backends.postgresql",
        "mysql": "django.db.backends.mysql",
    }
    if parsed.scheme not in engines:
        raise ValueError(f"Unsupported DATABASE_URL scheme: {parsed.scheme!r}")
    return {
        "ENGINE": engines[parsed.scheme],
        "NAME": unquote(parsed.path.lstrip("/")),
        "USER": unquote(parsed.username or ""),
        "PASSWORD": unquote(parsed.password or "") or (auth_token or ""),
        "HOST": parsed.hostname or "",
        "PORT": str(parsed.port or ""),
    }


DATABASES = {
    "default": _database_from_url(
        os.getenv("DATABASE_URL", "sqlite:///db.sqlite3"),
        os.getenv("DATABASE_AUTH_TOKEN"),
    )
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# ---- Auth
AUTH_USER_MODEL = "accounts.User"

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.Argon2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
]

SESSION_TTL = timedelta(days=30)
SESSION_COOKIE_NAME = "auth_session"
SESSION_COOKIE_SECURE = IS_PRODUCTION
THEME_COOKIE_NAME = "en_theme"
SIGN_IN_URL = "/auth/sign-in"


# ---- DRF
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": ["accounts.authentication.SessionCookieAuthentication"],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "EXCEPTION_HANDLER": "lunear.exceptions.exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "UNAUTHENTICATED_USER": "django.contrib.auth.models.AnonymousUser",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Lunear API",
    "DESCRIPTION": "Projects, issues, comments and project membership.",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}


# ---- I18N
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# ---- Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO" if IS_PRODUCTION else "DEBUG")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "loggers": {
        "lunear": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "accounts": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "tracker": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "django": {"handlers": ["console"], "level": "WARNING"},
    },
}
