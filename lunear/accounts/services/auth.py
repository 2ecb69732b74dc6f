# -*- coding: utf-8 -*-
"""
Session store for cookie-based authentication.

One Authenticator is constructed per process (by SessionAuthMiddleware) and
handed to views through `request.authenticator`:
- sessions are opaque random tokens stored in the `sessions` table
- a session is revalidated on every request; expired rows are deleted
- when less than half of the TTL remains the expiry is pushed forward and the
  session is flagged `fresh` so the cookie gets re-issued
"""
from __future__ import annotations

import logging
import secrets
from datetime import timedelta
from typing import Optional, Tuple

from django.conf import settings
from django.utils import timezone

from accounts.models import Session, User

logger = logging.getLogger(__name__)


class Authenticator:

    def __init__(
        self,
        *,
        session_ttl: timedelta,
        cookie_name: str,
        secure: bool,
    ):
        self.session_ttl = session_ttl
        self.cookie_name = cookie_name
        self.secure = secure

    @classmethod
    def from_settings(cls) -> "Authenticator":
        return cls(
            session_ttl=getattr(settings, "SESSION_TTL", timedelta(days=30)),
            cookie_name=getattr(settings, "SESSION_COOKIE_NAME", "auth_session"),
            secure=getattr(settings, "SESSION_COOKIE_SECURE", False),
        )

    # ---- sessions
    @staticmethod
    def generate_session_id() -> str:
        return secrets.token_hex(20)

    def create_session(self, user: User) -> Session:
        session = Session.objects.create(
            id=self.generate_session_id(),
            user=user,
            expires_at=timezone.now() + self.session_ttl,
        )
        logger.info("[auth] session created for user=%s", user.pk)
        return session

    def validate_session(self, session_id: str) -> Tuple[Optional[Session], Optional[User]]:
        session = Session.objects.select_related("user").filter(id=session_id).first()
        if session is None:
            return None, None

        if session.is_expired:
            session.delete()
            logger.info("[auth] expired session removed for user=%s", session.user_id)
            return None, None

        now = timezone.now()
        if session.expires_at - now < self.session_ttl / 2:
            session.expires_at = now + self.session_ttl
            session.save(update_fields=["expires_at"])
            session.fresh = True

        return session, session.user

    def invalidate_session(self, session_id: str) -> None:
        deleted, _ = Session.objects.filter(id=session_id).delete()
        if deleted:
            logger.info("[auth] session invalidated")

    # ---- cookies
    def read_session_cookie(self, request) -> Optional[str]:
        return request.COOKIES.get(self.cookie_name) or None

    def set_session_cookie(self, response, session: Session) -> None:
        response.set_cookie(
            self.cookie_name,
            session.id,
            max_age=int(self.session_ttl.total_seconds()),
            path="/",
            secure=self.secure,
            httponly=True,
            samesite="Lax",
        )

    def set_blank_session_cookie(self, response) -> None:
        response.set_cookie(
            self.cookie_name,
            "",
            max_age=0,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite="Lax",
        )
