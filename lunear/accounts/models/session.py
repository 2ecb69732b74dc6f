# ============================================
# accounts/models/session.py
# ============================================
from django.db import models
from django.utils import timezone


class Session(models.Model):
    id = models.CharField(primary_key=True, max_length=64, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='sessions'
    )
    expires_at = models.DateTimeField()

    # set by Authenticator.validate_session when the expiry was extended
    fresh = False

    class Meta:
        db_table = 'sessions'
        indexes = [
            models.Index(fields=['user'], name='sessions_user_idx'),
        ]

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= timezone.now()

    def __str__(self):
        return f"Session of {self.user_id} until {self.expires_at:%Y-%m-%d %H:%M}"
