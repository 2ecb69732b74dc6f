# ============================================
# accounts/services/user.py
# ============================================
from django.core.exceptions import ValidationError
from django.db import transaction

from accounts.models import User
from lunear.results import returns_result


class UserService:

    @staticmethod
    @returns_result
    @transaction.atomic
    def create_user(
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str
    ) -> User:
        """Create a user with an Argon2-hashed password"""

        if User.objects.filter(username=username).exists():
            raise ValidationError(f"Username '{username}' is already taken")

        return User.objects.create_user(
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name
        )
