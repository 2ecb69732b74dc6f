# ============================================
# accounts/selectors/user.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from accounts.models import User


class UserSelector:

    @staticmethod
    def get_user_by_id(user_id: str) -> Optional[User]:
        return User.objects.filter(id=user_id).first()

    @staticmethod
    def get_user_by_username(username: str) -> Optional[User]:
        """Get user by unique username"""
        try:
            return User.objects.get(username=username)
        except User.DoesNotExist:
            return None

    @staticmethod
    def search_users(q: str) -> QuerySet:
        """Users whose first name contains `q`"""
        return User.objects.filter(first_name__icontains=q)
