# ============================================
# accounts/models/user.py
# ============================================
import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models


def generate_id() -> str:
    return uuid.uuid4().hex


class UserManager(BaseUserManager):

    def create_user(self, username, password, first_name, last_name, **extra):
        if not username:
            raise ValueError("username is required")
        user = self.model(
            username=username,
            first_name=first_name,
            last_name=last_name,
            **extra
        )
        user.set_password(password)
        user.save(using=self._db)
        return user


class User(AbstractBaseUser):
    id = models.CharField(primary_key=True, max_length=64, default=generate_id, editable=False)
    username = models.CharField(max_length=150, unique=True, db_index=True)
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        db_table = 'users'
        ordering = ['username']

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return self.username
