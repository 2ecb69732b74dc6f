# ============================================
# accounts/models/__init__.py
# ============================================
from .user import User, generate_id
from .session import Session

__all__ = [
    'User',
    'Session',
    'generate_id',
]
