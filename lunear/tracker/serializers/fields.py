# ============================================
# tracker/serializers/fields.py
# ============================================
from rest_framework import serializers

ID_PATTERN = r'^[A-Za-z0-9_-]{1,64}$'


class ClientIdField(serializers.RegexField):
    """Opaque row id, either generated by the client or echoed back from a loader"""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_length', 64)
        kwargs.setdefault('error_messages', {'invalid': 'Invalid id'})
        super().__init__(ID_PATTERN, **kwargs)
