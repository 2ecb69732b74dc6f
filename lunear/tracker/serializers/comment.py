# ============================================
# tracker/serializers/comment.py
# ============================================
from rest_framework import serializers

from tracker.models import Comment
from tracker.serializers.fields import ClientIdField


class CommentCreateSerializer(serializers.Serializer):
    id = ClientIdField(required=False)
    content = serializers.CharField()


class CommentDeleteSerializer(serializers.Serializer):
    id = ClientIdField()


class CommentOutputSerializer(serializers.ModelSerializer):
    createdBy = serializers.CharField(source='created_by_id')
    creator = serializers.CharField(source='created_by.full_name')

    class Meta:
        model = Comment
        fields = ['id', 'content', 'createdBy', 'creator']
