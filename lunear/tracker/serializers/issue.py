# ============================================
# tracker/serializers/issue.py
# ============================================
from rest_framework import serializers

from tracker.models import Issue
from tracker.serializers.fields import ClientIdField

SORT_BY_OPTIONS = ['priority', 'status', 'created', 'updated']
ORDER_OPTIONS = ['asc', 'desc']
EXCLUSIVE_OPTIONS = ['status', 'priority']


# ---- Issues page intents
class IssueCreateSerializer(serializers.Serializer):
    id = ClientIdField(required=False)
    projectId = ClientIdField(source='project_id')
    status = serializers.ChoiceField(choices=Issue.Status.choices)
    priority = serializers.ChoiceField(choices=Issue.Priority.choices)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)


class IssueDeleteSerializer(serializers.Serializer):
    projectId = ClientIdField(source='project_id')
    id = ClientIdField()


class IssueUpdateSerializer(serializers.Serializer):
    id = ClientIdField()
    projectId = ClientIdField(source='project_id')
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)
    status = serializers.ChoiceField(choices=Issue.Status.choices, required=False)
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False)


# ---- Issue detail intents
class IssueDeleteCurrentSerializer(serializers.Serializer):
    pass


class IssueTitleSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)


class IssueDescriptionSerializer(serializers.Serializer):
    description = serializers.CharField(required=False, allow_blank=True)


class IssueFieldsSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Issue.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)
    projectId = ClientIdField(source='project_id', required=False)


# ---- Query params
class IssueFilterSerializer(serializers.Serializer):
    """Search params of the issues page; repeated keys for the list filters"""
    status = serializers.ListField(
        child=serializers.ChoiceField(choices=Issue.Status.choices),
        required=False,
        default=list
    )
    priority = serializers.ListField(
        child=serializers.ChoiceField(choices=Issue.Priority.choices),
        required=False,
        default=list
    )
    project = serializers.ListField(child=ClientIdField(), required=False, default=list)
    exclusive = serializers.ListField(
        child=serializers.ChoiceField(choices=EXCLUSIVE_OPTIONS),
        required=False,
        default=list
    )
    sortBy = serializers.ChoiceField(choices=SORT_BY_OPTIONS, default='created', source='sort_by')
    order = serializers.ChoiceField(choices=ORDER_OPTIONS, default='desc')


# ---- Output
class IssueListOutputSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at')
    projectId = serializers.CharField(source='project_id')
    creator = serializers.CharField(source='created_by.full_name')

    class Meta:
        model = Issue
        fields = ['id', 'createdAt', 'projectId', 'priority', 'status', 'title', 'creator']


class IssueOutputSerializer(serializers.ModelSerializer):
    project = serializers.SerializerMethodField()
    creator = serializers.CharField(source='created_by.full_name')

    class Meta:
        model = Issue
        fields = ['id', 'title', 'description', 'status', 'priority', 'project', 'creator']

    def get_project(self, obj):
        return {
            'id': obj.project_id,
            'name': obj.project.name,
            'role': getattr(obj, 'role', None),
        }
