# ============================================
# tracker/serializers/project.py
# ============================================
from rest_framework import serializers

from tracker.models import Project, ProjectMember
from tracker.serializers.fields import ClientIdField


# ---- Projects page intents
class ProjectCreateSerializer(serializers.Serializer):
    id = ClientIdField(required=False)
    name = serializers.CharField(max_length=255)


class ProjectDeleteSerializer(serializers.Serializer):
    id = ClientIdField()


class ProjectUpdateSerializer(serializers.Serializer):
    id = ClientIdField()
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)


# ---- Project settings intents
class ProjectSettingsUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)


class MemberAddSerializer(serializers.Serializer):
    userId = ClientIdField(source='user_id')
    firstName = serializers.CharField(source='first_name', required=False, allow_blank=True)
    lastName = serializers.CharField(source='last_name', required=False, allow_blank=True)


class MemberRoleSerializer(serializers.Serializer):
    userId = ClientIdField(source='user_id')
    role = serializers.ChoiceField(choices=ProjectMember.Role.choices)


class MemberRemoveSerializer(serializers.Serializer):
    userId = ClientIdField(source='user_id')


# ---- Output
class ProjectListOutputSerializer(serializers.ModelSerializer):
    createdBy = serializers.CharField(source='created_by_id')
    role = serializers.CharField()
    totalIssuesCount = serializers.IntegerField(source='total_issues_count')
    doneIssuesCount = serializers.IntegerField(source='done_issues_count')

    class Meta:
        model = Project
        fields = [
            'id', 'createdBy', 'name', 'description', 'role',
            'totalIssuesCount', 'doneIssuesCount'
        ]


class MemberOutputSerializer(serializers.ModelSerializer):
    userId = serializers.CharField(source='user_id')
    user = serializers.SerializerMethodField()

    class Meta:
        model = ProjectMember
        fields = ['userId', 'role', 'user']

    def get_user(self, obj):
        return {'firstName': obj.user.first_name, 'lastName': obj.user.last_name}


class ProjectMemberOutputSerializer(serializers.ModelSerializer):
    """The caller's own membership row"""
    projectId = serializers.CharField(source='project_id')
    userId = serializers.CharField(source='user_id')
    invitedBy = serializers.CharField(source='invited_by_id', allow_null=True)

    class Meta:
        model = ProjectMember
        fields = ['projectId', 'userId', 'role', 'invitedBy']


class ProjectOutputSerializer(serializers.ModelSerializer):
    createdBy = serializers.CharField(source='created_by_id')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')
    members = MemberOutputSerializer(many=True)

    class Meta:
        model = Project
        fields = [
            'name', 'description', 'createdBy', 'createdAt', 'updatedAt',
            'members'
        ]


class ProjectOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = ['id', 'name']
