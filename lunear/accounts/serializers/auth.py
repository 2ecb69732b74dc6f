# ============================================
# accounts/serializers/auth.py
# ============================================
from rest_framework import serializers
from accounts.models import User


class SignUpSerializer(serializers.Serializer):
    userName = serializers.CharField(max_length=150)
    password = serializers.CharField(trim_whitespace=False)
    confirmPassword = serializers.CharField(trim_whitespace=False)
    firstName = serializers.CharField(max_length=150)
    lastName = serializers.CharField(max_length=150)

    def validate(self, attrs):
        if attrs['password'] != attrs['confirmPassword']:
            raise serializers.ValidationError({'confirmPassword': "Passwords don't match"})
        return attrs


class SignInSerializer(serializers.Serializer):
    userName = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class ThemeSerializer(serializers.Serializer):
    theme = serializers.ChoiceField(choices=['system', 'light', 'dark'])
    redirectTo = serializers.CharField(required=False, allow_blank=True)


class UserOutputSerializer(serializers.ModelSerializer):
    userName = serializers.CharField(source='username')
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')

    class Meta:
        model = User
        fields = ['id', 'userName', 'firstName', 'lastName']
