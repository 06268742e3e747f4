from rest_framework import serializers
from .models import User, UserRole


class UserSerializer(serializers.ModelSerializer):
    """Public user representation (never includes the password hash)."""

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'role',
            'createdAt',
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Validate registration input."""

    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(
        choices=UserRole.choices,
        default=UserRole.USER
    )


class UserLoginSerializer(serializers.Serializer):
    """Validate login input."""

    username = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
