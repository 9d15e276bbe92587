from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.db.models import Q
from rest_framework import serializers

from core.exceptions import ConflictError
from core.roles import InvalidRoleError, RoleSet, default_roles

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    user_name = serializers.CharField(min_length=3, max_length=150)
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    phone = serializers.JSONField(required=False)
    institution = serializers.CharField(required=False, allow_blank=True, default="")
    roles = serializers.ListField(child=serializers.CharField(), required=False)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        validate_password(value)
        return value

    def validate_phone(self, value):
        if value in (None, ""):
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        raise serializers.ValidationError("Phone must be a string or a list of strings.")

    def validate_roles(self, value):
        try:
            return RoleSet(value).as_list()
        except InvalidRoleError as exc:
            raise serializers.ValidationError(str(exc))

    def validate(self, attrs):
        if User.objects.filter(Q(email=attrs["email"]) | Q(username=attrs["user_name"])).exists():
            raise ConflictError("User with this email or username already exists")
        return attrs

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["user_name"],
            email=validated_data["email"],
            password=validated_data["password"],
            first_name=validated_data["first_name"],
            last_name=validated_data["last_name"],
            phone=validated_data.get("phone", []),
            institution=validated_data.get("institution", ""),
            roles=validated_data.get("roles") or default_roles(),
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate_email(self, value):
        return value.strip().lower()
