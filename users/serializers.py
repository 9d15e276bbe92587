from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="username", read_only=True)

    class Meta:
        model = User
        fields = ["id", "user_name", "first_name", "last_name"]


class UserSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="username", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "user_id",
            "user_name",
            "first_name",
            "last_name",
            "email",
            "phone",
            "institution",
            "roles",
        ]
        read_only_fields = fields
