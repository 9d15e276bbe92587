from rest_framework import serializers

from .models import Attachment, ParentType, attachment_external_id


class AttachmentSerializer(serializers.ModelSerializer):
    attachment_id = serializers.CharField(required=False, max_length=64)
    parent_type = serializers.ChoiceField(choices=ParentType.choices)
    parent_id = serializers.IntegerField(min_value=1)
    file_size = serializers.IntegerField(required=False, min_value=0, default=0)

    class Meta:
        model = Attachment
        fields = [
            "id",
            "attachment_id",
            "file_name",
            "file_type",
            "url",
            "file_size",
            "parent_type",
            "parent_id",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]
        validators = []

    def validate(self, attrs):
        attrs.setdefault("attachment_id", attachment_external_id())
        return attrs
