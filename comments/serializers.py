from rest_framework import serializers

from users.serializers import UserSummarySerializer
from .models import Comment


class CommentSerializer(serializers.ModelSerializer):
    author = UserSummarySerializer(read_only=True)
    note_id = serializers.IntegerField(write_only=True)
    text = serializers.CharField()

    class Meta:
        model = Comment
        fields = ["id", "comment_id", "note_id", "author", "text", "created_at", "updated_at"]
        read_only_fields = ["id", "comment_id", "created_at", "updated_at"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["note"] = {"id": instance.note_id, "title": instance.note.title}
        return data


class CommentUpdateSerializer(CommentSerializer):
    """A comment's note is fixed once posted; only the text changes."""

    def get_fields(self):
        fields = super().get_fields()
        fields.pop("note_id")
        return fields
