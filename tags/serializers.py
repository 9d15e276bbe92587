from rest_framework import serializers

from core.exceptions import ConflictError
from notes.models import Note
from .models import Tag, normalize_tag_name


class TagSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ["id", "tag_id", "name"]


class TagSerializer(serializers.ModelSerializer):
    notes = serializers.SerializerMethodField()

    class Meta:
        model = Tag
        fields = ["id", "tag_id", "name", "created_at", "notes"]
        read_only_fields = ["id", "tag_id", "created_at"]
        extra_kwargs = {"name": {"validators": []}}

    def validate_name(self, value):
        name = normalize_tag_name(value)
        if not name:
            raise serializers.ValidationError("Tag name is required.")
        if Tag.objects.filter(name=name).exists():
            raise ConflictError("Tag already exists")
        return name

    def get_notes(self, tag):
        view = self.context.get("view")
        notes = Note.objects.filter(tags=tag)
        if view is not None:
            notes = notes.visible_to(view.actor)
        return [{"id": note.id, "note_id": note.note_id, "title": note.title} for note in notes]
