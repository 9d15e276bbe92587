from django.db import transaction
from rest_framework import serializers

from core import policy
from core.lookups import resolve_ids
from core.views import context_actor
from attachments.models import Attachment, ParentType
from attachments.serializers import AttachmentSerializer
from comments.serializers import CommentSerializer
from notebooks.models import Notebook
from tags.models import Tag
from tags.serializers import TagSummarySerializer
from users.serializers import UserSummarySerializer
from .models import Note


def _note_summary(note):
    return {"id": note.id, "note_id": note.note_id, "title": note.title}


class NoteSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    tags = serializers.ListField(child=serializers.IntegerField(), required=False, write_only=True)
    notebook_ids = serializers.ListField(child=serializers.IntegerField(), required=False, write_only=True)
    connected_note_ids = serializers.ListField(
        child=serializers.IntegerField(), required=False, write_only=True
    )

    class Meta:
        model = Note
        fields = [
            "id",
            "note_id",
            "owner",
            "title",
            "content",
            "type",
            "visibility",
            "tags",
            "notebook_ids",
            "connected_note_ids",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "note_id", "created_at", "updated_at"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["tags"] = TagSummarySerializer(instance.tags.all(), many=True).data
        data["notebooks"] = [
            {"id": nb.id, "notebook_id": nb.notebook_id, "name": nb.name}
            for nb in instance.notebooks.all()
        ]
        connected = instance.connected_notes.all()
        actor = context_actor(self.context)
        if actor is not None:
            connected = connected.visible_to(actor)
        data["connected_notes"] = [_note_summary(n) for n in connected]
        return data

    def validate(self, attrs):
        # Resolve referenced ids and check access before anything is written.
        actor = context_actor(self.context)
        if "tags" in attrs:
            attrs["tags"] = resolve_ids(Tag, attrs["tags"], "Tag")
        if "notebook_ids" in attrs:
            notebooks = resolve_ids(Notebook, attrs["notebook_ids"], "Notebook")
            for notebook in notebooks:
                policy.enforce(policy.can_modify_notebook(actor, notebook.owner_id))
            attrs["notebook_ids"] = notebooks
        if "connected_note_ids" in attrs:
            ids = attrs["connected_note_ids"]
            if self.instance is not None and self.instance.pk in ids:
                raise serializers.ValidationError(
                    {"connected_note_ids": "A note cannot be connected to itself."}
                )
            connected = resolve_ids(Note, ids, "Note")
            for note in connected:
                policy.enforce(policy.can_view_note(actor, note.owner_id, note.visibility))
            attrs["connected_note_ids"] = connected
        return attrs

    def _set_associations(self, note, tags, notebooks, connected):
        if tags is not None:
            note.tags.set(tags)
        if notebooks is not None:
            note.notebooks.set(notebooks)
        if connected is not None:
            note.connected_notes.set(connected)

    def create(self, validated_data):
        tags = validated_data.pop("tags", None)
        notebooks = validated_data.pop("notebook_ids", None)
        connected = validated_data.pop("connected_note_ids", None)
        with transaction.atomic():
            note = Note.objects.create(**validated_data)
            self._set_associations(note, tags, notebooks, connected)
        return note

    def update(self, instance, validated_data):
        tags = validated_data.pop("tags", None)
        notebooks = validated_data.pop("notebook_ids", None)
        connected = validated_data.pop("connected_note_ids", None)
        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            instance.save()
            self._set_associations(instance, tags, notebooks, connected)
        return instance


class NoteDetailSerializer(NoteSerializer):
    def to_representation(self, instance):
        data = super().to_representation(instance)
        comments = instance.comments.select_related("author")
        data["comments"] = CommentSerializer(comments, many=True).data
        attachments = Attachment.objects.for_parent(ParentType.NOTE, instance.pk)
        data["attachments"] = AttachmentSerializer(attachments, many=True).data
        return data
