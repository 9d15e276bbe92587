from django.db import transaction
from rest_framework import serializers

from core.lookups import get_or_404
from core.views import context_actor
from users.serializers import UserSummarySerializer
from .models import Notebook


def _notebook_summary(notebook):
    if notebook is None:
        return None
    return {"id": notebook.id, "notebook_id": notebook.notebook_id, "name": notebook.name}


class NotebookSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    parent_notebook_id = serializers.IntegerField(required=False, allow_null=True, write_only=True)

    class Meta:
        model = Notebook
        fields = ["id", "notebook_id", "name", "owner", "parent_notebook_id", "created_at", "updated_at"]
        read_only_fields = ["id", "notebook_id", "created_at", "updated_at"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["parent_notebook"] = _notebook_summary(instance.parent)
        data["children"] = [_notebook_summary(child) for child in instance.children.all()]
        notes = instance.notes.all()
        actor = context_actor(self.context)
        if actor is not None:
            notes = notes.visible_to(actor)
        data["notes"] = [
            {"id": note.id, "note_id": note.note_id, "title": note.title}
            for note in notes
        ]
        return data

    def validate(self, attrs):
        if "parent_notebook_id" in attrs:
            parent_id = attrs.pop("parent_notebook_id")
            parent = get_or_404(Notebook, parent_id, "Parent notebook") if parent_id is not None else None
            if self.instance is not None and self.instance.would_cycle(parent):
                raise serializers.ValidationError(
                    {"parent_notebook_id": "A notebook cannot be its own ancestor."}
                )
            attrs["parent"] = parent
        return attrs

    def update(self, instance, validated_data):
        with transaction.atomic():
            return super().update(instance, validated_data)
