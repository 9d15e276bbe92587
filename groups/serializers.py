from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers

from attachments.models import Attachment, ParentType
from attachments.serializers import AttachmentSerializer
from core.lookups import resolve_ids
from notebooks.models import Notebook
from users.serializers import UserSummarySerializer
from .models import Group

User = get_user_model()


class GroupSerializer(serializers.ModelSerializer):
    lead_editor = UserSummarySerializer(read_only=True)
    members = UserSummarySerializer(many=True, read_only=True)
    member_ids = serializers.ListField(child=serializers.IntegerField(), required=False, write_only=True)
    notebook_ids = serializers.ListField(child=serializers.IntegerField(), required=False, write_only=True)

    class Meta:
        model = Group
        fields = [
            "id",
            "group_id",
            "name",
            "lead_editor",
            "members",
            "member_ids",
            "notebook_ids",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "group_id", "created_at", "updated_at"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["accessible_notebooks"] = [
            {"id": nb.id, "notebook_id": nb.notebook_id, "name": nb.name}
            for nb in instance.notebooks.all()
        ]
        return data

    def validate(self, attrs):
        if "member_ids" in attrs:
            attrs["member_ids"] = resolve_ids(User, attrs["member_ids"], "User")
        if "notebook_ids" in attrs:
            attrs["notebook_ids"] = resolve_ids(Notebook, attrs["notebook_ids"], "Notebook")
        return attrs

    def _set_associations(self, group, members, notebooks):
        if members is not None:
            group.members.set(members)
        if notebooks is not None:
            group.notebooks.set(notebooks)

    def create(self, validated_data):
        members = validated_data.pop("member_ids", None)
        notebooks = validated_data.pop("notebook_ids", None)
        with transaction.atomic():
            group = Group.objects.create(**validated_data)
            self._set_associations(group, members, notebooks)
        return group

    def update(self, instance, validated_data):
        members = validated_data.pop("member_ids", None)
        notebooks = validated_data.pop("notebook_ids", None)
        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            instance.save()
            self._set_associations(instance, members, notebooks)
        return instance


class GroupDetailSerializer(GroupSerializer):
    def to_representation(self, instance):
        data = super().to_representation(instance)
        attachments = Attachment.objects.for_parent(ParentType.GROUP, instance.pk)
        data["attachments"] = AttachmentSerializer(attachments, many=True).data
        return data
