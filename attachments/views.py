import logging
from rest_framework import generics
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated, SAFE_METHODS

from core import policy
from core.exceptions import ConflictError
from core.permissions import ObjectPolicy
from core.views import ActorMixin, CountedListMixin, DeleteMessageMixin, int_param
from .models import Attachment, ParentType
from .parents import ParentRef, can_modify_parent, can_view_parent, resolve_parent
from .serializers import AttachmentSerializer

logger = logging.getLogger(__name__)


def _parent_type(params):
    parent_type = params.get("parent_type")
    if parent_type in (None, ""):
        return None
    if parent_type not in ParentType.values:
        raise ValidationError(
            {"parent_type": f"Must be one of: {', '.join(ParentType.values)}."}
        )
    return ParentType(parent_type)


class AttachmentListCreateView(ActorMixin, CountedListMixin, generics.ListCreateAPIView):
    serializer_class = AttachmentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        params = self.request.query_params
        parent_type = _parent_type(params)
        parent_id = int_param(params, "parent_id")

        if parent_type is not None and parent_id is not None:
            # A single named parent: missing is 404, hidden is 403.
            ref = ParentRef(parent_type, parent_id)
            policy.enforce(can_view_parent(self.actor, ref, resolve_parent(ref)))
            return Attachment.objects.for_parent(ref.type, ref.id)

        qs = Attachment.objects.visible_to(
            self.actor, [parent_type] if parent_type is not None else None
        )
        if parent_id is not None:
            qs = qs.filter(parent_id=parent_id)
        return qs

    def perform_create(self, serializer):
        data = serializer.validated_data
        ref = ParentRef(ParentType(data["parent_type"]), data["parent_id"])
        parent = resolve_parent(ref)
        policy.enforce(can_modify_parent(self.actor, ref, parent))

        duplicate = Attachment.objects.for_parent(ref.type, ref.id).filter(
            attachment_id=data["attachment_id"]
        )
        if duplicate.exists():
            raise ConflictError("Attachment already exists for this parent")

        attachment = serializer.save()
        logger.info(
            "User %s attached %s to %s %s",
            self.actor.id,
            attachment.attachment_id,
            ref.type,
            ref.id,
        )


class AttachmentDetailView(ActorMixin, DeleteMessageMixin, generics.RetrieveDestroyAPIView):
    serializer_class = AttachmentSerializer
    permission_classes = [IsAuthenticated, ObjectPolicy]
    queryset = Attachment.objects.all()
    deleted_message = "Attachment deleted successfully"

    def object_decision(self, attachment):
        ref = ParentRef.of(attachment)
        parent = resolve_parent(ref)
        if self.request.method in SAFE_METHODS:
            return can_view_parent(self.actor, ref, parent)
        return can_modify_parent(self.actor, ref, parent, "delete")
