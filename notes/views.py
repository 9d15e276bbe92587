import logging
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated, SAFE_METHODS
from rest_framework.response import Response
from rest_framework.views import APIView

from core import policy
from core.lookups import get_or_404
from core.permissions import ObjectPolicy
from core.views import (
    ActorMixin,
    CountedListMixin,
    DeleteMessageMixin,
    PartialUpdateMixin,
    int_param,
)
from tags.models import Tag
from .models import Note
from .serializers import NoteSerializer, NoteDetailSerializer

logger = logging.getLogger(__name__)


class NoteListCreateView(ActorMixin, CountedListMixin, generics.ListCreateAPIView):
    serializer_class = NoteSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        params = self.request.query_params
        qs = Note.objects.visible_to(self.actor).select_related("owner")

        notebook_id = int_param(params, "notebook_id")
        if notebook_id is not None:
            qs = qs.filter(notebooks__id=notebook_id)
        tag_id = int_param(params, "tag_id")
        if tag_id is not None:
            qs = qs.filter(tags__id=tag_id)
        user_id = int_param(params, "user_id")
        if user_id is not None:
            qs = qs.filter(owner_id=user_id)

        return qs.prefetch_related("tags", "notebooks", "connected_notes").distinct()

    def create(self, request, *args, **kwargs):
        policy.enforce(policy.can_create_note(self.actor))
        return super().create(request, *args, **kwargs)

    def perform_create(self, serializer):
        note = serializer.save(owner=self.request.user)
        logger.info("User %s created note %s", self.actor.id, note.note_id)


class NoteDetailView(
    ActorMixin, PartialUpdateMixin, DeleteMessageMixin, generics.RetrieveUpdateDestroyAPIView
):
    permission_classes = [IsAuthenticated, ObjectPolicy]
    queryset = Note.objects.select_related("owner")
    deleted_message = "Note deleted successfully"

    def get_serializer_class(self):
        if self.request.method in SAFE_METHODS:
            return NoteDetailSerializer
        return NoteSerializer

    def object_decision(self, note):
        if self.request.method in SAFE_METHODS:
            return policy.can_view_note(self.actor, note.owner_id, note.visibility)
        action = "delete" if self.request.method == "DELETE" else "edit"
        return policy.can_modify_note(self.actor, note.owner_id, action)

    def perform_destroy(self, instance):
        # Comments cascade through their foreign key; attachments of the note
        # and of its comments are removed by the attachment parent registry.
        note_id = instance.note_id
        instance.delete()
        logger.info("User %s deleted note %s", self.actor.id, note_id)


class NoteTagView(ActorMixin, APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        tag_id = int_param(request.data, "tag_id", required=True)
        note = get_or_404(Note, pk, "Note")
        tag = get_or_404(Tag, tag_id, "Tag")
        policy.enforce(policy.can_modify_note(self.actor, note.owner_id))

        note.tags.add(tag)
        return Response(NoteSerializer(note, context={"request": request}).data)
