import logging
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated, SAFE_METHODS

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
from notes.models import Note
from .models import Comment
from .serializers import CommentSerializer, CommentUpdateSerializer

logger = logging.getLogger(__name__)


class CommentListCreateView(ActorMixin, CountedListMixin, generics.ListCreateAPIView):
    serializer_class = CommentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qs = Comment.objects.filter(note__in=Note.objects.visible_to(self.actor))
        note_id = int_param(self.request.query_params, "note_id")
        if note_id is not None:
            qs = qs.filter(note_id=note_id)
        return qs.select_related("author", "note")

    def perform_create(self, serializer):
        note = get_or_404(Note, serializer.validated_data.pop("note_id"), "Note")
        policy.enforce(policy.can_view_note(self.actor, note.owner_id, note.visibility))
        comment = serializer.save(note=note, author=self.request.user)
        logger.info("User %s commented on note %s", self.actor.id, note.note_id)
        return comment


class CommentDetailView(
    ActorMixin, PartialUpdateMixin, DeleteMessageMixin, generics.RetrieveUpdateDestroyAPIView
):
    permission_classes = [IsAuthenticated, ObjectPolicy]
    queryset = Comment.objects.select_related("author", "note")
    deleted_message = "Comment deleted successfully"

    def get_serializer_class(self):
        if self.request.method in SAFE_METHODS:
            return CommentSerializer
        return CommentUpdateSerializer

    def object_decision(self, comment):
        if self.request.method in SAFE_METHODS:
            note = comment.note
            return policy.can_view_note(self.actor, note.owner_id, note.visibility)
        action = "delete" if self.request.method == "DELETE" else "edit"
        return policy.can_modify_comment(self.actor, comment.author_id, action)
