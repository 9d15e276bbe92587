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
from notes.models import Note
from .models import Notebook
from .serializers import NotebookSerializer

logger = logging.getLogger(__name__)


class NotebookListCreateView(ActorMixin, CountedListMixin, generics.ListCreateAPIView):
    serializer_class = NotebookSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return (
            Notebook.objects.visible_to(self.actor)
            .select_related("owner", "parent")
            .prefetch_related("children", "notes")
        )

    def perform_create(self, serializer):
        notebook = serializer.save(owner=self.request.user)
        logger.info("User %s created notebook %s", self.actor.id, notebook.notebook_id)


class NotebookDetailView(
    ActorMixin, PartialUpdateMixin, DeleteMessageMixin, generics.RetrieveUpdateDestroyAPIView
):
    serializer_class = NotebookSerializer
    permission_classes = [IsAuthenticated, ObjectPolicy]
    queryset = Notebook.objects.select_related("owner", "parent")
    deleted_message = "Notebook deleted successfully"

    def object_decision(self, notebook):
        if self.request.method in SAFE_METHODS:
            shared = notebook.owner_id != self.actor.id and notebook.is_shared_with(self.actor)
            return policy.can_view_notebook(self.actor, notebook.owner_id, shared)
        action = "delete" if self.request.method == "DELETE" else "edit"
        return policy.can_modify_notebook(self.actor, notebook.owner_id, action)

    def perform_destroy(self, instance):
        # Notes stay; only the association goes. Child notebooks become top-level.
        instance.notes.clear()
        instance.delete()
        logger.info("User %s deleted notebook %s", self.actor.id, instance.notebook_id)


class NotebookNoteView(ActorMixin, APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        note_id = int_param(request.data, "note_id", required=True)
        notebook = get_or_404(Notebook, pk, "Notebook")
        note = get_or_404(Note, note_id, "Note")
        policy.enforce(policy.can_modify_notebook(self.actor, notebook.owner_id))
        policy.enforce(policy.can_view_note(self.actor, note.owner_id, note.visibility))

        notebook.notes.add(note)
        return Response(NotebookSerializer(notebook, context={"request": request}).data)
