import logging
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated

from core import policy
from core.views import ActorMixin, CountedListMixin, DeleteMessageMixin
from .models import Tag
from .serializers import TagSerializer

logger = logging.getLogger(__name__)


class TagListCreateView(ActorMixin, CountedListMixin, generics.ListCreateAPIView):
    serializer_class = TagSerializer
    permission_classes = [IsAuthenticated]
    queryset = Tag.objects.all()

    def perform_create(self, serializer):
        tag = serializer.save()
        logger.info("Created tag %s", tag.name)


class TagDetailView(ActorMixin, DeleteMessageMixin, generics.RetrieveDestroyAPIView):
    serializer_class = TagSerializer
    permission_classes = [IsAuthenticated]
    queryset = Tag.objects.all()
    deleted_message = "Tag deleted successfully"

    def perform_destroy(self, instance):
        policy.enforce(policy.can_delete_tag(self.actor))
        instance.notes.clear()
        instance.delete()
