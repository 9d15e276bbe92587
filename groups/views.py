import logging
from django.contrib.auth import get_user_model
from rest_framework import generics, status
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
from .models import Group
from .serializers import GroupSerializer, GroupDetailSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class GroupListCreateView(ActorMixin, CountedListMixin, generics.ListCreateAPIView):
    serializer_class = GroupSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return (
            Group.objects.visible_to(self.actor)
            .select_related("lead_editor")
            .prefetch_related("members", "notebooks")
        )

    def create(self, request, *args, **kwargs):
        policy.enforce(policy.can_create_group(self.actor))
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        group = serializer.save(lead_editor=request.user)
        logger.info("User %s created group %s", self.actor.id, group.group_id)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class GroupDetailView(
    ActorMixin, PartialUpdateMixin, DeleteMessageMixin, generics.RetrieveUpdateDestroyAPIView
):
    permission_classes = [IsAuthenticated, ObjectPolicy]
    queryset = Group.objects.select_related("lead_editor")
    deleted_message = "Group deleted successfully"

    def get_serializer_class(self):
        if self.request.method in SAFE_METHODS:
            return GroupDetailSerializer
        return GroupSerializer

    def object_decision(self, group):
        if self.request.method in SAFE_METHODS:
            return policy.can_view_group(self.actor, group.lead_editor_id, group.member_ids())
        action = "delete" if self.request.method == "DELETE" else "edit"
        return policy.can_modify_group(self.actor, group.lead_editor_id, action)

    def perform_destroy(self, instance):
        # The pre_delete hook drops attachments before Django removes the
        # member and notebook links and then the group row.
        instance.delete()
        logger.info("User %s deleted group %s", self.actor.id, instance.group_id)


class GroupMemberView(ActorMixin, APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        user_id = int_param(request.data, "user_id", required=True)
        group = get_or_404(Group, pk, "Group")
        user = get_or_404(User, user_id, "User")
        policy.enforce(policy.can_modify_group(self.actor, group.lead_editor_id, "modify"))

        group.members.add(user)
        return Response(GroupSerializer(group, context={"request": request}).data)
