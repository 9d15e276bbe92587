from django.contrib.auth import get_user_model
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated

from core import policy
from core.views import ActorMixin, CountedListMixin
from .serializers import UserSerializer

User = get_user_model()


class UserListView(ActorMixin, CountedListMixin, generics.ListAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        policy.enforce(policy.can_list_users(self.actor))
        return User.objects.order_by("username")


class UserDetailView(generics.RetrieveAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated]
    queryset = User.objects.all()
