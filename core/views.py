from collections.abc import Mapping

from django.db import transaction
from django.utils.functional import cached_property
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .policy import Actor


def int_param(params, name, required=False):
    if not isinstance(params, Mapping):
        raise ValidationError("Request body must be a JSON object.")
    raw = params.get(name)
    if raw in (None, ""):
        if required:
            raise ValidationError({name: "This field is required."})
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError({name: "A valid integer is required."})


def context_actor(context):
    """The Actor behind a serializer context, or None outside a request."""
    view = context.get("view")
    if isinstance(view, ActorMixin):
        return view.actor
    request = context.get("request")
    if request is None:
        return None
    return Actor.from_user(request.user)


class ActorMixin:
    """Resolves the authenticated user once per request into an immutable Actor."""

    @cached_property
    def actor(self):
        return Actor.from_user(self.request.user)


class CountedListMixin:
    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        items = self.get_serializer(queryset, many=True).data
        return Response({"count": len(items), "items": items})


class PartialUpdateMixin:
    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)


class DeleteMessageMixin:
    deleted_message = "Deleted successfully."

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        with transaction.atomic():
            self.perform_destroy(instance)
        return Response({"detail": self.deleted_message})


class HealthView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({"detail": "Server is running!", "status": "ok"})
