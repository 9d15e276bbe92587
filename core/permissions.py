from rest_framework.permissions import BasePermission


class ObjectPolicy(BasePermission):
    """
    Delegates object access to the view's object_decision(obj), which returns
    a policy Decision. The deny reason becomes the 403 message.
    """

    def has_object_permission(self, request, view, obj):
        decision = view.object_decision(obj)
        if not decision.allowed:
            self.message = decision.reason
        return decision.allowed
