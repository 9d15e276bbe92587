from django.conf import settings
from django.db import models
from django.db.models import Q

from core import policy
from core.ids import generate_external_id


def notebook_external_id():
    return generate_external_id("NOTEBOOK")


class NotebookQuerySet(models.QuerySet):
    def shared_with(self, actor):
        return self.filter(
            Q(accessible_groups__members__id=actor.id)
            | Q(accessible_groups__lead_editor_id=actor.id)
        )

    def visible_to(self, actor):
        if policy.sees_all_notebooks(actor):
            return self
        shared = self.model.objects.shared_with(actor).values("pk")
        return self.filter(Q(owner_id=actor.id) | Q(pk__in=shared))


class Notebook(models.Model):
    notebook_id = models.CharField(max_length=64, unique=True, default=notebook_external_id, editable=False)
    name = models.CharField(max_length=255)
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notebooks")
    parent = models.ForeignKey(
        "self", null=True, blank=True, on_delete=models.SET_NULL, related_name="children"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = NotebookQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.name

    def ancestors(self):
        """Yield parent, grandparent, ... up to the root."""
        seen = {self.pk}
        node = self.parent
        while node is not None and node.pk not in seen:
            yield node
            seen.add(node.pk)
            node = node.parent

    def would_cycle(self, new_parent):
        """True if making new_parent this notebook's parent would close a loop."""
        if new_parent is None or self.pk is None:
            return False
        if new_parent.pk == self.pk:
            return True
        return any(node.pk == self.pk for node in new_parent.ancestors())

    def is_shared_with(self, actor):
        return Notebook.objects.shared_with(actor).filter(pk=self.pk).exists()
