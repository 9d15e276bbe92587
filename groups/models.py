from django.conf import settings
from django.db import models
from django.db.models import Q

from core import policy
from core.ids import generate_external_id


def group_external_id():
    return generate_external_id("GROUP")


class GroupQuerySet(models.QuerySet):
    def visible_to(self, actor):
        if policy.sees_all_groups(actor):
            return self
        member_of = self.model.objects.filter(members__id=actor.id).values("pk")
        return self.filter(Q(lead_editor_id=actor.id) | Q(pk__in=member_of))


class Group(models.Model):
    group_id = models.CharField(max_length=64, default=group_external_id, editable=False)
    name = models.CharField(max_length=255)
    lead_editor = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="led_groups"
    )
    members = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name="member_groups", blank=True)
    notebooks = models.ManyToManyField(
        "notebooks.Notebook", related_name="accessible_groups", blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = GroupQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["group_id", "lead_editor"], name="uniq_group_id_per_lead")
        ]

    def __str__(self):
        return self.name

    def member_ids(self):
        return list(self.members.values_list("id", flat=True))
