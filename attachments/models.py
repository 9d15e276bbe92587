from django.db import models

from core.ids import generate_external_id


def attachment_external_id():
    return generate_external_id("ATTACH")


class ParentType(models.TextChoices):
    NOTE = "Note", "Note"
    COMMENT = "Comment", "Comment"
    GROUP = "Group", "Group"


class AttachmentQuerySet(models.QuerySet):
    def for_parent(self, parent_type, parent_id):
        return self.filter(parent_type=parent_type, parent_id=parent_id)

    def visible_to(self, actor, parent_types=None):
        from .parents import visible_parents_condition

        return self.filter(visible_parents_condition(actor, parent_types))


class Attachment(models.Model):
    # attachment_id is a partial key: unique only together with its parent.
    attachment_id = models.CharField(max_length=64, default=attachment_external_id)
    file_name = models.CharField(max_length=255)
    file_type = models.CharField(max_length=255)
    url = models.CharField(max_length=2048)
    file_size = models.PositiveBigIntegerField(default=0)
    parent_type = models.CharField(max_length=16, choices=ParentType.choices)
    parent_id = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AttachmentQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["attachment_id", "parent_type", "parent_id"],
                name="uniq_attachment_per_parent",
            )
        ]
        indexes = [models.Index(fields=["parent_type", "parent_id"], name="attachment_parent_idx")]

    def __str__(self):
        return f"{self.file_name} ({self.parent_type} {self.parent_id})"
