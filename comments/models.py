from django.conf import settings
from django.db import models

from core.ids import generate_external_id


def comment_external_id():
    return generate_external_id("COMMENT")


class Comment(models.Model):
    comment_id = models.CharField(max_length=64, default=comment_external_id, editable=False)
    note = models.ForeignKey("notes.Note", on_delete=models.CASCADE, related_name="comments")
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="comments")
    text = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["comment_id", "note"], name="uniq_comment_id_per_note")
        ]
