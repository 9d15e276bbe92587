from django.conf import settings
from django.db import models
from django.db.models import Q

from core import policy
from core.ids import generate_external_id


def note_external_id():
    return generate_external_id("NOTE")


class NoteType(models.TextChoices):
    TEXT = "text", "Text"
    MARKDOWN = "markdown", "Markdown"
    TODO = "todo", "To-do"
    CODE = "code", "Code"


class Visibility(models.TextChoices):
    PUBLIC = "public", "Public"
    PRIVATE = "private", "Private"
    SHARED = "shared", "Shared"


class NoteQuerySet(models.QuerySet):
    def visible_to(self, actor):
        if policy.sees_all_notes(actor):
            return self
        return self.filter(Q(owner_id=actor.id) | ~Q(visibility=Visibility.PRIVATE))


class Note(models.Model):
    note_id = models.CharField(max_length=64, unique=True, default=note_external_id, editable=False)
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notes")
    title = models.CharField(max_length=255)
    content = models.TextField(blank=True, default="")
    type = models.CharField(max_length=16, choices=NoteType.choices, default=NoteType.TEXT)
    visibility = models.CharField(max_length=16, choices=Visibility.choices, default=Visibility.PRIVATE)
    tags = models.ManyToManyField("tags.Tag", related_name="notes", blank=True)
    notebooks = models.ManyToManyField("notebooks.Notebook", related_name="notes", blank=True)
    connected_notes = models.ManyToManyField(
        "self", symmetrical=False, related_name="connected_from", blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = NoteQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title
