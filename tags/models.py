from django.db import models

from core.ids import generate_external_id


def tag_external_id():
    return generate_external_id("TAG")


def normalize_tag_name(name):
    return (name or "").strip().lower()


class Tag(models.Model):
    tag_id = models.CharField(max_length=64, unique=True, default=tag_external_id, editable=False)
    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def save(self, *args, **kwargs):
        self.name = normalize_tag_name(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
