import django.db.models.deletion
import notes.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("notebooks", "0001_initial"),
        ("tags", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Note",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("note_id", models.CharField(default=notes.models.note_external_id, editable=False, max_length=64, unique=True)),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField(blank=True, default="")),
                ("type", models.CharField(choices=[("text", "Text"), ("markdown", "Markdown"), ("todo", "To-do"), ("code", "Code")], default="text", max_length=16)),
                ("visibility", models.CharField(choices=[("public", "Public"), ("private", "Private"), ("shared", "Shared")], default="private", max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notes", to=settings.AUTH_USER_MODEL)),
                ("connected_notes", models.ManyToManyField(blank=True, related_name="connected_from", to="notes.note")),
                ("notebooks", models.ManyToManyField(blank=True, related_name="notes", to="notebooks.notebook")),
                ("tags", models.ManyToManyField(blank=True, related_name="notes", to="tags.tag")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
