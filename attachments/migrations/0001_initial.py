import attachments.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Attachment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("attachment_id", models.CharField(default=attachments.models.attachment_external_id, max_length=64)),
                ("file_name", models.CharField(max_length=255)),
                ("file_type", models.CharField(max_length=255)),
                ("url", models.CharField(max_length=2048)),
                ("file_size", models.PositiveBigIntegerField(default=0)),
                ("parent_type", models.CharField(choices=[("Note", "Note"), ("Comment", "Comment"), ("Group", "Group")], max_length=16)),
                ("parent_id", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["parent_type", "parent_id"], name="attachment_parent_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("attachment_id", "parent_type", "parent_id"), name="uniq_attachment_per_parent"),
                ],
            },
        ),
    ]
