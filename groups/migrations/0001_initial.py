import django.db.models.deletion
import groups.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("notebooks", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Group",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("group_id", models.CharField(default=groups.models.group_external_id, editable=False, max_length=64)),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("lead_editor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="led_groups", to=settings.AUTH_USER_MODEL)),
                ("members", models.ManyToManyField(blank=True, related_name="member_groups", to=settings.AUTH_USER_MODEL)),
                ("notebooks", models.ManyToManyField(blank=True, related_name="accessible_groups", to="notebooks.notebook")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "constraints": [
                    models.UniqueConstraint(fields=("group_id", "lead_editor"), name="uniq_group_id_per_lead"),
                ],
            },
        ),
    ]
