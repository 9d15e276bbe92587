from django.apps import AppConfig
from django.db.models.signals import pre_delete


class AttachmentsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "attachments"

    def ready(self):
        from .parents import connect_cascades

        connect_cascades(pre_delete)
