from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.db import models

from core.ids import generate_external_id
from core.roles import Role, RoleSet, default_roles


def user_external_id():
    return generate_external_id("USER")


class UserManager(DjangoUserManager):
    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("roles", [Role.ADMIN.value])
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    user_id = models.CharField(max_length=64, unique=True, default=user_external_id, editable=False)
    email = models.EmailField(unique=True)
    phone = models.JSONField(default=list, blank=True)
    institution = models.CharField(max_length=255, blank=True, default="")
    roles = models.JSONField(default=default_roles)

    objects = UserManager()

    @property
    def role_set(self):
        return RoleSet(self.roles)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def save(self, *args, **kwargs):
        self.roles = RoleSet(self.roles).as_list()
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)
