from django.db import models


class Role(models.TextChoices):
    ADMIN = "Admin", "Admin"
    LEAD_EDITOR = "Lead Editor", "Lead Editor"
    EDITOR = "Editor", "Editor"
    CONTRIBUTOR = "Contributor", "Contributor"


DEFAULT_ROLES = [Role.CONTRIBUTOR.value]


def default_roles():
    return list(DEFAULT_ROLES)


class InvalidRoleError(ValueError):
    pass


class RoleSet(frozenset):
    """
    Immutable, non-empty set of roles.

    Permissions of a multi-role user are the union of each role's grants, so
    every check goes through has_any().
    """

    def __new__(cls, roles=()):
        if isinstance(roles, str):
            roles = [roles]
        members = []
        for value in roles or ():
            try:
                members.append(Role(value))
            except ValueError:
                raise InvalidRoleError(f"Invalid role: {value}") from None
        if not members:
            raise InvalidRoleError("At least one role is required.")
        return super().__new__(cls, members)

    def has_any(self, *roles):
        return not self.isdisjoint(roles)

    def as_list(self):
        return [role.value for role in Role if role in self]

    def __repr__(self):
        return f"RoleSet({self.as_list()!r})"
