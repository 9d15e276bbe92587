"""
Authorization policy.

Every predicate is a pure function of the acting user and the ownership or
membership facts of a resource. None of them touch the database; callers load
the facts and pass them in.
"""
from dataclasses import dataclass

from rest_framework.exceptions import PermissionDenied

from .roles import Role, RoleSet

CONTENT_EDITORS = (Role.ADMIN, Role.EDITOR, Role.LEAD_EDITOR)
GROUP_MANAGERS = (Role.ADMIN, Role.LEAD_EDITOR)
NOTEBOOK_MANAGERS = (Role.ADMIN, Role.LEAD_EDITOR)

PRIVATE = "private"


@dataclass(frozen=True)
class Actor:
    id: int
    roles: RoleSet

    @classmethod
    def from_user(cls, user):
        return cls(id=user.pk, roles=user.role_set)

    def has_any(self, *roles):
        return self.roles.has_any(*roles)


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str = ""

    def __bool__(self):
        return self.allowed


ALLOW = Decision(True)


def deny(reason):
    return Decision(False, reason)


def enforce(decision):
    if not decision.allowed:
        raise PermissionDenied(decision.reason)
    return decision


# Notes

def sees_all_notes(actor):
    return actor.has_any(Role.ADMIN)


def can_create_note(actor):
    return ALLOW


def can_view_note(actor, owner_id, visibility):
    if sees_all_notes(actor) or owner_id == actor.id or visibility != PRIVATE:
        return ALLOW
    return deny("Access denied to this note")


def can_modify_note(actor, owner_id, action="edit"):
    if actor.has_any(*CONTENT_EDITORS) or owner_id == actor.id:
        return ALLOW
    return deny(f"You do not have permission to {action} this note")


# Comments

def can_modify_comment(actor, author_id, action="delete"):
    if actor.has_any(*CONTENT_EDITORS) or author_id == actor.id:
        return ALLOW
    return deny(f"You do not have permission to {action} this comment")


# Notebooks

def sees_all_notebooks(actor):
    return actor.has_any(*NOTEBOOK_MANAGERS)


def can_view_notebook(actor, owner_id, shared_with_actor=False):
    if sees_all_notebooks(actor) or owner_id == actor.id or shared_with_actor:
        return ALLOW
    return deny("Access denied to this notebook")


def can_modify_notebook(actor, owner_id, action="edit"):
    if actor.has_any(*NOTEBOOK_MANAGERS) or owner_id == actor.id:
        return ALLOW
    return deny(f"You do not have permission to {action} this notebook")


# Groups

def sees_all_groups(actor):
    return actor.has_any(*GROUP_MANAGERS)


def can_create_group(actor):
    if actor.has_any(*GROUP_MANAGERS):
        return ALLOW
    return deny("Only Lead Editors and Admins can create groups")


def can_view_group(actor, lead_editor_id, member_ids=()):
    if sees_all_groups(actor) or lead_editor_id == actor.id or actor.id in set(member_ids):
        return ALLOW
    return deny("Access denied to this group")


def can_modify_group(actor, lead_editor_id, action="edit"):
    if actor.has_any(Role.ADMIN):
        return ALLOW
    if actor.has_any(Role.LEAD_EDITOR) and lead_editor_id == actor.id:
        return ALLOW
    return deny(f"You do not have permission to {action} this group")


# Tags

def can_delete_tag(actor):
    if actor.has_any(*CONTENT_EDITORS):
        return ALLOW
    return deny("You do not have permission to delete tags")


# Users

def can_list_users(actor):
    if actor.has_any(Role.ADMIN):
        return ALLOW
    return deny("Access denied. Required role: Admin")
