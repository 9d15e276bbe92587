"""
Registry of attachment parents.

An attachment points at its parent through (parent_type, parent_id) with no
foreign key. Each ParentType maps to a ParentKind that knows how to load the
parent and which policy predicates guard it. Adding a new parent kind means
adding a ParentType member and one registry entry.
"""
import logging
from dataclasses import dataclass
from typing import Callable

from django.apps import apps
from django.db.models import Q, QuerySet
from rest_framework.exceptions import NotFound

from core import policy
from core.policy import Actor, Decision
from .models import Attachment, ParentType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParentRef:
    type: ParentType
    id: int

    @classmethod
    def of(cls, attachment):
        return cls(ParentType(attachment.parent_type), attachment.parent_id)


@dataclass(frozen=True)
class ParentKind:
    model_label: str
    can_view: Callable[[Actor, object], Decision]
    can_modify: Callable[[Actor, object, str], Decision]
    visible: Callable[[Actor], QuerySet]

    @property
    def model(self):
        return apps.get_model(self.model_label)


def _view_note(actor, note):
    return policy.can_view_note(actor, note.owner_id, note.visibility)


def _modify_note(actor, note, action):
    return policy.can_modify_note(actor, note.owner_id, action)


def _visible_notes(actor):
    return apps.get_model("notes.Note").objects.visible_to(actor)


def _view_comment(actor, comment):
    return _view_note(actor, comment.note)


def _modify_comment(actor, comment, action):
    return policy.can_modify_comment(actor, comment.author_id, action)


def _visible_comments(actor):
    return apps.get_model("comments.Comment").objects.filter(note__in=_visible_notes(actor))


def _view_group(actor, group):
    return policy.can_view_group(actor, group.lead_editor_id, group.member_ids())


def _modify_group(actor, group, action):
    return policy.can_modify_group(actor, group.lead_editor_id, action)


def _visible_groups(actor):
    return apps.get_model("groups.Group").objects.visible_to(actor)


PARENT_KINDS = {
    ParentType.NOTE: ParentKind("notes.Note", _view_note, _modify_note, _visible_notes),
    ParentType.COMMENT: ParentKind("comments.Comment", _view_comment, _modify_comment, _visible_comments),
    ParentType.GROUP: ParentKind("groups.Group", _view_group, _modify_group, _visible_groups),
}


def kind_for(parent_type):
    return PARENT_KINDS[ParentType(parent_type)]


def resolve_parent(ref):
    kind = kind_for(ref.type)
    try:
        return kind.model.objects.get(pk=ref.id)
    except kind.model.DoesNotExist:
        raise NotFound(f"{ParentType(ref.type).label} not found")


def parent_type_of(instance):
    for parent_type, kind in PARENT_KINDS.items():
        if isinstance(instance, kind.model):
            return parent_type
    return None


def can_view_parent(actor, ref, parent):
    return kind_for(ref.type).can_view(actor, parent)


def can_modify_parent(actor, ref, parent, action="edit"):
    return kind_for(ref.type).can_modify(actor, parent, action)


def visible_parents_condition(actor, parent_types=None):
    """Q matching attachments whose parent the actor may view."""
    condition = Q(pk__in=[])
    for parent_type in parent_types or PARENT_KINDS:
        parent_ids = kind_for(parent_type).visible(actor).values("pk")
        condition |= Q(parent_type=parent_type, parent_id__in=parent_ids)
    return condition


def delete_attachments_for(instance):
    parent_type = parent_type_of(instance)
    if parent_type is None or instance.pk is None:
        return 0
    deleted, _ = Attachment.objects.for_parent(parent_type, instance.pk).delete()
    if deleted:
        logger.info("Deleted %d attachments of %s %s", deleted, parent_type, instance.pk)
    return deleted


def _on_parent_delete(sender, instance, **kwargs):
    delete_attachments_for(instance)


def connect_cascades(signal):
    for parent_type, kind in PARENT_KINDS.items():
        signal.connect(
            _on_parent_delete,
            sender=kind.model,
            dispatch_uid=f"attachments-cascade-{parent_type.value}",
        )
