from rest_framework.exceptions import NotFound


def get_or_404(model, pk, label=None):
    label = label or model._meta.verbose_name.capitalize()
    try:
        return model.objects.get(pk=pk)
    except (model.DoesNotExist, ValueError, TypeError):
        raise NotFound(f"{label} not found")


def resolve_ids(model, ids, label=None):
    """Load every instance named in ids, or raise NotFound listing the missing ones."""
    label = label or model._meta.verbose_name.capitalize()
    wanted = list(dict.fromkeys(ids))
    found = {obj.pk: obj for obj in model.objects.filter(pk__in=wanted)}
    missing = [pk for pk in wanted if pk not in found]
    if missing:
        raise NotFound(f"{label} not found: {', '.join(str(pk) for pk in missing)}")
    return [found[pk] for pk in wanted]
