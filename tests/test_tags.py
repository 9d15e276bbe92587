import pytest

from notes.models import Note
from tags.models import Tag

pytestmark = pytest.mark.django_db


def test_create_normalizes_name(client_for, contributor):
    response = client_for(contributor).post("/api/tags/", {"name": "  Work "})

    assert response.status_code == 201
    assert response.data["name"] == "work"
    assert response.data["tag_id"].startswith("TAG_")


def test_names_are_case_insensitive_unique(client_for, contributor):
    client = client_for(contributor)
    client.post("/api/tags/", {"name": "Work"})

    response = client.post("/api/tags/", {"name": "work"})

    assert response.status_code == 400
    assert response.data["detail"] == "Tag already exists"
    assert Tag.objects.count() == 1


def test_blank_name_rejected(client_for, contributor):
    response = client_for(contributor).post("/api/tags/", {"name": "   "})

    assert response.status_code == 400


def test_list_tags(client_for, contributor):
    Tag.objects.create(name="b")
    Tag.objects.create(name="a")

    response = client_for(contributor).get("/api/tags/")

    assert response.status_code == 200
    assert response.data["count"] == 2
    assert {t["name"] for t in response.data["items"]} == {"a", "b"}


def test_tag_detail_lists_only_visible_notes(create_note, client_for, contributor, other_contributor):
    tag = Tag.objects.create(name="work")
    create_note(contributor, title="hidden", tags=[tag.pk])
    create_note(contributor, title="open", tags=[tag.pk], visibility="public")

    response = client_for(other_contributor).get(f"/api/tags/{tag.pk}/")

    assert response.status_code == 200
    assert [n["title"] for n in response.data["notes"]] == ["open"]


def test_unknown_tag(client_for, contributor):
    assert client_for(contributor).get("/api/tags/999/").status_code == 404


def test_delete_detaches_from_notes(create_note, client_for, contributor, editor):
    tag = Tag.objects.create(name="work")
    note = create_note(contributor, tags=[tag.pk])

    response = client_for(editor).delete(f"/api/tags/{tag.pk}/")

    assert response.status_code == 200
    assert not Tag.objects.filter(pk=tag.pk).exists()
    assert Note.objects.get(pk=note["id"]).tags.count() == 0


def test_contributor_cannot_delete(client_for, contributor):
    tag = Tag.objects.create(name="work")

    response = client_for(contributor).delete(f"/api/tags/{tag.pk}/")

    assert response.status_code == 403
    assert Tag.objects.filter(pk=tag.pk).exists()
