import pytest

from groups.models import Group
from notes.models import Note
from notebooks.models import Notebook

pytestmark = pytest.mark.django_db


@pytest.fixture
def create_notebook(client_for):
    def _create(user, **payload):
        payload.setdefault("name", "NB")
        response = client_for(user).post("/api/notebooks/", payload)
        assert response.status_code == 201, response.data
        return response.data

    return _create


class TestNotebookCrud:
    def test_create(self, create_notebook, contributor):
        notebook = create_notebook(contributor, name="Journal")

        assert notebook["name"] == "Journal"
        assert notebook["notebook_id"].startswith("NOTEBOOK_")
        assert notebook["owner"]["id"] == contributor.pk
        assert notebook["parent_notebook"] is None
        assert notebook["children"] == []

    def test_create_child(self, create_notebook, client_for, contributor):
        parent = create_notebook(contributor, name="parent")
        child = create_notebook(contributor, name="child", parent_notebook_id=parent["id"])

        assert child["parent_notebook"]["id"] == parent["id"]
        detail = client_for(contributor).get(f"/api/notebooks/{parent['id']}/").data
        assert [c["id"] for c in detail["children"]] == [child["id"]]

    def test_unknown_parent(self, client_for, contributor):
        response = client_for(contributor).post(
            "/api/notebooks/", {"name": "x", "parent_notebook_id": 999}
        )

        assert response.status_code == 404

    def test_cycle_rejected(self, create_notebook, client_for, contributor):
        a = create_notebook(contributor, name="a")
        b = create_notebook(contributor, name="b", parent_notebook_id=a["id"])
        c = create_notebook(contributor, name="c", parent_notebook_id=b["id"])
        client = client_for(contributor)

        onto_grandchild = client.put(f"/api/notebooks/{a['id']}/", {"parent_notebook_id": c["id"]})
        onto_itself = client.put(f"/api/notebooks/{a['id']}/", {"parent_notebook_id": a["id"]})

        assert onto_grandchild.status_code == 400
        assert onto_itself.status_code == 400
        assert Notebook.objects.get(pk=a["id"]).parent is None

    def test_detach_from_parent(self, create_notebook, client_for, contributor):
        parent = create_notebook(contributor, name="parent")
        child = create_notebook(contributor, name="child", parent_notebook_id=parent["id"])

        response = client_for(contributor).put(
            f"/api/notebooks/{child['id']}/", {"parent_notebook_id": None}, format="json"
        )

        assert response.status_code == 200
        assert response.data["parent_notebook"] is None

    def test_delete_keeps_notes_and_children(self, create_notebook, create_note, client_for, contributor):
        parent = create_notebook(contributor, name="parent")
        child = create_notebook(contributor, name="child", parent_notebook_id=parent["id"])
        note = create_note(contributor, notebook_ids=[parent["id"]])

        response = client_for(contributor).delete(f"/api/notebooks/{parent['id']}/")

        assert response.status_code == 200
        assert response.data["detail"] == "Notebook deleted successfully"
        assert Note.objects.get(pk=note["id"]).notebooks.count() == 0
        assert Notebook.objects.get(pk=child["id"]).parent is None


class TestNotebookPermissions:
    def test_listing(self, create_notebook, client_for, contributor, other_contributor, lead_editor):
        create_notebook(contributor, name="mine")
        create_notebook(other_contributor, name="theirs")

        own = client_for(contributor).get("/api/notebooks/").data
        everything = client_for(lead_editor).get("/api/notebooks/").data

        assert [nb["name"] for nb in own["items"]] == ["mine"]
        assert everything["count"] == 2

    def test_other_user_denied(self, create_notebook, client_for, contributor, other_contributor):
        notebook = create_notebook(contributor)
        client = client_for(other_contributor)

        assert client.get(f"/api/notebooks/{notebook['id']}/").status_code == 403
        assert client.put(f"/api/notebooks/{notebook['id']}/", {"name": "x"}).status_code == 403
        assert client.delete(f"/api/notebooks/{notebook['id']}/").status_code == 403

    def test_shared_through_group(self, create_notebook, client_for, contributor, other_contributor, lead_editor):
        notebook = create_notebook(contributor, name="shared")
        group = Group.objects.create(name="G", lead_editor=lead_editor)
        group.members.add(other_contributor)
        group.notebooks.add(notebook["id"])
        client = client_for(other_contributor)

        listed = client.get("/api/notebooks/").data

        assert [nb["name"] for nb in listed["items"]] == ["shared"]
        assert client.get(f"/api/notebooks/{notebook['id']}/").status_code == 200
        assert client.put(f"/api/notebooks/{notebook['id']}/", {"name": "x"}).status_code == 403


class TestNotebookNotes:
    def test_add_note(self, create_notebook, create_note, client_for, contributor):
        notebook = create_notebook(contributor)
        note = create_note(contributor)

        response = client_for(contributor).post(
            f"/api/notebooks/{notebook['id']}/notes/", {"note_id": note["id"]}
        )

        assert response.status_code == 200
        assert [n["id"] for n in response.data["notes"]] == [note["id"]]

    def test_add_note_needs_id(self, create_notebook, client_for, contributor):
        notebook = create_notebook(contributor)

        response = client_for(contributor).post(f"/api/notebooks/{notebook['id']}/notes/", {})

        assert response.status_code == 400

    def test_add_missing_note(self, create_notebook, client_for, contributor):
        notebook = create_notebook(contributor)

        response = client_for(contributor).post(
            f"/api/notebooks/{notebook['id']}/notes/", {"note_id": 999}
        )

        assert response.status_code == 404

    def test_add_hidden_note_denied(self, create_notebook, create_note, client_for, contributor, other_contributor):
        notebook = create_notebook(other_contributor)
        secret = create_note(contributor, title="SECRET")

        response = client_for(other_contributor).post(
            f"/api/notebooks/{notebook['id']}/notes/", {"note_id": secret["id"]}
        )

        assert response.status_code == 403
        assert Notebook.objects.get(pk=notebook["id"]).notes.count() == 0


class TestNotebookNoteVisibility:
    def test_lead_editor_sees_only_viewable_notes(self, create_notebook, create_note, client_for, contributor, lead_editor):
        notebook = create_notebook(contributor)
        create_note(contributor, title="SECRET", notebook_ids=[notebook["id"]])
        create_note(contributor, title="open", visibility="public", notebook_ids=[notebook["id"]])

        response = client_for(lead_editor).get(f"/api/notebooks/{notebook['id']}/")

        assert response.status_code == 200
        assert [n["title"] for n in response.data["notes"]] == ["open"]

    def test_group_member_sees_only_viewable_notes(
        self, create_notebook, create_note, client_for, contributor, other_contributor, lead_editor
    ):
        notebook = create_notebook(contributor)
        create_note(contributor, title="SECRET", notebook_ids=[notebook["id"]])
        group = Group.objects.create(name="G", lead_editor=lead_editor)
        group.members.add(other_contributor)
        group.notebooks.add(notebook["id"])

        detail = client_for(other_contributor).get(f"/api/notebooks/{notebook['id']}/").data
        listed = client_for(other_contributor).get("/api/notebooks/").data

        assert detail["notes"] == []
        assert listed["items"][0]["notes"] == []

    def test_owner_sees_own_private_notes(self, create_notebook, create_note, client_for, contributor):
        notebook = create_notebook(contributor)
        create_note(contributor, title="mine", notebook_ids=[notebook["id"]])

        response = client_for(contributor).get(f"/api/notebooks/{notebook['id']}/")

        assert [n["title"] for n in response.data["notes"]] == ["mine"]
