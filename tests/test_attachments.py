import pytest

from attachments.models import Attachment

pytestmark = pytest.mark.django_db


def attachment_payload(parent_type, parent_id, **extra):
    payload = {
        "parent_type": parent_type,
        "parent_id": parent_id,
        "file_name": "diagram.png",
        "file_type": "image/png",
        "url": "https://files.example.com/diagram.png",
        "file_size": 2048,
    }
    payload.update(extra)
    return payload


class TestAttachmentCreate:
    def test_attach_to_note(self, create_note, client_for, contributor):
        note = create_note(contributor)

        response = client_for(contributor).post("/api/attachments/", attachment_payload("Note", note["id"]))

        assert response.status_code == 201
        assert response.data["attachment_id"].startswith("ATTACH_")
        assert response.data["parent_type"] == "Note"
        assert response.data["file_size"] == 2048

    def test_duplicate_id_on_same_parent(self, create_note, client_for, contributor):
        note = create_note(contributor)
        client = client_for(contributor)
        payload = attachment_payload("Note", note["id"], attachment_id="ATTACH_fixed")
        client.post("/api/attachments/", payload)

        response = client.post("/api/attachments/", payload)

        assert response.status_code == 400
        assert response.data["detail"] == "Attachment already exists for this parent"
        assert Attachment.objects.count() == 1

    def test_same_id_on_another_parent(self, create_note, client_for, contributor):
        first = create_note(contributor)
        second = create_note(contributor)
        client = client_for(contributor)

        a = client.post("/api/attachments/", attachment_payload("Note", first["id"], attachment_id="ATTACH_x"))
        b = client.post("/api/attachments/", attachment_payload("Note", second["id"], attachment_id="ATTACH_x"))

        assert a.status_code == 201
        assert b.status_code == 201

    def test_missing_parent(self, client_for, contributor):
        response = client_for(contributor).post("/api/attachments/", attachment_payload("Comment", 999))

        assert response.status_code == 404
        assert response.data["detail"] == "Comment not found"

    def test_unknown_parent_type(self, client_for, contributor):
        response = client_for(contributor).post("/api/attachments/", attachment_payload("Notebook", 1))

        assert response.status_code == 400

    def test_requires_edit_permission_on_parent(self, create_note, client_for, contributor, other_contributor):
        note = create_note(contributor, visibility="public")

        response = client_for(other_contributor).post(
            "/api/attachments/", attachment_payload("Note", note["id"])
        )

        assert response.status_code == 403
        assert not Attachment.objects.exists()

    def test_group_attachment_by_lead(self, client_for, lead_editor, contributor):
        group = client_for(lead_editor).post("/api/groups/", {"name": "G", "member_ids": [contributor.pk]}).data

        by_member = client_for(contributor).post("/api/attachments/", attachment_payload("Group", group["id"]))
        by_lead = client_for(lead_editor).post("/api/attachments/", attachment_payload("Group", group["id"]))

        assert by_member.status_code == 403
        assert by_lead.status_code == 201


class TestAttachmentList:
    def test_unfiltered_list_shows_only_viewable_parents(self, create_note, client_for, contributor, other_contributor):
        hidden = create_note(contributor, title="hidden")
        shown = create_note(contributor, title="shown", visibility="public")
        mine = create_note(other_contributor, title="mine")
        client_for(contributor).post("/api/attachments/", attachment_payload("Note", hidden["id"]))
        client_for(contributor).post("/api/attachments/", attachment_payload("Note", shown["id"]))
        client_for(other_contributor).post("/api/attachments/", attachment_payload("Note", mine["id"]))

        response = client_for(other_contributor).get("/api/attachments/")

        assert response.status_code == 200
        assert {a["parent_id"] for a in response.data["items"]} == {shown["id"], mine["id"]}

    def test_admin_lists_everything(self, create_note, client_for, contributor, admin):
        note = create_note(contributor)
        client_for(contributor).post("/api/attachments/", attachment_payload("Note", note["id"]))

        response = client_for(admin).get("/api/attachments/")

        assert response.data["count"] == 1

    def test_filter_by_parent_type_only(self, create_note, client_for, lead_editor):
        note = create_note(lead_editor)
        client = client_for(lead_editor)
        group = client.post("/api/groups/", {"name": "G"}).data
        client.post("/api/attachments/", attachment_payload("Note", note["id"]))
        client.post("/api/attachments/", attachment_payload("Group", group["id"]))

        response = client.get("/api/attachments/", {"parent_type": "Group"})

        assert response.status_code == 200
        assert [a["parent_type"] for a in response.data["items"]] == ["Group"]

    def test_comment_attachments_follow_note_visibility(self, create_note, client_for, contributor, other_contributor):
        note = create_note(contributor)
        client = client_for(contributor)
        comment = client.post("/api/comments/", {"note_id": note["id"], "text": "hi"}).data
        client.post("/api/attachments/", attachment_payload("Comment", comment["id"]))

        response = client_for(other_contributor).get("/api/attachments/", {"parent_type": "Comment"})

        assert response.data["count"] == 0

    def test_rejects_unknown_parent_type(self, client_for, contributor):
        response = client_for(contributor).get("/api/attachments/", {"parent_type": "Notebook"})

        assert response.status_code == 400

    def test_lists_one_parent(self, create_note, client_for, contributor):
        note = create_note(contributor)
        other = create_note(contributor)
        client = client_for(contributor)
        client.post("/api/attachments/", attachment_payload("Note", note["id"]))
        client.post("/api/attachments/", attachment_payload("Note", other["id"]))

        response = client.get("/api/attachments/", {"parent_type": "Note", "parent_id": note["id"]})

        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["items"][0]["parent_id"] == note["id"]

    def test_hidden_parent(self, create_note, client_for, contributor, other_contributor):
        note = create_note(contributor)

        response = client_for(other_contributor).get(
            "/api/attachments/", {"parent_type": "Note", "parent_id": note["id"]}
        )

        assert response.status_code == 403


class TestAttachmentDetail:
    def test_get_and_delete(self, create_note, client_for, contributor, other_contributor):
        note = create_note(contributor, visibility="public")
        client = client_for(contributor)
        attachment = client.post("/api/attachments/", attachment_payload("Note", note["id"])).data

        assert client_for(other_contributor).get(f"/api/attachments/{attachment['id']}/").status_code == 200
        assert client_for(other_contributor).delete(f"/api/attachments/{attachment['id']}/").status_code == 403

        response = client.delete(f"/api/attachments/{attachment['id']}/")

        assert response.status_code == 200
        assert response.data["detail"] == "Attachment deleted successfully"
        assert not Attachment.objects.exists()

    def test_missing(self, client_for, contributor):
        assert client_for(contributor).get("/api/attachments/999/").status_code == 404
