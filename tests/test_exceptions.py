"""Tests for the API exception handler."""
from django.db import IntegrityError
from rest_framework.exceptions import ValidationError

from core.exceptions import api_exception_handler


def test_unique_violation_becomes_conflict():
    response = api_exception_handler(IntegrityError("UNIQUE constraint failed: tags_tag.name"), {})

    assert response.status_code == 400
    assert response.data["detail"] == "Resource already exists."


def test_postgres_unique_violation_becomes_conflict():
    exc = IntegrityError('duplicate key value violates unique constraint "users_user_email_key"')

    assert api_exception_handler(exc, {}).status_code == 400


def test_other_integrity_errors_are_server_errors():
    response = api_exception_handler(IntegrityError("NOT NULL constraint failed: notes_note.title"), {})

    assert response.status_code == 500
    assert response.data == {"detail": "Internal server error"}


def test_field_errors_are_wrapped():
    response = api_exception_handler(ValidationError({"title": ["Required."]}), {})

    assert response.data == {"detail": "Validation failed.", "errors": {"title": ["Required."]}}
