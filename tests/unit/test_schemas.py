"""Unit tests for request/response schemas."""

import json

import pytest
from pydantic import ValidationError

from content_seeder.schemas import (
    ApiEnvelope,
    ContentIds,
    CreatedResource,
    LectureCreate,
    LoginRequest,
    RegisterRequest,
    SeedRecord,
    SPointCreate,
    SubjectCreate,
    Visibility,
)


class TestPayloads:
    """camelCase wire format of outgoing payloads."""

    def test_register_request_uses_camel_case(self):
        body = RegisterRequest(
            email="a@example.com",
            username="a",
            password="AdminPass123!",
            first_name="Admin",
            last_name="User",
        )
        assert body.to_payload() == {
            "email": "a@example.com",
            "username": "a",
            "password": "AdminPass123!",
            "firstName": "Admin",
            "lastName": "User",
        }

    def test_login_request_field_name(self):
        payload = LoginRequest(email_or_username="testuser", password="x").to_payload()
        assert payload == {"emailOrUsername": "testuser", "password": "x"}

    def test_subject_has_no_parent_field(self):
        payload = SubjectCreate(name="Medicine", description="d", order_index=1).to_payload()
        assert payload == {
            "name": "Medicine",
            "description": "d",
            "orderIndex": 1,
            "visibility": "personal",
        }

    def test_lecture_embeds_chapter_id(self):
        payload = LectureCreate(
            name="Diabetes Mellitus",
            order_index=1,
            visibility=Visibility.PERSONAL,
            chapter_id="ch-1",
        ).to_payload()
        assert payload["chapterId"] == "ch-1"
        assert "description" not in payload

    def test_spoint_payload(self):
        payload = SPointCreate(default_content="Text", order_index=3, point_id="pt-1").to_payload()
        assert payload == {
            "defaultContent": "Text",
            "orderIndex": 3,
            "visibility": "personal",
            "pointId": "pt-1",
        }

    def test_order_index_is_one_based(self):
        with pytest.raises(ValidationError):
            SPointCreate(default_content="Text", order_index=0, point_id="pt-1")


class TestEnvelope:
    """Decoding of the { success, data, error } wrapper."""

    def test_success_envelope(self):
        env = ApiEnvelope.model_validate({"success": True, "data": {"id": "abc"}})
        assert env.success is True
        assert env.error_message is None
        assert env.data == {"id": "abc"}

    def test_failure_envelope_field_errors(self):
        env = ApiEnvelope.model_validate({
            "success": False,
            "error": {
                "message": "Validation failed",
                "details": {"fields": {"password": ["Password must be at least 12 characters"]}},
            },
        })
        assert env.error_message == "Validation failed"
        assert env.error.field_errors("password") == ["Password must be at least 12 characters"]
        assert env.error.field_errors("email") == []

    def test_failure_without_error_body(self):
        env = ApiEnvelope.model_validate({"success": False})
        assert env.error_message

    def test_created_resource_accepts_numeric_id(self):
        assert CreatedResource.model_validate({"id": 42, "name": "x"}).id == "42"

    def test_created_resource_rejects_empty_id(self):
        with pytest.raises(ValidationError):
            CreatedResource.model_validate({"id": ""})


class TestSeedRecord:
    def test_record_keys(self):
        ids = ContentIds()
        ids.subjects["medicine"] = "s1"
        ids.spoints.extend(["sp1", "sp2"])
        record = SeedRecord(
            admin_user=RegisterRequest(
                email="a@example.com",
                username="a",
                password="p",
                first_name="Admin",
                last_name="User",
            ),
            auth_token="tok",
            user_id="u1",
            content_ids=ids,
        )
        data = json.loads(record.model_dump_json(by_alias=True))

        assert set(data) == {"adminUser", "authToken", "userId", "contentIds"}
        assert data["adminUser"]["firstName"] == "Admin"
        assert data["contentIds"]["subjects"] == {"medicine": "s1"}
        assert data["contentIds"]["spoints"] == ["sp1", "sp2"]
        assert ids.counts()["spoints"] == 2
