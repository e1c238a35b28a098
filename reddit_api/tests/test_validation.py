"""
Unit tests for payload validation.
"""

import pytest

from reddit_api.core.errors import ValidationError
from reddit_api.core.validation import schema_fields_only, validate_payload
from reddit_api.models.dtos import PostWrite, SubredditCreate


class TestValidatePayload:

    def test_valid_subreddit(self):
        subreddit = validate_payload(SubredditCreate, {"name": "go", "description": "golang"})
        assert subreddit.name == "go"
        assert subreddit.description == "golang"

    def test_missing_description(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(SubredditCreate, {"name": "go"})

        details = exc_info.value.details
        assert len(details) == 1
        assert details[0]["path"] == ["description"]
        assert details[0]["type"] == "any.required"
        assert details[0]["message"] == '"description" is required'
        assert details[0]["context"] == {"key": "description", "label": "description"}

    def test_every_invalid_field_is_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostWrite, {"title": 42, "content": ""})

        by_field = {d["path"][0]: d["type"] for d in exc_info.value.details}
        assert by_field == {"title": "string.base", "content": "string.empty"}

    def test_unknown_subreddit_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(SubredditCreate, {"name": "go", "description": "golang", "owner": "me"})

        assert [d["type"] for d in exc_info.value.details] == ["object.unknown"]
        assert exc_info.value.details[0]["path"] == ["owner"]

    def test_non_object_payload(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostWrite, ["title", "content"])

        detail = exc_info.value.details[0]
        assert detail["type"] == "object.base"
        assert detail["path"] == []
        assert detail["message"] == '"value" must be of type object'

    def test_error_status_and_content(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(SubredditCreate, {})

        assert exc_info.value.status_code == 400
        assert exc_info.value.to_content() == exc_info.value.details
        assert len(exc_info.value.details) == 2


class TestSchemaFieldsOnly:

    def test_drops_undeclared_keys(self):
        payload = {"title": "t", "content": "c", "subredditName": "other"}
        assert schema_fields_only(PostWrite, payload) == {"title": "t", "content": "c"}

    def test_missing_keys_stay_missing(self):
        assert schema_fields_only(PostWrite, {"title": "t"}) == {"title": "t"}

    def test_non_mapping_passthrough(self):
        assert schema_fields_only(PostWrite, "text") == "text"
