"""
Tests for the response projection.
"""

import json
from dataclasses import dataclass

from pydantic import BaseModel

from forma import (
    FieldErrors,
    FieldPath,
    FormParseError,
    FormSuccess,
    FormValidationError,
    ParseErrorInfo,
    Response,
    to_response,
)


class TestToResponse:
    def test_parse_error(self):
        response = to_response(FormParseError(FieldPath.of("player", "gold"), "missing"))

        assert response.parse_error == ParseErrorInfo(field="player.gold", message="missing")
        assert response.field_errors == {}
        assert response.result is None
        assert not response.ok

    def test_root_parse_error(self):
        response = to_response(FormParseError(FieldPath(), "bad json"))
        assert response.to_dict()["parse_error"] == {"field": "", "message": "bad json"}

    def test_validation_error(self):
        errors = FieldErrors.singleton(FieldPath.of("a"), "x") + FieldErrors.singleton(
            FieldPath.of("b", "c"), ["y", "z"]
        )

        response = to_response(FormValidationError(errors))

        assert response.to_dict() == {
            "parse_error": None,
            "field_errors": {"a": "x", "b.c": ["y", "z"]},
            "result": None,
        }

    def test_success_never_sets_errors(self):
        response = to_response(FormSuccess({"id": 1}))

        assert response.parse_error is None
        assert response.field_errors == {}
        assert response.result == {"id": 1}
        assert response.ok

    def test_success_payload_serialized(self):
        @dataclass
        class Account:
            id: int
            name: str

        class Envelope(BaseModel):
            account: Account
            tags: set[str]

        response = to_response(FormSuccess(Envelope(account=Account(1, "Bob"), tags={"a"})))

        assert response.result == {"account": {"id": 1, "name": "Bob"}, "tags": ["a"]}

    def test_to_json_keys(self):
        body = json.loads(to_response(FormSuccess(None)).to_json())
        assert body == {"parse_error": None, "field_errors": {}, "result": None}

    def test_default_response(self):
        assert Response().to_dict() == {"parse_error": None, "field_errors": {}, "result": None}
