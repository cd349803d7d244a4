"""Tests for the shared record validation core."""

import logging
from typing import ClassVar

import pytest
from fastapi import status
from pydantic import BaseModel, ConfigDict, Field

from src.features.checkin.validation import validate_check_in
from src.features.staff.validation import validate_staff_login
from src.shared.validation.exceptions import InvalidInputException
from src.shared.validation.messages import field_label
from src.shared.validation.result import FieldError, ValidationFailure
from src.shared.validation.validator import FormSchema, validate_record


class AccessCode(FormSchema):
    code: str = Field(..., pattern=r"^[0-9]+$")
    attempts: int = Field(default=1, gt=0)


class ClosedForm(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: str


class LabelledForm(FormSchema):
    username: str = Field(..., min_length=3)

    error_messages: ClassVar[dict[str, dict[str, str]]] = {"username": {"string.empty": "Username is required"}}


class TestDefaultMessages:
    """Test rendering of default messages."""

    def test_pattern_message_includes_value_and_pattern(self):
        """Test pattern failures name the rejected value and the pattern."""
        result = validate_record(AccessCode, {"code": "ab"})

        assert result.error.details[0].type == "string.pattern.base"
        assert result.error.messages == ['"code" with value "ab" fails to match the required pattern: ^[0-9]+$']

    def test_unknown_error_type_falls_back_to_pydantic_message(self):
        """Test errors without a template keep pydantic's type and message."""
        result = validate_record(AccessCode, {"code": "123", "attempts": 0})

        assert result.error.details[0].type == "greater_than"
        assert result.error.details[0].path == ["attempts"]
        assert result.error.messages == ["Input should be greater than 0"]

    def test_forbidden_extra_fields_are_reported(self):
        """Test unknown keys are reported when the model forbids them."""
        result = validate_record(ClosedForm, {"code": "1", "promo": "FREE"})

        assert result.error.details == [FieldError(path=["promo"], message='"promo" is not allowed', type="object.unknown")]

    def test_models_without_overrides(self):
        """Test plain pydantic models use default messages only."""
        result = validate_record(ClosedForm, {})
        assert result.error.messages == ['"code" is required']

    def test_override_applies_to_its_rule_only(self):
        """Test custom messages replace only the rule they are keyed by."""
        assert validate_record(LabelledForm, {"username": ""}).error.messages == ["Username is required"]
        assert validate_record(LabelledForm, {"username": "ab"}).error.messages == [
            '"username" length must be at least 3 characters long'
        ]

    def test_field_label(self):
        """Test labels quote the dotted path and name the record "value"."""
        assert field_label(["name"]) == '"name"'
        assert field_label(["contacts", 0, "phone"]) == '"contacts.0.phone"'
        assert field_label([]) == '"value"'


class TestValidationFailure:
    """Test the failure model helpers."""

    @pytest.fixture
    def failure(self) -> ValidationFailure:
        return ValidationFailure(
            details=[
                FieldError(path=["name"], message="Name is required", type="string.empty"),
                FieldError(path=["name"], message="Name looks odd", type="custom"),
                FieldError(path=[], message='"value" must be of type object', type="object.base"),
            ]
        )

    def test_message_joins_all_messages(self, failure):
        """Test the combined message keeps issue order."""
        assert failure.message == 'Name is required. Name looks odd. "value" must be of type object'

    def test_by_field_groups_messages(self, failure):
        """Test messages are grouped per top-level field."""
        assert failure.by_field() == {
            "name": ["Name is required", "Name looks odd"],
            "": ['"value" must be of type object'],
        }


class TestRaiseForError:
    """Test conversion of results into HTTP errors."""

    def test_success_returns_value(self, check_in_payload):
        """Test a valid result returns its value."""
        result = validate_check_in(check_in_payload)
        assert result.raise_for_error() is result.value

    def test_failure_raises_bad_request(self):
        """Test an invalid result raises 400 with every issue."""
        result = validate_check_in({"name": "", "phone": "", "appointmentTime": ""})

        with pytest.raises(InvalidInputException) as exc_info:
            result.raise_for_error()

        assert exc_info.value.status_code == status.HTTP_400_BAD_REQUEST
        assert exc_info.value.detail == [
            {"path": ["name"], "message": "Name is required"},
            {"path": ["phone"], "message": "Phone number is required"},
            {"path": ["appointmentTime"], "message": "Appointment time is required"},
        ]


class TestFailureLogging:
    """Test failures are logged without the submitted values."""

    def test_failure_logged_at_debug_with_model_and_count(self, caplog):
        """Test the log names the schema and the issue count only."""
        caplog.set_level(logging.DEBUG, logger="src.shared.validation.validator")

        result = validate_staff_login({"username": "zq", "password": "s3Kr"})

        assert not result.ok
        records = [r for r in caplog.records if r.name == "src.shared.validation.validator"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == "StaffLoginRequest validation failed with 2 issue(s)"
        assert "s3Kr" not in caplog.text
        assert "zq" not in caplog.text

    def test_success_is_not_logged(self, caplog, staff_login_payload):
        """Test valid records produce no log records."""
        caplog.set_level(logging.DEBUG, logger="src.shared.validation.validator")

        assert validate_staff_login(staff_login_payload).ok
        assert not [r for r in caplog.records if r.name == "src.shared.validation.validator"]
