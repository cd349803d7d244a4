"""Check-in form validation."""

from typing import Any

from src.shared.validation.result import ValidationResult
from src.shared.validation.validator import validate_record

from .schemas import CheckInRequest


def validate_check_in(data: Any) -> ValidationResult[CheckInRequest]:
    """Validate a check-in submission, collecting every field issue.

    Issues are ordered name, phone, appointmentTime.
    """
    return validate_record(CheckInRequest, data)
