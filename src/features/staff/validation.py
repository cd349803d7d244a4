"""Staff login form validation."""

from typing import Any

from src.shared.validation.result import ValidationResult
from src.shared.validation.validator import validate_record

from .schemas import StaffLoginRequest


def validate_staff_login(data: Any) -> ValidationResult[StaffLoginRequest]:
    return validate_record(StaffLoginRequest, data)
