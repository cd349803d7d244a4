"""Check-in schemas (DTOs)."""

from typing import ClassVar

from pydantic import Field

from src.shared.validation.validator import FormSchema
from src.shared.validators.name import NAME_MAX_LENGTH
from src.shared.validators.phone import PHONE_PATTERN


# Request schemas
class CheckInRequest(FormSchema):
    """Front-desk check-in submission.

    ``appointmentTime`` is accepted as any non-empty string; parsing it is up
    to the queue service.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    phone: str = Field(..., min_length=1, pattern=PHONE_PATTERN)
    appointment_time: str = Field(..., alias="appointmentTime", min_length=1)

    error_messages: ClassVar[dict[str, dict[str, str]]] = {
        "name": {
            "string.empty": "Name is required",
            "string.max": "Name must be less than 100 characters",
        },
        "phone": {
            "string.pattern.base": "Please enter a valid phone number",
            "string.empty": "Phone number is required",
        },
        "appointmentTime": {
            "string.empty": "Appointment time is required",
        },
    }
