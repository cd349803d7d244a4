"""Staff schemas (DTOs)."""

from pydantic import Field

from src.shared.validation.validator import FormSchema


# Request schemas
class StaffLoginRequest(FormSchema):
    """Staff login credentials (default messages only)."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
