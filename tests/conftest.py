"""Test configuration and fixtures.

Validation is pure, so fixtures only provide baseline payloads that each test
copies and breaks in one place.
"""

import pytest


@pytest.fixture
def check_in_payload() -> dict:
    """A check-in submission that passes validation."""
    return {
        "name": "Jane Doe",
        "phone": "+1 555-123-4567",
        "appointmentTime": "10:00",
    }


@pytest.fixture
def staff_login_payload() -> dict:
    """Staff credentials that pass validation."""
    return {
        "username": "admin",
        "password": "123456",
    }
