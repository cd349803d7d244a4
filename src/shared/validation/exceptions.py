"""Validation exceptions."""

from fastapi import HTTPException, status


class InvalidInputException(HTTPException):
    """Raised by route handlers when a submitted record fails validation.

    ``detail`` is the ordered list of ``{"path": [...], "message": "..."}``
    entries so clients can map each message onto its form field.
    """

    def __init__(self, errors: list[dict]):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)
