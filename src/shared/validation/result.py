"""Validation result models."""

from pydantic import BaseModel, Field

from .exceptions import InvalidInputException


class FieldError(BaseModel):
    """A single field-level issue."""

    path: list[str | int] = Field(default_factory=list, description="Path of the offending field")
    message: str
    type: str = Field(..., description="Rule key, e.g. string.empty or any.required")


class ValidationFailure(BaseModel):
    """All issues found in one validation pass, in field-declaration order."""

    details: list[FieldError]

    @property
    def messages(self) -> list[str]:
        return [detail.message for detail in self.details]

    @property
    def message(self) -> str:
        """All messages joined into one sentence-like string."""
        return ". ".join(self.messages)

    def by_field(self) -> dict[str, list[str]]:
        """Group messages by top-level field name (the record itself is "")."""
        grouped: dict[str, list[str]] = {}
        for detail in self.details:
            key = str(detail.path[0]) if detail.path else ""
            grouped.setdefault(key, []).append(detail.message)
        return grouped


class ValidationResult[T](BaseModel):
    """Outcome of validating one record.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: T | None = None
    error: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> T:
        """Return the validated value or raise a 400 for route handlers.

        Raises:
            InvalidInputException: If validation failed.

        """
        if self.error is not None:
            raise InvalidInputException(
                [detail.model_dump(include={"path", "message"}) for detail in self.error.details]
            )
        return self.value  # type: ignore[return-value]
