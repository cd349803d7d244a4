"""Record validation on top of pydantic models."""

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from src.config.settings import settings

from .messages import render_message, rule_for
from .result import FieldError, ValidationFailure, ValidationResult

logger = logging.getLogger(__name__)


def form_config() -> ConfigDict:
    """Model config for form schemas.

    Reads ``settings.validation_extra_fields`` when called, so a schema picks
    up the unknown-key policy in effect when its class is defined. Fields are
    only accepted under their alias (the key the form submits).
    """
    return ConfigDict(strict=True, extra=settings.validation_extra_fields)


class FormSchema(BaseModel):
    """Base class for form input schemas.

    String fields are validated strictly (no coercion from numbers or bytes,
    no trimming). Unknown keys follow ``settings.validation_extra_fields``.

    Subclasses may set ``error_messages`` to replace default messages, keyed by
    field alias and then rule key:

    ```python
    class LoginForm(FormSchema):
        error_messages = {"username": {"string.empty": "Username is required"}}
    ```
    """

    model_config = form_config()

    error_messages: ClassVar[dict[str, dict[str, str]]] = {}


def validate_record[M: BaseModel](model: type[M], data: Any) -> ValidationResult[M]:
    """Validate an untyped record against ``model``.

    Every issue is collected in one pass, in field-declaration order. Bad input
    never raises; it is described by ``ValidationResult.error``.

    Args:
        model: Pydantic model describing the expected record
        data: Untyped input, normally a decoded JSON object

    Returns:
        Result holding either the validated model instance or the issues.

    """
    try:
        instance = model.model_validate(data)
    except ValidationError as exc:
        overrides = getattr(model, "error_messages", None)
        details = []
        for error in exc.errors():
            path = list(error["loc"])
            rule = rule_for(error)
            details.append(
                FieldError(path=path, message=render_message(error, rule, path, overrides), type=rule)
            )
        logger.debug(f"{model.__name__} validation failed with {len(details)} issue(s)")
        return ValidationResult[model](error=ValidationFailure(details=details))

    return ValidationResult[model](value=instance)
