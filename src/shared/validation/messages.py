"""Rendering of field-level validation messages.

Pydantic reports issues with its own error types (``missing``,
``string_too_short``...). Forms in this application expect short, stable
messages keyed by a dotted rule name, so each pydantic error is translated to
a rule key first and then rendered either from a per-model override table or
from the default templates below.
"""

from typing import Any

from pydantic_core import ErrorDetails

# Default message templates by rule key
DEFAULT_MESSAGES: dict[str, str] = {
    "any.required": "{label} is required",
    "string.base": "{label} must be a string",
    "string.empty": "{label} is not allowed to be empty",
    "string.min": "{label} length must be at least {limit} characters long",
    "string.max": "{label} length must be less than or equal to {limit} characters long",
    "string.pattern.base": '{label} with value "{value}" fails to match the required pattern: {pattern}',
    "object.unknown": "{label} is not allowed",
    "object.base": "{label} must be of type object",
}

# Pydantic error type -> rule key
_RULES: dict[str, str] = {
    "missing": "any.required",
    "string_type": "string.base",
    "string_too_short": "string.min",
    "string_too_long": "string.max",
    "string_pattern_mismatch": "string.pattern.base",
    "extra_forbidden": "object.unknown",
    "model_type": "object.base",
    "model_attributes_type": "object.base",
    "dict_type": "object.base",
}


def rule_for(error: ErrorDetails) -> str:
    """Map a pydantic error to its rule key.

    An empty string on a length-constrained field is reported as
    ``string.empty`` rather than ``string.min``, so a form can say "X is
    required" independently of the field's minimum length.

    Unknown pydantic error types are returned unchanged.
    """
    error_type = error["type"]
    if error_type == "string_too_short" and error.get("input") == "":
        return "string.empty"
    return _RULES.get(error_type, error_type)


def field_label(path: list[str | int]) -> str:
    """Quoted label for a field path; the record itself is labelled "value"."""
    if not path:
        return '"value"'
    return '"' + ".".join(str(part) for part in path) + '"'


def render_message(
    error: ErrorDetails,
    rule: str,
    path: list[str | int],
    overrides: dict[str, dict[str, str]] | None = None,
) -> str:
    """Render the message for one issue.

    Args:
        error: Pydantic error details for the issue
        rule: Rule key returned by :func:`rule_for`
        path: Field path of the issue
        overrides: Custom messages keyed by field name, then rule key

    Returns:
        Human-readable message.

    """
    if overrides and path:
        custom = overrides.get(str(path[0]), {}).get(rule)
        if custom is not None:
            return custom

    template = DEFAULT_MESSAGES.get(rule)
    if template is None:
        return error["msg"]

    ctx: dict[str, Any] = error.get("ctx") or {}
    return template.format(
        label=field_label(path),
        limit=ctx.get("min_length", ctx.get("max_length", "")),
        value=error.get("input", ""),
        pattern=ctx.get("pattern", ""),
    )
