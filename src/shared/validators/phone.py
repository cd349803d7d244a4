"""Phone number validation and formatting functions."""

import re

# Digits, ASCII whitespace, "-", "(" and ")". Shared by the schema pattern
# (pydantic regex engine) and the standalone check (``re``).
PHONE_CHARACTERS = r"0-9 \t\n\r\f\v\-\(\)"

# Schema-level check: optional "+", then any mix of phone characters.
# No minimum length; used as a pydantic Field pattern.
PHONE_PATTERN = r"^\+?[" + PHONE_CHARACTERS + r"]+$"

# Standalone check: same character class with at least 10 characters after the "+".
_PHONE_NUMBER_RE = re.compile(r"\+?[" + PHONE_CHARACTERS + r"]{10,}")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_COUNTRY_CODE_RE = re.compile(r"^\+([0-9]{1,4})")
# A digit that still has at least four digits after it
_MASKABLE_DIGIT_RE = re.compile(r"[0-9](?=.*[0-9]{4})")

DEFAULT_COUNTRY_CODE = "+1"


def is_valid_phone_number(phone: str) -> bool:
    """Check that a phone number has at least 10 allowed characters.

    Allowed characters are digits, whitespace, hyphens and parentheses, with
    an optional leading "+". This is stricter than ``PHONE_PATTERN``, which
    has no minimum length.

    Examples:
        >>> is_valid_phone_number("+44 20 7946 0958")
        True
        >>> is_valid_phone_number("555-1234")
        False

    """
    return _PHONE_NUMBER_RE.fullmatch(phone) is not None


def _digits(phone: str) -> str:
    return _NON_DIGIT_RE.sub("", phone)


def format_phone_number(phone: str) -> str:
    """Format a US number for display, e.g. "1234567890" -> "(123) 456-7890".

    Numbers that are not 10 digits, or 11 digits with a leading 1, are
    returned unchanged.
    """
    digits = _digits(phone)

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"

    if len(digits) == 11 and digits.startswith("1"):
        number = digits[1:]
        return f"+1 ({number[:3]}) {number[3:6]}-{number[6:]}"

    return phone


def normalize_phone_number(phone: str) -> str:
    """Normalize a phone number for storage.

    Formatting is removed and a "+" country prefix is ensured; 10-digit
    numbers are treated as US numbers and get "+1".
    """
    digits = _digits(phone)

    if len(digits) == 10:
        return f"+1{digits}"

    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"

    if not phone.startswith("+") and len(digits) > 10:
        return f"+{digits}"

    return phone


def is_valid_phone_format(phone: str) -> bool:
    """Loose digit-count check: US numbers or 7 to 15 digit international numbers."""
    digits = _digits(phone)

    if len(digits) == 10:
        return True
    if len(digits) == 11 and digits.startswith("1"):
        return True

    return 7 <= len(digits) <= 15


def get_country_code(phone: str) -> str:
    """Extract the country code ("+1" when it cannot be determined)."""
    normalized = normalize_phone_number(phone)

    if normalized.startswith("+1"):
        return "+1"
    if normalized.startswith("+"):
        match = _COUNTRY_CODE_RE.match(normalized)
        return f"+{match.group(1)}" if match else DEFAULT_COUNTRY_CODE

    return DEFAULT_COUNTRY_CODE


def get_phone_without_country_code(phone: str) -> str:
    normalized = normalize_phone_number(phone)
    country_code = get_country_code(normalized)
    return normalized.replace(country_code, "", 1)


def mask_phone_number(phone: str) -> str:
    """Mask all but the last four digits.

    US numbers are masked in their display format ("(***) ***-7890"). Other
    numbers keep their original formatting when their digits are contiguous.
    """
    formatted = format_phone_number(phone)

    if "(" in formatted and ")" in formatted:
        return _MASKABLE_DIGIT_RE.sub("*", formatted)

    digits = _digits(phone)
    if len(digits) >= 4:
        masked = "*" * (len(digits) - 4) + digits[-4:]
        return phone.replace(digits, masked, 1)

    return phone
