"""Name validation functions."""

NAME_MAX_LENGTH = 100


def is_valid_name(name: str) -> bool:
    """Check that a visitor name has content and is not too long.

    The lower bound applies to the trimmed name while the upper bound applies
    to the raw name, so surrounding whitespace counts against the limit.

    Examples:
        >>> is_valid_name("Jane Doe")
        True
        >>> is_valid_name("   ")
        False
        >>> is_valid_name(" " * 100 + "X")
        False

    """
    return len(name.strip()) > 0 and len(name) <= NAME_MAX_LENGTH
