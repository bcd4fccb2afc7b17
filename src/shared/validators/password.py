"""Password validation functions."""

import re

SPECIAL_CHARACTERS = "@$!%*?&"

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


def is_strong_password(password: str, min_length: int = 8) -> bool:
    """Check password strength requirements.

    Requirements:
    - At least ``min_length`` characters
    - At least one lowercase letter (a-z)
    - At least one uppercase letter (A-Z)
    - At least one digit (0-9)
    - At least one special character from ``@$!%*?&``

    Args:
        password: Password string to check
        min_length: Minimum accepted length

    Returns:
        True if every requirement is met

    Examples:
        >>> is_strong_password("Abcdefg1!")
        True
        >>> is_strong_password("abcdefg1!")
        False

    """
    return (
        len(password) >= min_length
        and _LOWERCASE.search(password) is not None
        and _UPPERCASE.search(password) is not None
        and _DIGIT.search(password) is not None
        and _SPECIAL.search(password) is not None
    )
