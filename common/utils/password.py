"""
Password policy validation.

Configurable password validation with support for various requirements.

Example:
    from common.utils import validate_password

    # Basic validation
    is_valid, errors = validate_password("short")
    if not is_valid:
        print("Password errors:", errors)

    # Custom requirements
    is_valid, errors = validate_password(
        "MyP@ss123",
        min_length=10,
        require_digit=True,
    )
"""

import re
from typing import List, Tuple


def validate_password(
    password: str,
    min_length: int = 8,
    max_length: int = 128,
    require_uppercase: bool = False,
    require_lowercase: bool = False,
    require_digit: bool = False,
) -> Tuple[bool, List[str]]:
    """
    Validate a password against the configured policy.

    Args:
        password: The password to validate
        min_length: Minimum password length
        max_length: Maximum password length
        require_uppercase: Require at least one uppercase letter
        require_lowercase: Require at least one lowercase letter
        require_digit: Require at least one digit

    Returns:
        Tuple of (is_valid: bool, errors: List[str])

    Examples:
        >>> is_valid, errors = validate_password("weak")
        >>> print(is_valid)
        False
        >>> print(errors)
        ['Password must be at least 8 characters']

        >>> is_valid, errors = validate_password("password123")
        >>> print(is_valid)
        True
    """
    errors: List[str] = []

    if len(password) < min_length:
        errors.append(f"Password must be at least {min_length} characters")

    if len(password) > max_length:
        errors.append(f"Password must be no more than {max_length} characters")

    if password and not password.strip():
        errors.append("Password must not be only whitespace")

    if require_uppercase and not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")

    if require_lowercase and not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")

    if require_digit and not re.search(r"\d", password):
        errors.append("Password must contain at least one digit")

    return len(errors) == 0, errors
