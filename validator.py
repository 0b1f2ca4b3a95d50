"""
Sign-up form validation
"""
import re

from errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MIN_PASSWORD_LENGTH = 8

INVALID_EMAIL = "Invalid email address"
PASSWORD_MISMATCH = "Passwords do not match"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"


def validate_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


def check_sign_up(email: str, password: str, confirm: str) -> None:
    """
    Check a sign-up form, first failing rule wins

    Raises:
        ValidationError: with the message to show next to the form
    """
    if not validate_email(email):
        raise ValidationError(INVALID_EMAIL)
    if password != confirm:
        raise ValidationError(PASSWORD_MISMATCH)
    if not validate_password(password):
        raise ValidationError(PASSWORD_TOO_SHORT)
