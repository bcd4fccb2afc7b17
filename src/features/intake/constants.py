"""Form rules: field set, limits, allowed countries and message texts."""

from types import MappingProxyType
from typing import Final

# Field names as submitted by the form
NAME: Final = "name"
EMAIL: Final = "email"
PHONE: Final = "phone"
PASSWORD: Final = "password"
CONFIRM_PASSWORD: Final = "confirmPassword"
AGE: Final = "age"
COUNTRY: Final = "country"
MESSAGE: Final = "message"

FORM_FIELDS: Final = (NAME, EMAIL, PHONE, PASSWORD, CONFIRM_PASSWORD, AGE, COUNTRY, MESSAGE)
SECRET_FIELDS: Final = frozenset({PASSWORD, CONFIRM_PASSWORD})

# Validation limits
MIN_NAME_LENGTH: Final = 2
MAX_NAME_LENGTH: Final = 50
MIN_PASSWORD_LENGTH: Final = 8
MIN_AGE: Final = 18
MAX_AGE: Final = 120
MAX_MESSAGE_LENGTH: Final = 500
MAX_EMAIL_LENGTH: Final = 254
MAX_EMAIL_LOCAL_LENGTH: Final = 64

ALLOWED_COUNTRIES: Final = MappingProxyType(
    {
        "us": "United States",
        "ca": "Canada",
        "uk": "United Kingdom",
        "au": "Australia",
        "de": "Germany",
        "fr": "France",
        "jp": "Japan",
        "bd": "Bangladesh",
        "in": "India",
        "other": "Other",
    }
)

ERROR_MESSAGES: Final = MappingProxyType(
    {
        "name_required": "Full name is required",
        "name_too_short": f"Name must be at least {MIN_NAME_LENGTH} characters long",
        "name_too_long": f"Name cannot exceed {MAX_NAME_LENGTH} characters",
        "name_invalid_characters": "Name can only contain letters, spaces, hyphens, and apostrophes",
        "email_required": "Email address is required",
        "email_invalid": "Please enter a valid email address",
        "email_exists": "Email address already exists",
        "phone_invalid": "Please enter a valid phone number (e.g., 123-456-7890 or 1234567890)",
        "password_required": "Password is required",
        "password_weak": (
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters with at least one uppercase letter, "
            "one lowercase letter, one number, and one special character"
        ),
        "password_mismatch": "Passwords do not match",
        "confirm_password_required": "Please confirm your password",
        "age_required": "Age is required",
        "age_invalid": f"You must be at least {MIN_AGE} years old",
        "country_required": "Please select your country",
        "country_invalid": "Invalid country selection",
        "message_too_long": f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters",
    }
)

SUCCESS_MESSAGES: Final = MappingProxyType(
    {
        "form_submitted": "Form submitted successfully! All fields are valid.",
        "data_saved": "Your information has been saved successfully.",
        "field_valid": "Valid",
    }
)

FAILURE_MESSAGES: Final = MappingProxyType(
    {
        "validation_failed": "Please fix the errors in the form before submitting.",
        "save_failed": "Data validation passed but failed to save. Please try again.",
        "unknown_field": "Unknown field",
        "invalid_request": "Invalid request",
    }
)
