"""Field validators for kits and orders.

Each validator raises ValidationError with the fixed message shown to
customers next to the offending field.
"""

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator, RegexValidator

BLANK_MESSAGE = "can't be blank"
STATE_MESSAGE = "must be a valid US state"
ZIP_MESSAGE = "must be 5 digits or ZIP+4"
PHONE_LENGTH_MESSAGE = "must be exactly 10 digits"
PHONE_DIGITS_MESSAGE = "must contain only digits"
EMAIL_MESSAGE = "must be a valid email"
SLUG_MESSAGE = "may only contain lowercase letters, digits and hyphens"

# 50 states plus DC
US_STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC",
)

PHONE_LENGTH = 10

validate_zip = RegexValidator(
    regex=r"\A[0-9]{5}(-[0-9]{4})?\Z",
    message=ZIP_MESSAGE,
    code="invalid_zip",
)

validate_kit_slug = RegexValidator(
    regex=r"\A[a-z0-9-]+\Z",
    message=SLUG_MESSAGE,
    code="invalid_slug",
)

validate_email = EmailValidator(message=EMAIL_MESSAGE)


def validate_us_state(value):
    if value not in US_STATES:
        raise ValidationError(STATE_MESSAGE, code="invalid_state")


def validate_phone_length(value):
    if len(value) != PHONE_LENGTH:
        raise ValidationError(PHONE_LENGTH_MESSAGE, code="phone_length")


def validate_phone_digits(value):
    if not value.isascii() or not value.isdigit():
        raise ValidationError(PHONE_DIGITS_MESSAGE, code="phone_digits")
