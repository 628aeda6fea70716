"""Input normalization applied before validation.

All functions are idempotent: normalizing an already normalized value
returns it unchanged.
"""

import re

_NON_DIGITS = re.compile(r"\D")


def normalize_coupon_code(value) -> str:
    """Uppercase and trim a coupon code for storage and lookup."""
    return str(value or "").upper().strip()


def normalize_state(value) -> str:
    return str(value or "").upper().strip()


def normalize_email(value) -> str:
    return str(value or "").lower().strip()


def normalize_phone(value) -> str:
    """Strip everything but digits: '415-555-1234' -> '4155551234'."""
    return _NON_DIGITS.sub("", str(value or ""))


def normalize_zip(value) -> str:
    return str(value or "").strip()


ORDER_FIELD_NORMALIZERS = {
    "state": normalize_state,
    "email": normalize_email,
    "phone": normalize_phone,
    "zip": normalize_zip,
}


def normalize_order_fields(data) -> dict:
    """Return a plain dict copy of submitted order fields, normalized.

    Accepts a QueryDict or any mapping. Only non-empty values are
    normalized; everything else is passed through as submitted so the
    form can be redisplayed.
    """
    normalized = {key: data.get(key) for key in data}
    for field, normalize in ORDER_FIELD_NORMALIZERS.items():
        if normalized.get(field):
            normalized[field] = normalize(normalized[field])
    return normalized
