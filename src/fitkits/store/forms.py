"""Order intake form."""

from django import forms

from .validators import (
    BLANK_MESSAGE,
    EMAIL_MESSAGE,
    validate_email,
    validate_phone_digits,
    validate_phone_length,
    validate_us_state,
    validate_zip,
)

REQUIRED = {"required": BLANK_MESSAGE}


class OrderForm(forms.Form):
    """Shipping and contact details for an order.

    Expects data that has already been through normalize_order_fields.
    Every field is validated independently so all errors are reported
    together.
    """

    first_name = forms.CharField(max_length=100, error_messages=REQUIRED)
    last_name = forms.CharField(max_length=100, error_messages=REQUIRED)
    address1 = forms.CharField(label="Address", max_length=255, error_messages=REQUIRED)
    address2 = forms.CharField(label="Address line 2", max_length=255, required=False)
    city = forms.CharField(max_length=100, error_messages=REQUIRED)
    state = forms.CharField(error_messages=REQUIRED, validators=[validate_us_state])
    zip = forms.CharField(label="ZIP code", error_messages=REQUIRED, validators=[validate_zip])
    phone = forms.CharField(
        error_messages=REQUIRED,
        validators=[validate_phone_length, validate_phone_digits],
    )
    email = forms.CharField(
        max_length=254,
        error_messages={**REQUIRED, "max_length": EMAIL_MESSAGE},
        validators=[validate_email],
    )
    description = forms.CharField(
        label="Notes",
        required=False,
        widget=forms.Textarea(attrs={"rows": 3}),
    )
    coupon_code = forms.CharField(max_length=50, required=False)

    ORDER_FIELDS = (
        "first_name",
        "last_name",
        "address1",
        "address2",
        "city",
        "state",
        "zip",
        "phone",
        "email",
        "description",
    )

    def cleaned_order_fields(self) -> dict:
        """Cleaned values that map onto Order columns."""
        return {name: self.cleaned_data[name] for name in self.ORDER_FIELDS}
