"""Shared pytest fixtures for fitkits.store tests."""

import pytest


@pytest.fixture
def kit(db):
    """Create a fitness kit."""
    from fitkits.store.models import Kit

    return Kit.objects.create(
        name="Test Kit",
        description="Test Description",
        slug="test-kit",
    )


@pytest.fixture
def coupon(db):
    """Create an unused coupon."""
    from fitkits.store.models import CouponCode

    return CouponCode.objects.create(code="TEST123")


@pytest.fixture
def used_coupon(db):
    """Create a coupon that has already been used."""
    from fitkits.store.models import CouponCode

    return CouponCode.objects.create(code="USED123", usage=CouponCode.Usage.USED)


@pytest.fixture
def valid_fields():
    """Order form data as a customer would submit it."""
    return {
        "first_name": "John",
        "last_name": "Doe",
        "address1": "123 Main St",
        "city": "San Francisco",
        "state": "CA",
        "zip": "94102",
        "phone": "415-555-1234",
        "email": "john@example.com",
        "coupon_code": "TEST123",
    }


@pytest.fixture
def order_factory(db, kit):
    """Create orders directly, bypassing the workflow.

    Each call creates a fresh coupon unless one is given and assigns the
    next confirmation number unless one is given.
    """
    from fitkits.store.models import CouponCode, Order

    created = []

    def make_order(**overrides):
        if "coupon" not in overrides:
            overrides["coupon"] = CouponCode.objects.create(
                code=f"FACTORY{len(created) + 1}",
                usage=CouponCode.Usage.USED,
            )
        if "confirmation_number" not in overrides:
            overrides["confirmation_number"] = len(created) + 1
        attrs = {
            "kit": kit,
            "first_name": "John",
            "last_name": "Doe",
            "address1": "123 Main St",
            "city": "San Francisco",
            "state": "CA",
            "zip": "94102",
            "phone": "4155551234",
            "email": "john@example.com",
        }
        attrs.update(overrides)
        order = Order.objects.create(**attrs)
        created.append(order)
        return order

    return make_order
