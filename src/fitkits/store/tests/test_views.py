"""Tests for store views.

TDD tests for:
- KitListView: catalog homepage
- OrderCreateView: order intake form, gated on kit slug
- OrderDetailView: order confirmation page
"""

from unittest.mock import patch

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from fitkits.store.models import CouponCode, Kit, Order


def message_texts(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


@pytest.fixture
def order_url(kit):
    return reverse("store:order-new", kwargs={"slug": kit.slug})


# =============================================================================
# Catalog
# =============================================================================


@pytest.mark.django_db
class TestKitListView:
    """Tests for GET /"""

    def test_homepage(self, client):
        response = client.get(reverse("store:home"))

        assert response.status_code == 200

    def test_lists_kits_by_name(self, client):
        zebra = Kit.objects.create(name="Zebra Kit", description="Last", slug="zebra-kit")
        alpha = Kit.objects.create(name="Alpha Kit", description="First", slug="alpha-kit")

        response = client.get(reverse("store:home"))

        assert list(response.context["kits"]) == [alpha, zebra]

    def test_links_to_order_pages(self, client, kit):
        response = client.get(reverse("store:home"))

        assert 'href="/test-kit/"' in response.content.decode()

    def test_shows_store_name(self, client, settings):
        settings.STORE_NAME = "Harbor Gym"

        response = client.get(reverse("store:home"))

        assert response.context["store_name"] == "Harbor Gym"
        assert "<title>Harbor Gym</title>" in response.content.decode()


# =============================================================================
# Order intake form
# =============================================================================


@pytest.mark.django_db
class TestOrderFormView:
    """Tests for GET /<slug>/"""

    def test_shows_form(self, client, order_url):
        response = client.get(order_url)

        assert response.status_code == 200

    def test_binds_empty_order_to_kit(self, client, kit, order_url):
        response = client.get(order_url)

        assert response.context["kit"] == kit
        assert response.context["order"].kit == kit
        assert response.context["order"].pk is None
        assert not response.context["form"].is_bound

    def test_unknown_slug_is_not_found(self, client, kit):
        response = client.get("/invalid-kit-slug/")

        assert response.status_code == 404

    def test_slug_must_match_exactly(self, client, kit):
        response = client.get("/Test-Kit/")

        assert response.status_code == 404


@pytest.mark.django_db
class TestOrderSubmitView:
    """Tests for POST /<slug>/"""

    def test_creates_order(self, client, coupon, order_url, valid_fields):
        client.post(order_url, valid_fields)

        assert Order.objects.count() == 1

    def test_redirects_to_confirmation(self, client, coupon, order_url, valid_fields):
        response = client.post(order_url, valid_fields)

        order = Order.objects.get()
        assert response.status_code == 302
        assert response.url == reverse("store:order-detail", kwargs={"pk": order.pk})

    def test_success_message(self, client, coupon, order_url, valid_fields):
        response = client.post(order_url, valid_fields)

        assert message_texts(response) == ["Order placed successfully!"]

    def test_marks_coupon_used(self, client, coupon, order_url, valid_fields):
        client.post(order_url, valid_fields)

        coupon.refresh_from_db()
        assert coupon.usage == CouponCode.Usage.USED

    def test_increments_confirmation_number(self, client, coupon, order_url, valid_fields):
        existing = Order.objects.count()

        client.post(order_url, valid_fields)

        assert Order.objects.get().confirmation_number == existing + 1

    def test_invalid_coupon(self, client, coupon, order_url, valid_fields):
        valid_fields["coupon_code"] = "INVALID999"

        response = client.post(order_url, valid_fields)

        assert response.status_code == 422
        assert Order.objects.count() == 0
        assert message_texts(response) == ["Invalid coupon code"]
        assert "store/order_form.html" in [t.name for t in response.templates]

    def test_used_coupon(self, client, used_coupon, order_url, valid_fields):
        valid_fields["coupon_code"] = "USED123"

        response = client.post(order_url, valid_fields)

        assert response.status_code == 422
        assert Order.objects.count() == 0
        assert message_texts(response) == [
            "This code has been used before and can no longer be used to place an order"
        ]

    def test_coupon_rejection_keeps_form_data(self, client, coupon, order_url, valid_fields):
        valid_fields["coupon_code"] = "INVALID999"

        response = client.post(order_url, valid_fields)

        form = response.context["form"]
        assert form["last_name"].value() == "Doe"
        assert form["coupon_code"].value() == "INVALID999"

    def test_missing_fields(self, client, coupon, order_url, valid_fields):
        del valid_fields["first_name"]
        del valid_fields["email"]

        response = client.post(order_url, valid_fields)

        assert response.status_code == 422
        assert Order.objects.count() == 0
        assert message_texts(response) == ["Please correct the errors below"]
        errors = response.context["form"].errors
        assert errors["first_name"] == ["can't be blank"]
        assert errors["email"] == ["can't be blank"]
        coupon.refresh_from_db()
        assert coupon.is_unused

    def test_validation_errors_keep_form_data(self, client, coupon, order_url, valid_fields):
        del valid_fields["first_name"]

        response = client.post(order_url, valid_fields)

        form = response.context["form"]
        assert form["last_name"].value() == "Doe"
        assert form["email"].value() == "john@example.com"

    def test_unknown_slug_is_not_found(self, client, coupon, valid_fields):
        response = client.post("/invalid-kit-slug/", valid_fields)

        assert response.status_code == 404
        assert Order.objects.count() == 0

    def test_kit_deleted_after_routing(self, client, coupon, valid_fields):
        # Route gating passes, but the kit is gone by the time the order is placed
        with patch("fitkits.store.services.kit_exists", return_value=True):
            response = client.post("/ghost-kit/", valid_fields)

        assert response.status_code == 404
        coupon.refresh_from_db()
        assert coupon.is_unused


# =============================================================================
# Confirmation
# =============================================================================


@pytest.mark.django_db
class TestOrderDetailView:
    """Tests for GET /orders/<pk>/"""

    def test_shows_confirmation(self, client, order_factory):
        order = order_factory(confirmation_number=42, address2="Apt 5")

        response = client.get(reverse("store:order-detail", kwargs={"pk": order.pk}))

        assert response.status_code == 200
        assert response.context["order"] == order
        content = response.content.decode()
        assert "000042" in content
        assert "(415) 555-1234" in content
        assert "Apt 5" in content

    def test_follows_successful_submission(self, client, coupon, order_url, valid_fields):
        response = client.post(order_url, valid_fields, follow=True)

        assert response.status_code == 200
        assert "000001" in response.content.decode()
        assert "Order placed successfully!" in response.content.decode()

    def test_unknown_order_is_not_found(self, client, db):
        response = client.get(reverse("store:order-detail", kwargs={"pk": 99999}))

        assert response.status_code == 404
