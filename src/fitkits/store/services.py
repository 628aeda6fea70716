"""Store service layer.

Catalog lookups, the coupon ledger and the order workflow.
Views should call these functions instead of manipulating models directly.
"""

import enum
import logging
from dataclasses import dataclass, field

from django.db import DataError, IntegrityError, OperationalError, transaction
from django.db.models import Max
from django.utils import timezone

from .exceptions import (
    CommitConflict,
    CouponAlreadyUsed,
    CouponNotFound,
    KitNotFound,
    OrderNotFound,
)
from .forms import OrderForm
from .models import CouponCode, Kit, Order
from .normalizers import normalize_coupon_code, normalize_order_fields

logger = logging.getLogger(__name__)

INVALID_FIELDS_MESSAGE = "Please correct the errors below"


# =============================================================================
# Kit catalog
# =============================================================================


def kit_exists(slug: str) -> bool:
    """Check whether a kit with exactly this slug exists."""
    if not slug:
        return False
    return Kit.objects.filter(slug=slug).exists()


def get_kit(slug: str) -> Kit:
    """Get a kit by slug.

    Raises:
        KitNotFound: No kit has this slug
    """
    try:
        return Kit.objects.get(slug=slug)
    except Kit.DoesNotExist:
        raise KitNotFound(slug) from None


def list_kits():
    """All kits sorted by name ascending."""
    return Kit.objects.ordered_by_name()


# =============================================================================
# Coupon ledger
# =============================================================================


def find_coupon(code: str) -> CouponCode | None:
    """Look up a coupon case-insensitively, or return None."""
    normalized = normalize_coupon_code(code)
    if not normalized:
        return None
    return CouponCode.objects.filter(code=normalized).first()


def is_coupon_used(coupon: CouponCode) -> bool:
    return coupon.is_used


def mark_coupon_used(coupon: CouponCode) -> None:
    """Move a coupon from unused to used.

    The update is conditional on the row still being unused, so only one
    caller can ever win. Must run inside the transaction that inserts the
    consuming order.

    Raises:
        CouponAlreadyUsed: The coupon is already used in the database
        RuntimeError: Called outside transaction.atomic()
    """
    if not transaction.get_connection().in_atomic_block:
        raise RuntimeError("mark_coupon_used() must run inside transaction.atomic()")

    updated = CouponCode.objects.filter(
        pk=coupon.pk,
        usage=CouponCode.Usage.UNUSED,
    ).update(usage=CouponCode.Usage.USED, updated_at=timezone.now())

    if not updated:
        raise CouponAlreadyUsed(coupon.code)

    coupon.usage = CouponCode.Usage.USED


# =============================================================================
# Orders
# =============================================================================


class Outcome(enum.Enum):
    COMMITTED = "committed"
    KIT_NOT_FOUND = "kit_not_found"
    INVALID_COUPON = "invalid_coupon"
    COUPON_USED = "coupon_used"
    INVALID_FIELDS = "invalid_fields"
    COMMIT_FAILED = "commit_failed"


@dataclass
class SubmissionResult:
    """Result of one order submission.

    On success `order` is the committed order. Otherwise `error` holds
    the message for the customer and `form` is ready to be redisplayed
    with the submitted values.
    """

    outcome: Outcome
    order: Order | None = None
    form: OrderForm | None = None
    error: str = ""
    field_errors: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.COMMITTED


def new_order(kit: Kit) -> Order:
    """Unsaved order bound to a kit, for the empty intake form."""
    return Order(kit=kit)


def get_order(pk) -> Order:
    """Get an order with its kit.

    Raises:
        OrderNotFound: No order has this id
    """
    try:
        return Order.objects.select_related("kit").get(pk=pk)
    except (Order.DoesNotExist, ValueError):
        raise OrderNotFound(pk) from None


def next_confirmation_number() -> int:
    """One more than the highest confirmation number, 1 for the first order."""
    current = Order.objects.aggregate(highest=Max("confirmation_number"))["highest"]
    return (current or 0) + 1


def submit_order(kit_slug: str, coupon_code: str, fields) -> SubmissionResult:
    """Validate an order submission and commit it while consuming the coupon.

    Args:
        kit_slug: Slug of the kit being ordered
        coupon_code: Coupon code as typed by the customer
        fields: Submitted form data (QueryDict or mapping)

    Returns:
        SubmissionResult; never raises for customer errors or commit conflicts
    """
    try:
        kit = get_kit(kit_slug)
    except KitNotFound as e:
        logger.info("Order rejected: unknown kit", extra={"kit_slug": kit_slug})
        return SubmissionResult(outcome=Outcome.KIT_NOT_FOUND, error=str(e))

    try:
        coupon = _resolve_coupon(coupon_code)
    except CouponNotFound as e:
        logger.info("Order rejected: invalid coupon", extra={"kit_slug": kit_slug})
        return SubmissionResult(
            outcome=Outcome.INVALID_COUPON,
            form=OrderForm(initial=_submitted(fields)),
            error=e.message,
        )
    except CouponAlreadyUsed as e:
        logger.info(
            "Order rejected: coupon already used",
            extra={"kit_slug": kit_slug, "coupon_code": e.code},
        )
        return SubmissionResult(
            outcome=Outcome.COUPON_USED,
            form=OrderForm(initial=_submitted(fields)),
            error=e.message,
        )

    logger.debug("Coupon resolved", extra={"kit_slug": kit_slug, "coupon_id": coupon.pk})

    form = OrderForm(data=normalize_order_fields(fields))
    if not form.is_valid():
        field_errors = {name: list(errors) for name, errors in form.errors.items()}
        logger.info(
            "Order rejected: invalid fields",
            extra={"kit_slug": kit_slug, "fields": sorted(field_errors)},
        )
        return SubmissionResult(
            outcome=Outcome.INVALID_FIELDS,
            form=form,
            error=INVALID_FIELDS_MESSAGE,
            field_errors=field_errors,
        )

    logger.debug("Order validated", extra={"kit_slug": kit_slug, "coupon_id": coupon.pk})

    try:
        order = _commit_order(kit, coupon, form.cleaned_order_fields())
    except CouponAlreadyUsed as e:
        logger.info(
            "Order rejected: coupon consumed concurrently",
            extra={"kit_slug": kit_slug, "coupon_id": coupon.pk},
        )
        return SubmissionResult(
            outcome=Outcome.COUPON_USED,
            form=OrderForm(initial=form.data),
            error=e.message,
        )
    except CommitConflict as e:
        logger.warning(
            "Order commit failed",
            extra={"kit_slug": kit_slug, "coupon_id": coupon.pk, "error": e.detail},
        )
        return SubmissionResult(
            outcome=Outcome.COMMIT_FAILED,
            form=OrderForm(initial=form.data),
            error=e.message,
        )

    logger.info(
        "Order placed",
        extra={
            "order_id": order.pk,
            "confirmation_number": order.confirmation_number,
            "kit_slug": kit.slug,
            "coupon_id": coupon.pk,
        },
    )
    return SubmissionResult(outcome=Outcome.COMMITTED, order=order, form=form)


def _submitted(fields) -> dict:
    """Plain dict of submitted values, untouched, for redisplay."""
    return {key: fields.get(key) for key in fields}


def _resolve_coupon(code: str) -> CouponCode:
    coupon = find_coupon(code)
    if coupon is None:
        raise CouponNotFound(normalize_coupon_code(code))
    if is_coupon_used(coupon):
        raise CouponAlreadyUsed(coupon.code)
    return coupon


def _commit_order(kit: Kit, coupon: CouponCode, order_fields: dict) -> Order:
    """Insert the order and consume the coupon as one atomic unit.

    Raises:
        CouponAlreadyUsed: Another order consumed the coupon first
        CommitConflict: The database rejected the insert (uniqueness, locking, bad data)
    """
    try:
        with transaction.atomic():
            # Row lock serializes concurrent submissions on this coupon
            locked = CouponCode.objects.select_for_update().get(pk=coupon.pk)
            if locked.is_used:
                raise CouponAlreadyUsed(locked.code)

            order = Order(
                kit=kit,
                coupon=locked,
                confirmation_number=next_confirmation_number(),
                **order_fields,
            )
            order.save()
            mark_coupon_used(locked)
    except (DataError, IntegrityError, OperationalError) as e:
        raise CommitConflict(str(e)) from e

    coupon.usage = locked.usage
    return order
